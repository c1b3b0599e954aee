"""
Resume Normalization and Canonicalization

Converts arbitrary (possibly malformed) persisted or imported data into a
canonical ResumeDocument.

normalize_resume() is total: it never raises. Malformed input degrades to
defaults instead of producing errors.
- Input that is not a mapping -> the all-blank document
- Scalars -> string_or_empty() (missing, None and nested values become "")
- List fields that are missing, empty or not lists -> single blank placeholder
- List elements are coerced one by one; malformed elements become blank entries
  (length is preserved)
- Projects accept the modern shape (title, techStack, liveUrl, githubUrl) or the
  legacy shape (name only)
- Skills accept category lists or the legacy comma-separated string

Normalizing a normalized document's wire form yields the same document:
    normalize_resume(doc.to_dict()) == doc
"""

from typing import Any, Callable, Iterable, Mapping, Tuple, TypeVar

from folio.contexts.normalization.defaults import DESCRIPTION_MAX_LENGTH
from folio.contexts.normalization.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeDocument,
    SkillsByCategory,
)
from folio.contexts.normalization.shapes import (
    CategorizedSkillsShape,
    LegacyProjectShape,
    LegacySkillsShape,
    MalformedProjectShape,
    ModernProjectShape,
    classify_project,
    classify_skills,
    is_sequence,
    string_or_empty,
)

T = TypeVar("T")


def create_empty_resume() -> ResumeDocument:
    """Create the all-blank document used on first use and for bad input."""
    return ResumeDocument()


def unique_trimmed(values: Iterable[Any]) -> Tuple[str, ...]:
    """
    Trim, drop blanks and drop case-insensitive duplicates (first occurrence wins).

    Args:
        values: Raw values (coerced with string_or_empty)

    Returns:
        Ordered tuple of unique non-blank strings

    Example:
        >>> unique_trimmed([" React", "react ", "", "Go"])
        ('React', 'Go')
    """
    seen = set()
    result = []
    for value in values:
        text = string_or_empty(value).strip()
        if not text:
            continue
        key = text.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(text)
    return tuple(result)


def truncate_description(text: str) -> str:
    return text[:DESCRIPTION_MAX_LENGTH]


def _field(raw: Any, key: str) -> str:
    """Read one scalar field from a raw mapping (non-mappings yield "")."""
    if not isinstance(raw, Mapping):
        return ""
    return string_or_empty(raw.get(key))


def _normalize_list(raw: Any, normalize_item: Callable[[Any], T], default: T) -> Tuple[T, ...]:
    if not is_sequence(raw) or len(raw) == 0:
        return (default,)
    return tuple(normalize_item(item) for item in raw)


def _normalize_personal(raw: Any) -> PersonalInfo:
    return PersonalInfo(
        name=_field(raw, "name"),
        email=_field(raw, "email"),
        phone=_field(raw, "phone"),
        location=_field(raw, "location"),
    )


def _normalize_education_entry(raw: Any) -> EducationEntry:
    return EducationEntry(
        school=_field(raw, "school"),
        degree=_field(raw, "degree"),
        year=_field(raw, "year"),
    )


def _normalize_experience_entry(raw: Any) -> ExperienceEntry:
    return ExperienceEntry(
        company=_field(raw, "company"),
        role=_field(raw, "role"),
        duration=_field(raw, "duration"),
        highlights=_field(raw, "highlights"),
    )


def _normalize_project_entry(raw: Any) -> ProjectEntry:
    """
    Normalize one project element by dispatching over its classified shape.

    Modern projects keep their links and tech stack; `title` falls back to the
    legacy `name` key when absent or null. Legacy projects only contribute name,
    description and highlights.
    """
    shape = classify_project(raw)

    if isinstance(shape, ModernProjectShape):
        data = shape.raw
        title_key = "title" if data.get("title") is not None else "name"
        tech_stack = data.get("techStack")
        return ProjectEntry(
            title=_field(data, title_key),
            description=truncate_description(_field(data, "description")),
            tech_stack=unique_trimmed(tech_stack) if is_sequence(tech_stack) else (),
            live_url=_field(data, "liveUrl"),
            github_url=_field(data, "githubUrl"),
            highlights=_field(data, "highlights"),
        )

    if isinstance(shape, LegacyProjectShape):
        data = shape.raw
        return ProjectEntry(
            title=_field(data, "name"),
            description=truncate_description(_field(data, "description")),
            highlights=_field(data, "highlights"),
        )

    if isinstance(shape, MalformedProjectShape):
        return ProjectEntry()

    raise TypeError(f"Unhandled project shape: {type(shape).__name__}")


def split_legacy_skills(text: str) -> Tuple[str, ...]:
    """Split a legacy comma-separated skills string into unique trimmed entries."""
    return unique_trimmed(text.split(","))


def _normalize_skills(raw_categories: Any, legacy: str) -> SkillsByCategory:
    shape = classify_skills(raw_categories, legacy)

    if isinstance(shape, CategorizedSkillsShape):
        return SkillsByCategory(
            technical=unique_trimmed(shape.categories.get("technical", [])),
            soft=unique_trimmed(shape.categories.get("soft", [])),
            tools=unique_trimmed(shape.categories.get("tools", [])),
        )

    if isinstance(shape, LegacySkillsShape):
        return SkillsByCategory(technical=split_legacy_skills(legacy))

    raise TypeError(f"Unhandled skills shape: {type(shape).__name__}")


def normalize_resume(raw: Any) -> ResumeDocument:
    """
    Coerce arbitrary data into a canonical ResumeDocument.

    Never raises on user data. Deserialization failures are handled by the
    caller (see persistence/resume_store.py), which passes {} instead.

    Args:
        raw: Parsed stored data, imported data, or an existing ResumeDocument

    Returns:
        ResumeDocument satisfying every document invariant

    Examples:
        >>> normalize_resume(None) == create_empty_resume()
        True
        >>> doc = normalize_resume({"skills": "Python, SQL, python"})
        >>> doc.skills_by_category.technical
        ('Python', 'SQL')
        >>> doc.skills
        'Python, SQL, python'
    """
    if isinstance(raw, ResumeDocument):
        raw = raw.to_dict()

    if not isinstance(raw, Mapping):
        return create_empty_resume()

    legacy_skills = string_or_empty(raw.get("skills"))

    return ResumeDocument(
        personal=_normalize_personal(raw.get("personal")),
        summary=string_or_empty(raw.get("summary")),
        education=_normalize_list(raw.get("education"), _normalize_education_entry, EducationEntry()),
        experience=_normalize_list(
            raw.get("experience"), _normalize_experience_entry, ExperienceEntry()
        ),
        projects=_normalize_list(raw.get("projects"), _normalize_project_entry, ProjectEntry()),
        skills_by_category=_normalize_skills(raw.get("skillsByCategory"), legacy_skills),
        skills=legacy_skills,
        github=string_or_empty(raw.get("github")),
        linkedin=string_or_empty(raw.get("linkedin")),
    )
