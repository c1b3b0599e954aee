"""
Resume Editing

Field-by-field mutations of a ResumeDocument. Every function returns a new
document and leaves its input untouched; unchanged entries are shared (they are
immutable), changed entries are rebuilt.

List invariants are preserved:
- deleting the only entry of a list clears it instead (lists never become empty)
- skill and tech stack additions are trimmed, non-blank and unique ignoring case
- project descriptions are truncated to DESCRIPTION_MAX_LENGTH when set
- edited scalar values are coerced to text with string_or_empty (None becomes "")
- removing a skill also drops it from the legacy comma-separated skills string

Index and category errors are caller bugs and raise IndexError / ValueError.
"""

from dataclasses import fields, replace
from typing import Iterable, Tuple, TypeVar

from folio.contexts.normalization.defaults import DESCRIPTION_MAX_LENGTH, SKILL_CATEGORIES
from folio.contexts.normalization.normalizer import create_empty_resume
from folio.contexts.normalization.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeDocument,
    SkillsByCategory,
)
from folio.contexts.normalization.shapes import string_or_empty

T = TypeVar("T")

LIST_FIELDS = {
    "education": EducationEntry,
    "experience": ExperienceEntry,
    "projects": ProjectEntry,
}


# ============================================================================
# Helpers
# ============================================================================


def _check_index(items: Tuple, index: int, list_name: str) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"{list_name} index {index} out of range (0..{len(items) - 1})")


def _check_fields(entry_type: type, updates: dict) -> None:
    allowed = {f.name for f in fields(entry_type)}
    unknown = set(updates) - allowed
    if unknown:
        raise ValueError(f"Unknown {entry_type.__name__} fields: {sorted(unknown)}")


def update_list_item(items: Tuple[T, ...], index: int, item: T) -> Tuple[T, ...]:
    """Return a copy of items with position index replaced by item."""
    return tuple(item if i == index else current for i, current in enumerate(items))


def unique_push(items: Tuple[str, ...], value: str) -> Tuple[str, ...]:
    """
    Append value unless it is blank or already present ignoring case.

    Example:
        >>> unique_push(("React",), " react ")
        ('React',)
        >>> unique_push(("React",), " Go ")
        ('React', 'Go')
    """
    normalized = value.strip()
    if not normalized:
        return items
    if any(item.lower() == normalized.lower() for item in items):
        return items
    return items + (normalized,)


def _coerce(updates: dict) -> dict:
    return {name: string_or_empty(value) for name, value in updates.items()}


def _update_entry(document: ResumeDocument, list_name: str, index: int, **updates) -> ResumeDocument:
    items = getattr(document, list_name)
    _check_index(items, index, list_name)
    _check_fields(LIST_FIELDS[list_name], updates)
    entry = replace(items[index], **_coerce(updates))
    return replace(document, **{list_name: update_list_item(items, index, entry)})


def _clear_entry(document: ResumeDocument, list_name: str, index: int) -> ResumeDocument:
    items = getattr(document, list_name)
    _check_index(items, index, list_name)
    blank = LIST_FIELDS[list_name]()
    return replace(document, **{list_name: update_list_item(items, index, blank)})


def _delete_entry(document: ResumeDocument, list_name: str, index: int) -> ResumeDocument:
    items = getattr(document, list_name)
    _check_index(items, index, list_name)
    if len(items) == 1:
        return _clear_entry(document, list_name, index)
    remaining = tuple(item for i, item in enumerate(items) if i != index)
    return replace(document, **{list_name: remaining})


def _add_entry(document: ResumeDocument, list_name: str) -> ResumeDocument:
    items = getattr(document, list_name)
    return replace(document, **{list_name: items + (LIST_FIELDS[list_name](),)})


# ============================================================================
# Scalar fields
# ============================================================================


def update_personal(document: ResumeDocument, **updates: str) -> ResumeDocument:
    """
    Update contact fields.

    Example:
        >>> doc = update_personal(create_empty_resume(), name="Alex Carter")
        >>> doc.personal.name
        'Alex Carter'
    """
    _check_fields(PersonalInfo, updates)
    return replace(document, personal=replace(document.personal, **_coerce(updates)))


def update_summary(document: ResumeDocument, summary: str) -> ResumeDocument:
    return replace(document, summary=string_or_empty(summary))


def update_links(document: ResumeDocument, github: str = None, linkedin: str = None) -> ResumeDocument:
    """Update profile links; None leaves a link unchanged."""
    return replace(
        document,
        github=document.github if github is None else string_or_empty(github),
        linkedin=document.linkedin if linkedin is None else string_or_empty(linkedin),
    )


# ============================================================================
# Education / experience / projects
# ============================================================================


def update_education(document: ResumeDocument, index: int, **updates: str) -> ResumeDocument:
    return _update_entry(document, "education", index, **updates)


def update_experience(document: ResumeDocument, index: int, **updates: str) -> ResumeDocument:
    return _update_entry(document, "experience", index, **updates)


def update_project(document: ResumeDocument, index: int, **updates) -> ResumeDocument:
    """
    Update project fields, truncating the description to DESCRIPTION_MAX_LENGTH.

    Use add_project_tech/remove_project_tech for the tech stack so its
    uniqueness rule is kept.
    """
    if "tech_stack" in updates:
        raise ValueError("Use add_project_tech/remove_project_tech to change tech_stack")
    if "description" in updates:
        updates["description"] = string_or_empty(updates["description"])[:DESCRIPTION_MAX_LENGTH]
    return _update_entry(document, "projects", index, **updates)


def add_education(document: ResumeDocument) -> ResumeDocument:
    return _add_entry(document, "education")


def add_experience(document: ResumeDocument) -> ResumeDocument:
    return _add_entry(document, "experience")


def add_project(document: ResumeDocument) -> ResumeDocument:
    return _add_entry(document, "projects")


def clear_education_entry(document: ResumeDocument, index: int) -> ResumeDocument:
    return _clear_entry(document, "education", index)


def clear_experience_entry(document: ResumeDocument, index: int) -> ResumeDocument:
    return _clear_entry(document, "experience", index)


def clear_project_entry(document: ResumeDocument, index: int) -> ResumeDocument:
    return _clear_entry(document, "projects", index)


def delete_education_entry(document: ResumeDocument, index: int) -> ResumeDocument:
    return _delete_entry(document, "education", index)


def delete_experience_entry(document: ResumeDocument, index: int) -> ResumeDocument:
    return _delete_entry(document, "experience", index)


def delete_project_entry(document: ResumeDocument, index: int) -> ResumeDocument:
    return _delete_entry(document, "projects", index)


# ============================================================================
# Skills and tech stacks (tag-style entry)
# ============================================================================


def _replace_category(
    skills: SkillsByCategory, category: str, values: Tuple[str, ...]
) -> SkillsByCategory:
    if category not in SKILL_CATEGORIES:
        raise ValueError(f"Unknown skill category: {category}")
    return replace(skills, **{category: values})


def add_skill(document: ResumeDocument, category: str, skill: str) -> ResumeDocument:
    """
    Add a skill to a category; blank or duplicate (ignoring case) skills are no-ops.

    Raises:
        ValueError: If category is not technical, soft or tools
    """
    current = document.skills_by_category.get(category)
    updated = unique_push(current, skill)
    if updated is current:
        return document
    return replace(
        document,
        skills_by_category=_replace_category(document.skills_by_category, category, updated),
    )


def drop_legacy_skill(legacy: str, skill: str) -> str:
    """
    Remove every comma entry matching skill (trimmed, ignoring case) from a legacy string.

    Example:
        >>> drop_legacy_skill("SQL, Python, , python", "Python")
        'SQL, '
    """
    target = skill.strip().lower()
    kept = [part for part in legacy.split(",") if part.strip().lower() != target]
    return ",".join(kept)


def remove_skill(document: ResumeDocument, category: str, skill: str) -> ResumeDocument:
    """
    Remove an exact skill value from a category.

    Matching entries of the legacy skills string are dropped as well, so the
    skill is neither counted nor restored from the string on reload.
    """
    current = document.skills_by_category.get(category)
    updated = tuple(item for item in current if item != skill)
    return replace(
        document,
        skills_by_category=_replace_category(document.skills_by_category, category, updated),
        skills=drop_legacy_skill(document.skills, skill),
    )


def merge_suggested_skills(
    document: ResumeDocument, category: str, suggestions: Iterable[str]
) -> ResumeDocument:
    """Add each suggested skill with the add_skill rule, keeping existing order."""
    for skill in suggestions:
        document = add_skill(document, category, skill)
    return document


def add_project_tech(document: ResumeDocument, index: int, tech: str) -> ResumeDocument:
    _check_index(document.projects, index, "projects")
    entry = document.projects[index]
    updated = unique_push(entry.tech_stack, tech)
    if updated is entry.tech_stack:
        return document
    return replace(
        document,
        projects=update_list_item(document.projects, index, replace(entry, tech_stack=updated)),
    )


def remove_project_tech(document: ResumeDocument, index: int, tech: str) -> ResumeDocument:
    _check_index(document.projects, index, "projects")
    entry = document.projects[index]
    updated = tuple(item for item in entry.tech_stack if item != tech)
    return replace(
        document,
        projects=update_list_item(document.projects, index, replace(entry, tech_stack=updated)),
    )


# ============================================================================
# Sample data
# ============================================================================

# Technical skills offered by the "suggest skills" action
SUGGESTED_TECHNICAL_SKILLS = ("TypeScript", "React", "Node.js", "PostgreSQL", "GraphQL")


def create_sample_resume() -> ResumeDocument:
    """Build the demo document offered by the "load sample data" action."""
    return ResumeDocument(
        personal=PersonalInfo(
            name="Alex Carter",
            email="alex.carter@email.com",
            phone="+1 (555) 100-2000",
            location="Austin, TX",
        ),
        summary=(
            "Product-focused software engineer with experience building full-stack applications, "
            "improving developer workflows, and shipping user-facing features with measurable "
            "outcomes across frontend and backend systems. Strong in React, TypeScript, Node.js, "
            "and API design with a focus on reliable delivery and clean architecture."
        ),
        education=(
            EducationEntry(school="State University", degree="B.S. Computer Science", year="2024"),
        ),
        experience=(
            ExperienceEntry(
                company="Nexa Labs",
                role="Software Engineer",
                duration="2024 - Present",
                highlights=(
                    "Improved page load speed by 32% across core workflows.\n"
                    "Reduced incident count by 18% using release guardrails."
                ),
            ),
        ),
        projects=(
            ProjectEntry(
                title="Portfolio Platform",
                description="Built modular web experience for client showcases and content operations.",
                tech_stack=("React", "TypeScript"),
                live_url="https://example.com",
                github_url="https://github.com/example/portfolio",
                highlights="Improved engagement by 24%",
            ),
        ),
        skills_by_category=SkillsByCategory(
            technical=("React", "TypeScript", "Node.js"),
            soft=("Problem Solving",),
            tools=("Git",),
        ),
        github="https://github.com/example",
        linkedin="https://linkedin.com/in/example",
    )


def clear_resume() -> ResumeDocument:
    """Reset every field to blank (the document itself is never deleted)."""
    return create_empty_resume()
