"""
Resume Predicate Library

Pure boolean and derivation functions over a ResumeDocument, shared by the
scoring engine and the rendering context (visibility, completeness and text
feature detection).

All functions are stateless and return fresh lists, so they can be called
repeatedly on the same input with the same result.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Union

from folio.contexts.normalization.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeDocument,
)
from folio.contexts.scoring.patterns import ACTION_VERBS, NUMERIC_IMPACT_RE, TextPatterns

ResumeEntry = Union[EducationEntry, ExperienceEntry, ProjectEntry]


def _is_blank(value: str) -> bool:
    return len(value.strip()) == 0


# ============================================================================
# Entry predicates
# ============================================================================


def is_meaningful_education(entry: EducationEntry) -> bool:
    return any(not _is_blank(value) for value in (entry.school, entry.degree, entry.year))


def is_meaningful_experience(entry: ExperienceEntry) -> bool:
    return any(
        not _is_blank(value)
        for value in (entry.company, entry.role, entry.duration, entry.highlights)
    )


def is_meaningful_project(entry: ProjectEntry) -> bool:
    """A project with only a tech stack still counts as meaningful."""
    text_fields = (entry.title, entry.description, entry.live_url, entry.github_url, entry.highlights)
    return any(not _is_blank(value) for value in text_fields) or len(entry.tech_stack) > 0


def is_meaningful(entry: ResumeEntry) -> bool:
    """
    Check whether a list entry carries any content.

    Args:
        entry: EducationEntry, ExperienceEntry or ProjectEntry

    Returns:
        True if at least one textual field is non-blank after trimming
        (or, for projects, the tech stack is non-empty)

    Raises:
        TypeError: If entry is not a resume list entry
    """
    if isinstance(entry, EducationEntry):
        return is_meaningful_education(entry)
    if isinstance(entry, ExperienceEntry):
        return is_meaningful_experience(entry)
    if isinstance(entry, ProjectEntry):
        return is_meaningful_project(entry)
    raise TypeError(f"Not a resume entry: {type(entry).__name__}")


def is_complete_education(entry: EducationEntry) -> bool:
    """True only if school, degree and year are all non-blank."""
    return not (_is_blank(entry.school) or _is_blank(entry.degree) or _is_blank(entry.year))


# ============================================================================
# Text features
# ============================================================================


def count_words(text: str) -> int:
    """
    Count whitespace-delimited tokens.

    Examples:
        >>> count_words("")
        0
        >>> count_words("a b  c")
        3
    """
    return len(text.split())


def split_bullets(text: str) -> List[str]:
    """
    Split free text into bullets: one per line, trimmed, blank lines dropped.

    Example:
        >>> split_bullets("a\\n\\nb \\n")
        ['a', 'b']
    """
    lines = re.split(TextPatterns.LINE_BREAK, text)
    return [line.strip() for line in lines if line.strip()]


def split_description_points(text: str) -> List[str]:
    """
    Turn a dense description into bullet points, one per sentence.

    Example:
        >>> split_description_points("Built an API. Cut latency 40%. ")
        ['Built an API.', 'Cut latency 40%.']
    """
    fragments = re.split(TextPatterns.SENTENCE_BREAK, text)
    return [f"{fragment.strip()}." for fragment in fragments if fragment.strip()]


def split_skills(text: str) -> List[str]:
    """Split a legacy comma-separated skills string (no deduplication)."""
    items = re.split(TextPatterns.SKILL_SEPARATOR, text)
    return [item.strip() for item in items if item.strip()]


def contains_numeric_impact(text: str) -> bool:
    """
    Check for a measurable number: percentage, bare number, multiplier or thousands.

    Examples:
        >>> contains_numeric_impact("Improved speed by 32%")
        True
        >>> contains_numeric_impact("Improved speed")
        False
        >>> contains_numeric_impact("Cut time 3x")
        True
    """
    return NUMERIC_IMPACT_RE.search(text) is not None


# Alias used by the project description guidance
has_numeric_indicator = contains_numeric_impact


def starts_with_action_verb(line: str) -> bool:
    """
    Check whether a bullet opens with one of the fixed action verbs.

    Exact, case-sensitive literal match followed by a space or end of line.
    """
    trimmed = line.strip()
    return any(trimmed == verb or trimmed.startswith(f"{verb} ") for verb in ACTION_VERBS)


# ============================================================================
# Document derivations
# ============================================================================


def get_all_skills(document: ResumeDocument) -> List[str]:
    """
    Union of categorized skills and the legacy skills string.

    Order: technical, soft, tools, then legacy entries. Duplicates are removed
    ignoring case; the first-seen casing wins.
    """
    candidates = list(document.skills_by_category.all_items()) + split_skills(document.skills)
    seen = set()
    result = []
    for skill in candidates:
        text = skill.strip()
        if not text or text.lower() in seen:
            continue
        seen.add(text.lower())
        result.append(text)
    return result


def has_link(document: ResumeDocument) -> bool:
    return not _is_blank(document.github) or not _is_blank(document.linkedin)


def has_personal_info(document: ResumeDocument) -> bool:
    personal = document.personal
    return any(
        not _is_blank(value)
        for value in (personal.name, personal.email, personal.phone, personal.location)
    )


def has_any_preview_content(document: ResumeDocument) -> bool:
    """True if anything at all would appear in the resume preview."""
    return (
        has_personal_info(document)
        or not _is_blank(document.summary)
        or any(is_meaningful_education(entry) for entry in document.education)
        or any(is_meaningful_experience(entry) for entry in document.experience)
        or any(is_meaningful_project(entry) for entry in document.projects)
        or len(get_all_skills(document)) > 0
        or has_link(document)
    )


# ============================================================================
# Editor guidance
# ============================================================================


@dataclass(frozen=True)
class ProjectGuidance:
    """Hints shown under a project description while it is being written."""

    needs_verb: bool
    needs_number: bool


def project_guidance(description: str) -> Optional[ProjectGuidance]:
    """
    Suggest improvements for a project description.

    Returns:
        None if the description is blank or already starts with an action verb
        and contains a number; otherwise which of the two is missing
    """
    text = description.strip()
    if not text:
        return None
    needs_verb = not starts_with_action_verb(text)
    needs_number = not has_numeric_indicator(text)
    if not needs_verb and not needs_number:
        return None
    return ProjectGuidance(needs_verb=needs_verb, needs_number=needs_number)


def score_tone(score: int) -> str:
    """Bucket a score for display: "low" (< 40), "mid" (< 75) or "high"."""
    if score < 40:
        return "low"
    if score < 75:
        return "mid"
    return "high"
