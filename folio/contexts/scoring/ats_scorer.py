"""
ATS Readiness Scoring

Computes a deterministic 0-100 readiness score and explainable suggestions
from a ResumeDocument. Pure functions, no I/O.

Point table (additive, each criterion counted once):

    summary between 40 and 120 words      15
    at least 2 meaningful projects        10
    at least 1 meaningful experience      10
    at least 8 distinct skills            10
    GitHub or LinkedIn link               10
    numbers in impact bullets             15
    at least one complete education       10

The table sums to 80. Scores are the raw sum, capped at 100.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from folio.contexts.normalization.resume_data_structure import (
    ExperienceEntry,
    ProjectEntry,
    ResumeDocument,
)
from folio.contexts.scoring.predicates import (
    contains_numeric_impact,
    count_words,
    get_all_skills,
    has_link,
    is_complete_education,
    is_meaningful_experience,
    is_meaningful_project,
    split_bullets,
)

MAX_SCORE = 100
MAX_SUGGESTIONS = 3

SUMMARY_MIN_WORDS = 40
SUMMARY_MAX_WORDS = 120
MIN_PROJECTS = 2
MIN_EXPERIENCE = 1
MIN_SKILLS = 8

POINTS = {
    "summary": 15,
    "projects": 10,
    "experience": 10,
    "skills": 10,
    "link": 10,
    "impact": 15,
    "education": 10,
}

SUGGESTION_MESSAGES = {
    "summary": "Write a stronger summary (40-120 words).",
    "projects": "Add at least 2 projects.",
    "impact": "Add measurable impact (numbers) in bullets.",
    "skills": "Add more skills (target 8+).",
    "link": "Add GitHub or LinkedIn link.",
}

# Education completeness scores points but never produces a suggestion
SUGGESTION_ORDER = ("summary", "projects", "impact", "skills", "link")

IMPROVEMENT_MESSAGES = {
    "projects": "Add at least 2 projects.",
    "impact": "Add measurable impact (numbers) in bullets.",
    "summary": "Expand summary to at least 40 words.",
    "skills": "Add more skills (target 8+).",
    "experience": "Add internship or project-based experience.",
}


@dataclass(frozen=True)
class AtsCriteria:
    """
    Derived quantities the score and both suggestion lists are computed from.

    Attributes:
        summary_words: Word count of the summary
        project_entries: Meaningful projects
        experience_entries: Meaningful experience entries
        skills_items: Deduplicated skills across categories and the legacy string
        has_link: GitHub or LinkedIn is set
        complete_education: Some education entry has school, degree and year
        impact_lines: Bullets from meaningful experience/project highlights and
            meaningful project descriptions
    """

    summary_words: int
    project_entries: Tuple[ProjectEntry, ...]
    experience_entries: Tuple[ExperienceEntry, ...]
    skills_items: Tuple[str, ...]
    has_link: bool
    complete_education: bool
    impact_lines: Tuple[str, ...]

    @property
    def has_impact_numbers(self) -> bool:
        return any(contains_numeric_impact(line) for line in self.impact_lines)

    @property
    def summary_in_range(self) -> bool:
        return SUMMARY_MIN_WORDS <= self.summary_words <= SUMMARY_MAX_WORDS

    def passed(self) -> Dict[str, bool]:
        """Map each scored criterion to whether it is met."""
        return {
            "summary": self.summary_in_range,
            "projects": len(self.project_entries) >= MIN_PROJECTS,
            "experience": len(self.experience_entries) >= MIN_EXPERIENCE,
            "skills": len(self.skills_items) >= MIN_SKILLS,
            "link": self.has_link,
            "impact": self.has_impact_numbers,
            "education": self.complete_education,
        }


@dataclass(frozen=True)
class AtsResult:
    """
    Score panel data. Derived on demand, never persisted.

    Attributes:
        score: Integer 0-100
        suggestions: At most 3 suggestions, highest priority first
        all_criteria_met: True iff no suggestion-eligible criterion fails
            (independent of the 3-item cap)
    """

    score: int
    suggestions: Tuple[str, ...] = field(default_factory=tuple)
    all_criteria_met: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "suggestions": list(self.suggestions),
            "allCriteriaMet": self.all_criteria_met,
        }


def _impact_lines(
    experience_entries: Tuple[ExperienceEntry, ...], project_entries: Tuple[ProjectEntry, ...]
) -> Tuple[str, ...]:
    lines: List[str] = []
    for entry in experience_entries:
        lines.extend(split_bullets(entry.highlights))
    for entry in project_entries:
        lines.extend(split_bullets(entry.highlights))
        lines.extend(split_bullets(entry.description))
    return tuple(lines)


def evaluate_criteria(document: ResumeDocument) -> AtsCriteria:
    """Compute every derived quantity used by scoring."""
    project_entries = tuple(entry for entry in document.projects if is_meaningful_project(entry))
    experience_entries = tuple(
        entry for entry in document.experience if is_meaningful_experience(entry)
    )
    return AtsCriteria(
        summary_words=count_words(document.summary),
        project_entries=project_entries,
        experience_entries=experience_entries,
        skills_items=tuple(get_all_skills(document)),
        has_link=has_link(document),
        complete_education=any(is_complete_education(entry) for entry in document.education),
        impact_lines=_impact_lines(experience_entries, project_entries),
    )


def compute_ats_score(document: ResumeDocument) -> AtsResult:
    """
    Score a resume for ATS readiness.

    Args:
        document: Normalized resume document

    Returns:
        AtsResult with score, up to 3 suggestions and the all-criteria flag

    Example:
        >>> from folio.contexts.normalization import create_empty_resume
        >>> result = compute_ats_score(create_empty_resume())
        >>> result.score, len(result.suggestions), result.all_criteria_met
        (0, 3, False)
    """
    passed = evaluate_criteria(document).passed()

    score = sum(POINTS[name] for name, ok in passed.items() if ok)
    suggestions = [SUGGESTION_MESSAGES[name] for name in SUGGESTION_ORDER if not passed[name]]

    return AtsResult(
        score=min(MAX_SCORE, score),
        suggestions=tuple(suggestions[:MAX_SUGGESTIONS]),
        all_criteria_met=len(suggestions) == 0,
    )


def compute_top_improvements(document: ResumeDocument) -> List[str]:
    """
    Rank the most valuable next edits (at most 3).

    Uses its own priority order, distinct from AtsResult.suggestions:
    projects, impact numbers, short summary (< 40 words only), skills, missing
    experience.
    """
    criteria = evaluate_criteria(document)
    passed = criteria.passed()

    items = []
    if not passed["projects"]:
        items.append(IMPROVEMENT_MESSAGES["projects"])
    if not passed["impact"]:
        items.append(IMPROVEMENT_MESSAGES["impact"])
    if criteria.summary_words < SUMMARY_MIN_WORDS:
        items.append(IMPROVEMENT_MESSAGES["summary"])
    if not passed["skills"]:
        items.append(IMPROVEMENT_MESSAGES["skills"])
    if len(criteria.experience_entries) == 0:
        items.append(IMPROVEMENT_MESSAGES["experience"])
    return items[:MAX_SUGGESTIONS]
