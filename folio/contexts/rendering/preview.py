"""
Resume Preview View-Model

Derives what the live preview shows from a ResumeDocument: only visible
(meaningful) entries, pre-joined heading lines, bullet lists and skill groups.
Templates render this structure and never inspect the raw document.
"""

from dataclasses import dataclass, field
from typing import List

from folio.contexts.normalization.defaults import SKILL_CATEGORIES, SKILL_CATEGORY_LABELS
from folio.contexts.normalization.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeDocument,
)
from folio.contexts.scoring.predicates import (
    get_all_skills,
    has_any_preview_content,
    is_meaningful_education,
    is_meaningful_experience,
    is_meaningful_project,
    split_bullets,
    split_description_points,
)


@dataclass(frozen=True)
class LinkPreview:
    label: str
    url: str


@dataclass(frozen=True)
class ExperiencePreview:
    heading: str
    bullets: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProjectPreview:
    title: str
    points: List[str] = field(default_factory=list)
    tech_stack: List[str] = field(default_factory=list)
    links: List[LinkPreview] = field(default_factory=list)


@dataclass(frozen=True)
class SkillGroup:
    label: str
    skills: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ResumePreview:
    """
    Everything a template needs to render a resume.

    Attributes:
        has_content: False when nothing at all would be shown
        name: Trimmed name (may be "")
        contact_line: Non-blank email, phone and location joined with " | "
        summary: Trimmed summary
        education: One line per visible entry: "Degree - School (Year)"
        experience: Visible entries with "Role - Company (Duration)" headings
        projects: Visible projects with description points, tech and links
        skill_groups: Non-empty categories, labelled
        links: Profile links
    """

    has_content: bool
    name: str = ""
    contact_line: str = ""
    summary: str = ""
    education: List[str] = field(default_factory=list)
    experience: List[ExperiencePreview] = field(default_factory=list)
    projects: List[ProjectPreview] = field(default_factory=list)
    skill_groups: List[SkillGroup] = field(default_factory=list)
    links: List[LinkPreview] = field(default_factory=list)


def _join_present(values, separator: str) -> str:
    return separator.join(value.strip() for value in values if value.strip())


def _with_parenthetical(text: str, extra: str) -> str:
    extra = extra.strip()
    if not extra:
        return text
    return f"{text} ({extra})" if text else f"({extra})"


def education_line(entry: EducationEntry) -> str:
    """
    Example:
        >>> education_line(EducationEntry("State University", "B.S. Computer Science", "2024"))
        'B.S. Computer Science - State University (2024)'
    """
    return _with_parenthetical(_join_present([entry.degree, entry.school], " - "), entry.year)


def experience_heading(entry: ExperienceEntry) -> str:
    return _with_parenthetical(_join_present([entry.role, entry.company], " - "), entry.duration)


def _project_preview(entry: ProjectEntry) -> ProjectPreview:
    links = []
    if entry.live_url.strip():
        links.append(LinkPreview("Live", entry.live_url.strip()))
    if entry.github_url.strip():
        links.append(LinkPreview("Code", entry.github_url.strip()))
    return ProjectPreview(
        title=entry.title.strip(),
        points=split_description_points(entry.description),
        tech_stack=list(entry.tech_stack),
        links=links,
    )


def build_preview(document: ResumeDocument) -> ResumePreview:
    """
    Build the preview view-model for a document.

    Args:
        document: Normalized resume document

    Returns:
        ResumePreview; has_content is False for a blank document
    """
    if not has_any_preview_content(document):
        return ResumePreview(has_content=False)

    personal = document.personal

    skill_groups = []
    if get_all_skills(document):
        for category in SKILL_CATEGORIES:
            skills = document.skills_by_category.get(category)
            if skills:
                skill_groups.append(SkillGroup(SKILL_CATEGORY_LABELS[category], list(skills)))

    links = []
    if document.github.strip():
        links.append(LinkPreview("GitHub", document.github.strip()))
    if document.linkedin.strip():
        links.append(LinkPreview("LinkedIn", document.linkedin.strip()))

    return ResumePreview(
        has_content=True,
        name=personal.name.strip(),
        contact_line=_join_present([personal.email, personal.phone, personal.location], " | "),
        summary=document.summary.strip(),
        education=[education_line(e) for e in document.education if is_meaningful_education(e)],
        experience=[
            ExperiencePreview(experience_heading(e), split_bullets(e.highlights))
            for e in document.experience
            if is_meaningful_experience(e)
        ],
        projects=[_project_preview(p) for p in document.projects if is_meaningful_project(p)],
        skill_groups=skill_groups,
        links=links,
    )
