"""
Resume Document Structure

Defines the canonical, always-valid representation of resume content.
This structure is the interface between every FOLIO context:

Normalization owns:
- Building ResumeDocument instances from untrusted data (normalizer.py)
- Producing new documents from user edits (editing.py)

Scoring, Rendering and Persistence only read ResumeDocument instances.

All classes are frozen dataclasses holding tuples, so a document is a value:
editing returns a new document and never aliases list entries across documents.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from folio.contexts.normalization.defaults import SKILL_CATEGORIES


@dataclass(frozen=True)
class PersonalInfo:
    """Contact block shown at the top of the resume. Empty string means unset."""

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
        }


@dataclass(frozen=True)
class EducationEntry:
    school: str = ""
    degree: str = ""
    year: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"school": self.school, "degree": self.degree, "year": self.year}


@dataclass(frozen=True)
class ExperienceEntry:
    """
    Single work experience entry.

    Attributes:
        company: Employer name
        role: Job title
        duration: Free text date range (e.g., "2024 - Present")
        highlights: Free text, one bullet per line
    """

    company: str = ""
    role: str = ""
    duration: str = ""
    highlights: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "company": self.company,
            "role": self.role,
            "duration": self.duration,
            "highlights": self.highlights,
        }


@dataclass(frozen=True)
class ProjectEntry:
    """
    Single project entry.

    Attributes:
        title: Project name
        description: Short description, at most DESCRIPTION_MAX_LENGTH characters
        tech_stack: Ordered technologies, unique ignoring case
        live_url: Deployed URL (optional)
        github_url: Source URL (optional)
        highlights: Free text, one bullet per line
    """

    title: str = ""
    description: str = ""
    tech_stack: Tuple[str, ...] = ()
    live_url: str = ""
    github_url: str = ""
    highlights: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "techStack": list(self.tech_stack),
            "liveUrl": self.live_url,
            "githubUrl": self.github_url,
            "highlights": self.highlights,
        }


@dataclass(frozen=True)
class SkillsByCategory:
    """Skill lists per category, each unique ignoring case and free of blanks."""

    technical: Tuple[str, ...] = ()
    soft: Tuple[str, ...] = ()
    tools: Tuple[str, ...] = ()

    def get(self, category: str) -> Tuple[str, ...]:
        """
        Get the skills of one category.

        Raises:
            ValueError: If category is not technical, soft or tools
        """
        if category not in SKILL_CATEGORIES:
            raise ValueError(f"Unknown skill category: {category}")
        return getattr(self, category)

    def all_items(self) -> Tuple[str, ...]:
        return self.technical + self.soft + self.tools

    def to_dict(self) -> Dict[str, Any]:
        return {
            "technical": list(self.technical),
            "soft": list(self.soft),
            "tools": list(self.tools),
        }


@dataclass(frozen=True)
class ResumeDocument:
    """
    Canonical resume document.

    Invariants (guaranteed by normalize_resume and preserved by editing.py):
    - education, experience and projects each hold at least one entry
      (a blank placeholder stands in for "no data")
    - every string field is a str, never None
    - skills in each category are trimmed, non-blank and unique ignoring case

    Attributes:
        personal: Contact block
        summary: Professional summary paragraph
        education: Education entries in display order
        experience: Experience entries in display order
        projects: Project entries in display order
        skills_by_category: Categorized skills
        skills: Legacy comma-separated skills string, kept verbatim
        github: GitHub profile link
        linkedin: LinkedIn profile link
    """

    personal: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    education: Tuple[EducationEntry, ...] = (EducationEntry(),)
    experience: Tuple[ExperienceEntry, ...] = (ExperienceEntry(),)
    projects: Tuple[ProjectEntry, ...] = (ProjectEntry(),)
    skills_by_category: SkillsByCategory = field(default_factory=SkillsByCategory)
    skills: str = ""
    github: str = ""
    linkedin: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the persisted wire form (camelCase keys).

        Returns:
            JSON-compatible dict accepted by normalize_resume()
        """
        return {
            "personal": self.personal.to_dict(),
            "summary": self.summary,
            "education": [entry.to_dict() for entry in self.education],
            "experience": [entry.to_dict() for entry in self.experience],
            "projects": [entry.to_dict() for entry in self.projects],
            "skillsByCategory": self.skills_by_category.to_dict(),
            "skills": self.skills,
            "github": self.github,
            "linkedin": self.linkedin,
        }
