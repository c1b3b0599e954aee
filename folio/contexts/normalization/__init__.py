"""
Normalization Context

Responsibilities:
- Defines the canonical ResumeDocument structure
- Coerces untrusted stored/imported data into a ResumeDocument (never raises)
- Classifies legacy vs. modern project and skill shapes
- Applies user edits as pure document-to-document functions

Owns: Resume document structure, normalization rules, editing rules
Never: Performs I/O or scores content
"""

from folio.contexts.normalization.defaults import (
    DEFAULT_TEMPLATE,
    DESCRIPTION_MAX_LENGTH,
    RESUME_TEMPLATES,
    SKILL_CATEGORIES,
    normalize_template,
)
from folio.contexts.normalization.normalizer import (
    create_empty_resume,
    normalize_resume,
)
from folio.contexts.normalization.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeDocument,
    SkillsByCategory,
)

__all__ = [
    # Normalization entry points
    "normalize_resume",
    "normalize_template",
    "create_empty_resume",
    # Data structure classes
    "ResumeDocument",
    "PersonalInfo",
    "EducationEntry",
    "ExperienceEntry",
    "ProjectEntry",
    "SkillsByCategory",
    # Constants
    "DEFAULT_TEMPLATE",
    "DESCRIPTION_MAX_LENGTH",
    "RESUME_TEMPLATES",
    "SKILL_CATEGORIES",
]
