"""
Rendering Context

Responsibilities:
- Derives the preview view-model (visible entries, headings, bullets, skill groups)
- Manages the resume text templates (classic, modern, minimal)
- Exports resumes and ATS score panels as text

Owns: Preview structure, template files, text export
Never: Modifies documents or decides scores
"""

from folio.contexts.rendering.exporter import (
    EMPTY_PREVIEW_MESSAGE,
    export_resume_text,
    format_ats_report,
)
from folio.contexts.rendering.preview import (
    ExperiencePreview,
    LinkPreview,
    ProjectPreview,
    ResumePreview,
    SkillGroup,
    build_preview,
)
from folio.contexts.rendering.template_registry import TemplateRegistry

__all__ = [
    # Export
    "export_resume_text",
    "format_ats_report",
    "EMPTY_PREVIEW_MESSAGE",
    # Preview view-model
    "build_preview",
    "ResumePreview",
    "ExperiencePreview",
    "ProjectPreview",
    "SkillGroup",
    "LinkPreview",
    # Templates
    "TemplateRegistry",
]
