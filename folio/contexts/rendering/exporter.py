"""
Resume Text Export

Renders a ResumeDocument through one of the resume templates into text that a
print, clipboard or PDF collaborator can consume, and formats the ATS score
panel as plain text.
"""

import re
from typing import List

from folio.contexts.normalization.defaults import DEFAULT_TEMPLATE
from folio.contexts.normalization.resume_data_structure import ResumeDocument
from folio.contexts.rendering.logger import _log_debug
from folio.contexts.rendering.preview import build_preview
from folio.contexts.rendering.template_registry import TemplateRegistry
from folio.contexts.scoring.ats_scorer import AtsResult
from folio.contexts.scoring.predicates import score_tone

EMPTY_PREVIEW_MESSAGE = "Start filling the form to generate a live preview."

_default_registry = None


def _get_default_registry() -> TemplateRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def _tidy(text: str) -> str:
    """Collapse runs of blank lines and end with exactly one newline."""
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip() + "\n"


def export_resume_text(
    document: ResumeDocument,
    template: str = DEFAULT_TEMPLATE,
    registry: TemplateRegistry = None,
) -> str:
    """
    Render a resume as text using the named template.

    Args:
        document: Normalized resume document
        template: One of RESUME_TEMPLATES (default: "classic")
        registry: Template registry (default: shared registry over the package templates)

    Returns:
        Rendered text; the empty-preview message for a blank document

    Raises:
        TemplateNotFound: If template is not a known template
    """
    registry = registry or _get_default_registry()
    # Resolve first so unknown templates fail even for blank documents
    jinja_template = registry.get_template(template)

    preview = build_preview(document)
    if not preview.has_content:
        _log_debug("Nothing to render, returning empty preview message")
        return EMPTY_PREVIEW_MESSAGE + "\n"

    _log_debug(f"Rendering resume with '{template}' template")
    return _tidy(jinja_template.render(preview=preview))


def format_ats_report(result: AtsResult, improvements: List[str] = None) -> str:
    """
    Format the ATS score panel as plain text.

    Example:
        ATS Readiness Score: 45/100 (mid)

        Suggestions:
          - Add at least 2 projects.

        Top 3 Improvements:
          - Add at least 2 projects.
    """
    lines = [f"ATS Readiness Score: {result.score}/100 ({score_tone(result.score)})"]

    if result.all_criteria_met:
        lines.extend(["", "All suggestion criteria met."])
    elif result.suggestions:
        lines.extend(["", "Suggestions:"])
        lines.extend(f"  - {suggestion}" for suggestion in result.suggestions)

    if improvements:
        lines.extend(["", "Top 3 Improvements:"])
        lines.extend(f"  - {item}" for item in improvements)

    return "\n".join(lines) + "\n"
