"""
Default values and fixed vocabularies for the FOLIO resume document.

Provides shared defaults used by:
- resume_data_structure.py (blank entries and the empty document)
- normalizer.py (placeholders substituted for missing or malformed lists)
- editing.py (clearing entries, description length limit)
- persistence (storage keys, template choices)
"""

from typing import Tuple

# Project descriptions are capped when written and when loaded
DESCRIPTION_MAX_LENGTH = 200

# Skill categories in display order, with preview labels
SKILL_CATEGORIES: Tuple[str, ...] = ("technical", "soft", "tools")
SKILL_CATEGORY_LABELS = {
    "technical": "Technical Skills",
    "soft": "Soft Skills",
    "tools": "Tools & Technologies",
}

# Template choices, first is the default
RESUME_TEMPLATES: Tuple[str, ...] = ("classic", "modern", "minimal")
DEFAULT_TEMPLATE = RESUME_TEMPLATES[0]

# Storage keys for the two logical records
RESUME_STORAGE_KEY = "resumeBuilderData"
RESUME_TEMPLATE_KEY = "resumeTemplateChoice"


def normalize_template(value) -> str:
    """
    Coerce a stored template identifier to a known template.

    Args:
        value: Raw stored value (str, bytes, None, anything)

    Returns:
        The value if it names a known template, otherwise DEFAULT_TEMPLATE
    """
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError:
            return DEFAULT_TEMPLATE
    if isinstance(value, str) and value in RESUME_TEMPLATES:
        return value
    return DEFAULT_TEMPLATE
