"""
Raw Input Shapes

Classifies untrusted project and skill data into explicit shapes before any
coercion happens. The normalizer dispatches over these shapes instead of
probing attributes ad hoc.

Project shapes:
- ModernProjectShape: carries any of title, techStack, liveUrl, githubUrl
- LegacyProjectShape: older mapping with a name and no tech/link fields
- MalformedProjectShape: anything that is not a mapping

Skill shapes:
- CategorizedSkillsShape: at least one category list holds a non-blank entry
- LegacySkillsShape: no usable categories, fall back to the comma-separated string
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

from folio.contexts.normalization.defaults import SKILL_CATEGORIES

# Keys that only exist on the modern project shape
MODERN_PROJECT_KEYS = ("title", "techStack", "liveUrl", "githubUrl")


@dataclass(frozen=True)
class ModernProjectShape:
    raw: Mapping[str, Any]


@dataclass(frozen=True)
class LegacyProjectShape:
    raw: Mapping[str, Any]


@dataclass(frozen=True)
class MalformedProjectShape:
    raw: Any = None


ProjectShape = Union[ModernProjectShape, LegacyProjectShape, MalformedProjectShape]


@dataclass(frozen=True)
class CategorizedSkillsShape:
    """Category lists as stored; values are still raw."""

    categories: Dict[str, List[Any]] = field(default_factory=dict)


@dataclass(frozen=True)
class LegacySkillsShape:
    legacy: Any = None


SkillsShape = Union[CategorizedSkillsShape, LegacySkillsShape]


def string_or_empty(value: Any) -> str:
    """
    Coerce a raw scalar to text, mapping missing or wrong-shaped values to "".

    Examples:
        >>> string_or_empty(None)
        ''
        >>> string_or_empty(2024)
        '2024'
        >>> string_or_empty(2024.0)
        '2024'
        >>> string_or_empty(True)
        'true'
        >>> string_or_empty({"nested": "mapping"})
        ''
        >>> string_or_empty(10 ** 5000)
        ''
    """
    if value is None or isinstance(value, (Mapping, list, tuple, set)):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    try:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    except ValueError:
        # ints past the interpreter's digit limit have no text form
        return ""


def is_sequence(value: Any) -> bool:
    """True for list/tuple values (strings and mappings are not sequences here)."""
    return isinstance(value, (list, tuple))


def classify_project(raw: Any) -> ProjectShape:
    """
    Classify one raw project element.

    Args:
        raw: Element of the stored projects list

    Returns:
        The matching project shape
    """
    if not isinstance(raw, Mapping):
        return MalformedProjectShape(raw)
    if any(key in raw for key in MODERN_PROJECT_KEYS):
        return ModernProjectShape(raw)
    return LegacyProjectShape(raw)


def _has_non_blank_entry(values: List[Any]) -> bool:
    return any(string_or_empty(value).strip() for value in values)


def classify_skills(raw_categories: Any, raw_legacy: Any) -> SkillsShape:
    """
    Decide whether categorized skills or the legacy string drives categorization.

    Categories win as soon as any of them holds an entry that is non-blank as text.
    Category values that are not lists are treated as empty.

    Args:
        raw_categories: Stored skillsByCategory value (mapping or anything)
        raw_legacy: Stored legacy skills value

    Returns:
        CategorizedSkillsShape or LegacySkillsShape
    """
    categories: Dict[str, List[Any]] = {}
    if isinstance(raw_categories, Mapping):
        for category in SKILL_CATEGORIES:
            value = raw_categories.get(category)
            categories[category] = list(value) if is_sequence(value) else []

    if any(_has_non_blank_entry(values) for values in categories.values()):
        return CategorizedSkillsShape(categories)
    return LegacySkillsShape(raw_legacy)
