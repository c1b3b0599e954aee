"""
Scoring Pattern Constants

Regex patterns and fixed vocabularies used by the predicate library.
Organized into frozen dataclasses for immutability, following the pattern
constant convention used across FOLIO.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class ImpactPatterns:
    """
    Numeric impact detection.

    Matches a percentage (32%, 32 %), a bare number (18), a multiplier (3x)
    or a count in thousands (10k, 10 K). ASCII digits only.
    """

    NUMERIC_IMPACT: str = r"(\d+\s?%|\b\d+\b|\d+[xX]|\d+\s?[kK])"


@dataclass(frozen=True)
class TextPatterns:
    """Text splitting patterns."""

    LINE_BREAK: str = r"\r\n|\r|\n"
    SENTENCE_BREAK: str = r"\."
    SKILL_SEPARATOR: str = r","


NUMERIC_IMPACT_RE = re.compile(ImpactPatterns.NUMERIC_IMPACT, re.ASCII)

# Closed set, matched case-sensitively at the start of a bullet
ACTION_VERBS = (
    "Built",
    "Developed",
    "Designed",
    "Implemented",
    "Led",
    "Improved",
    "Created",
    "Optimized",
    "Automated",
)
