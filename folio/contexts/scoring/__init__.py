"""
Scoring Context

Responsibilities:
- Visibility, completeness and text-feature predicates over resume documents
- Deterministic ATS readiness score with ranked suggestions
- Editor guidance (action verbs, numeric impact, score tone)

Owns: Predicate library, point table, suggestion wording and ordering
Never: Modifies documents or performs I/O
"""

from folio.contexts.scoring.ats_scorer import (
    AtsCriteria,
    AtsResult,
    compute_ats_score,
    compute_top_improvements,
    evaluate_criteria,
)
from folio.contexts.scoring.predicates import (
    ProjectGuidance,
    contains_numeric_impact,
    count_words,
    get_all_skills,
    has_any_preview_content,
    is_complete_education,
    is_meaningful,
    project_guidance,
    score_tone,
    split_bullets,
    split_description_points,
    starts_with_action_verb,
)

__all__ = [
    # Scoring
    "compute_ats_score",
    "compute_top_improvements",
    "evaluate_criteria",
    "AtsCriteria",
    "AtsResult",
    # Predicates
    "contains_numeric_impact",
    "count_words",
    "get_all_skills",
    "has_any_preview_content",
    "is_complete_education",
    "is_meaningful",
    "split_bullets",
    "split_description_points",
    "starts_with_action_verb",
    # Guidance
    "ProjectGuidance",
    "project_guidance",
    "score_tone",
]
