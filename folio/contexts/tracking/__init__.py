"""
Tracking Context

Responsibilities:
- Defines the ordered build track steps (loaded from YAML)
- Stores one text artifact per step and gates access to later steps
- Produces the proof summary once every step is complete

Owns: Step definitions, artifact keys, gating rules, final submission text
Never: Touches resume documents (shares only the key-value store capability)
"""

from folio.contexts.tracking.artifact_store import ArtifactStore, artifact_key
from folio.contexts.tracking.exceptions import ProofIncompleteError
from folio.contexts.tracking.proof import (
    ProofLinks,
    StepStatus,
    format_final_submission,
    step_status_rows,
)
from folio.contexts.tracking.steps import BUILD_STEPS, PROOF_ROUTE, BuildStep, load_build_track

__all__ = [
    # Steps
    "BUILD_STEPS",
    "PROOF_ROUTE",
    "BuildStep",
    "load_build_track",
    # Artifacts and gating
    "ArtifactStore",
    "artifact_key",
    # Proof
    "ProofLinks",
    "StepStatus",
    "step_status_rows",
    "format_final_submission",
    "ProofIncompleteError",
]
