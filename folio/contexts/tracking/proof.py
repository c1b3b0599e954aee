"""
Build Track Proof

Summarizes step completion and produces the final submission text that the
proof page copies to the clipboard. Only available once every step is complete.
"""

from dataclasses import dataclass
from typing import List

from folio.contexts.tracking.artifact_store import ArtifactStore
from folio.contexts.tracking.exceptions import ProofIncompleteError

SUBMISSION_TITLE = "AI Resume Builder - Build Track (Project 3)"


@dataclass(frozen=True)
class ProofLinks:
    lovable: str = ""
    github: str = ""
    deploy: str = ""


@dataclass(frozen=True)
class StepStatus:
    step: int
    route: str
    complete: bool

    @property
    def label(self) -> str:
        return "Complete" if self.complete else "Pending"


def step_status_rows(artifacts: ArtifactStore) -> List[StepStatus]:
    return [
        StepStatus(step=step.index, route=step.route, complete=artifacts.has(step.index))
        for step in artifacts.steps
    ]


def format_final_submission(artifacts: ArtifactStore, links: ProofLinks) -> str:
    """
    Build the copyable final submission text.

    Args:
        artifacts: Artifact store for the build track
        links: Submission links; blank links are shown as N/A

    Returns:
        Newline-joined submission text

    Raises:
        ProofIncompleteError: If any step has no artifact yet
    """
    if not artifacts.all_complete():
        first_locked = artifacts.first_locked_step()
        step = artifacts.step(first_locked)
        raise ProofIncompleteError(first_locked, step.route if step else "")

    lines = [SUBMISSION_TITLE]
    lines.extend(
        f"Step {row.step}: {row.label} ({row.route})" for row in step_status_rows(artifacts)
    )
    lines.append(f"Lovable Link: {links.lovable.strip() or 'N/A'}")
    lines.append(f"GitHub Link: {links.github.strip() or 'N/A'}")
    lines.append(f"Deploy Link: {links.deploy.strip() or 'N/A'}")
    return "\n".join(lines)
