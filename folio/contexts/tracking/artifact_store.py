"""
Build Artifact Store

Holds one text artifact per build step on top of any KeyValueStore and
derives the step gating from which artifacts exist:
- step 1 is always open
- step N opens once step N-1 has an artifact
- blank artifacts are never stored (writing blank text removes the key)
"""

from typing import List, Optional, Sequence

from folio.contexts.persistence.storage import KeyValueStore
from folio.contexts.tracking.logger import _log_info, _log_warning
from folio.contexts.tracking.steps import BUILD_STEPS, BuildStep


def artifact_key(index: int) -> str:
    """
    Storage key for a step's artifact.

    Example:
        >>> artifact_key(3)
        'rb_step_3_artifact'
    """
    return f"rb_step_{index}_artifact"


class ArtifactStore:
    """Step artifacts and gating over an injected KeyValueStore."""

    def __init__(self, store: KeyValueStore, steps: Sequence[BuildStep] = None):
        self.store = store
        self.steps: List[BuildStep] = list(steps) if steps is not None else list(BUILD_STEPS)

    def step(self, index: int) -> Optional[BuildStep]:
        for step in self.steps:
            if step.index == index:
                return step
        return None

    def read(self, index: int) -> str:
        """Return the step's artifact text, or "" when none is stored."""
        raw = self.store.get(artifact_key(index))
        if raw is None:
            return ""
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            _log_warning(f"Artifact for step {index} is not valid UTF-8, treating it as missing")
            return ""

    def write(self, index: int, value: str) -> None:
        """
        Store a trimmed artifact; blank text removes the step's artifact.

        Raises:
            IndexError: If index is not a known step
        """
        if self.step(index) is None:
            raise IndexError(f"Unknown build step: {index}")

        trimmed = value.strip()
        if not trimmed:
            self.store.remove(artifact_key(index))
            _log_info(f"Cleared artifact for step {index}")
            return
        self.store.set(artifact_key(index), trimmed.encode("utf-8"))
        _log_info(f"Saved artifact for step {index} ({len(trimmed)} chars)")

    def has(self, index: int) -> bool:
        return len(self.read(index)) > 0

    def completed_count(self) -> int:
        return sum(1 for step in self.steps if self.has(step.index))

    def first_locked_step(self) -> int:
        """
        Index of the first step without an artifact.

        Returns len(steps) when every step is complete.
        """
        for step in self.steps:
            if not self.has(step.index):
                return step.index
        return len(self.steps)

    def can_open(self, index: int) -> bool:
        if index <= 1:
            return True
        return self.has(index - 1)

    def all_complete(self) -> bool:
        return all(self.has(step.index) for step in self.steps)
