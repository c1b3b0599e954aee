"""Unit tests for build artifacts, gating and the proof summary."""

import pytest

from folio.contexts.tracking import (
    BUILD_STEPS,
    ArtifactStore,
    BuildStep,
    ProofIncompleteError,
    ProofLinks,
    artifact_key,
    format_final_submission,
    step_status_rows,
)
from folio.contexts.tracking.proof import SUBMISSION_TITLE


def _complete_steps(artifacts: ArtifactStore, count: int) -> None:
    for index in range(1, count + 1):
        artifacts.write(index, f"Artifact for step {index}")


@pytest.fixture
def artifacts(memory_store):
    return ArtifactStore(memory_store)


@pytest.mark.unit
def test_artifact_key():
    """Test the storage key format."""
    assert artifact_key(1) == "rb_step_1_artifact"
    assert artifact_key(8) == "rb_step_8_artifact"


class TestArtifacts:
    """Tests for reading and writing step artifacts."""

    @pytest.mark.unit
    def test_write_trims(self, artifacts, memory_store):
        """Test that artifacts are stored trimmed."""
        artifacts.write(1, "  Problem statement \n")

        assert artifacts.read(1) == "Problem statement"
        assert memory_store.get("rb_step_1_artifact") == b"Problem statement"

    @pytest.mark.unit
    def test_blank_write_removes(self, artifacts, memory_store):
        """Test that writing blank text deletes the artifact."""
        artifacts.write(1, "Problem statement")
        artifacts.write(1, "   ")

        assert artifacts.read(1) == ""
        assert not artifacts.has(1)
        assert memory_store.get("rb_step_1_artifact") is None

    @pytest.mark.unit
    def test_unknown_step(self, artifacts):
        """Test that writing to a step outside the track is rejected."""
        with pytest.raises(IndexError):
            artifacts.write(9, "text")

    @pytest.mark.unit
    def test_invalid_utf8_reads_as_missing(self, artifacts, memory_store):
        """Test that undecodable artifacts count as absent."""
        memory_store.set(artifact_key(1), b"\xff\xfe")

        assert artifacts.read(1) == ""
        assert not artifacts.has(1)

    @pytest.mark.unit
    def test_step_lookup(self, artifacts):
        """Test finding a step by index."""
        assert artifacts.step(3).slug == "03-architecture"
        assert artifacts.step(0) is None


class TestGating:
    """Tests for step gating."""

    @pytest.mark.unit
    def test_fresh_track(self, artifacts):
        """Test that only step 1 is open on a fresh track."""
        assert artifacts.can_open(1)
        assert not artifacts.can_open(2)
        assert artifacts.completed_count() == 0
        assert artifacts.first_locked_step() == 1

    @pytest.mark.unit
    def test_partial_track(self, artifacts):
        """Test that a step opens once the previous one has an artifact."""
        _complete_steps(artifacts, 3)

        assert artifacts.can_open(4)
        assert not artifacts.can_open(5)
        assert artifacts.completed_count() == 3
        assert artifacts.first_locked_step() == 4
        assert not artifacts.all_complete()

    @pytest.mark.unit
    def test_complete_track(self, artifacts):
        """Test that a complete track reports the step count as first locked step."""
        _complete_steps(artifacts, len(BUILD_STEPS))

        assert artifacts.all_complete()
        assert artifacts.first_locked_step() == len(BUILD_STEPS)

    @pytest.mark.unit
    def test_custom_steps(self, memory_store):
        """Test gating over an injected track."""
        steps = [
            BuildStep(1, "one", "/rb/one", "One", "First"),
            BuildStep(2, "two", "/rb/two", "Two", "Second"),
        ]
        artifacts = ArtifactStore(memory_store, steps)
        _complete_steps(artifacts, 2)

        assert artifacts.all_complete()
        with pytest.raises(IndexError):
            artifacts.write(3, "text")


class TestProof:
    """Tests for the proof summary."""

    @pytest.mark.unit
    def test_status_rows(self, artifacts):
        """Test one row per step with its completion label."""
        _complete_steps(artifacts, 2)
        rows = step_status_rows(artifacts)

        assert len(rows) == len(BUILD_STEPS)
        assert rows[1].label == "Complete"
        assert rows[2].label == "Pending"
        assert rows[2].route == "/rb/03-architecture"

    @pytest.mark.unit
    def test_incomplete_track_raises(self, artifacts):
        """Test that the submission requires every step."""
        _complete_steps(artifacts, 5)

        with pytest.raises(ProofIncompleteError) as exc_info:
            format_final_submission(artifacts, ProofLinks())

        assert exc_info.value.first_locked_step == 6
        assert exc_info.value.route == "/rb/06-build"

    @pytest.mark.unit
    def test_final_submission(self, artifacts):
        """Test the copyable submission text."""
        _complete_steps(artifacts, len(BUILD_STEPS))
        links = ProofLinks(lovable=" https://lovable.dev/p/1 ", github="https://github.com/x/rb")

        lines = format_final_submission(artifacts, links).split("\n")

        assert lines[0] == SUBMISSION_TITLE
        assert lines[1] == "Step 1: Complete (/rb/01-problem)"
        assert lines[8] == "Step 8: Complete (/rb/08-ship)"
        assert lines[9:] == [
            "Lovable Link: https://lovable.dev/p/1",
            "GitHub Link: https://github.com/x/rb",
            "Deploy Link: N/A",
        ]
