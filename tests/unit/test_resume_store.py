"""Unit tests for resume and template persistence."""

import json
from dataclasses import replace

import pytest

from folio.contexts.normalization import create_empty_resume, normalize_resume
from folio.contexts.normalization.defaults import RESUME_STORAGE_KEY, RESUME_TEMPLATE_KEY
from folio.contexts.normalization.editing import remove_skill, update_summary
from folio.contexts.persistence import (
    ResumeStore,
    UnknownTemplateError,
    deserialize_resume,
    serialize_resume,
)
from folio.contexts.scoring import compute_ats_score


@pytest.mark.unit
def test_first_load_is_empty(memory_store):
    """Test that a store with no record loads the blank document."""
    assert ResumeStore(memory_store).load_resume() == create_empty_resume()


@pytest.mark.unit
def test_save_then_load(memory_store, full_resume):
    """Test that a saved document loads back equal."""
    resume_store = ResumeStore(memory_store)
    resume_store.save_resume(full_resume)

    assert resume_store.load_resume() == full_resume


@pytest.mark.unit
def test_saved_record_uses_wire_keys(memory_store, full_resume):
    """Test that the stored JSON uses camelCase keys."""
    ResumeStore(memory_store).save_resume(full_resume)
    stored = json.loads(memory_store.get(RESUME_STORAGE_KEY).decode("utf-8"))

    assert "skillsByCategory" in stored
    assert stored["projects"][0]["techStack"] == ["Python", "FastAPI", "react"]
    assert stored["projects"][0]["liveUrl"] == "https://monitor.example.com"


@pytest.mark.unit
def test_legacy_record_is_upgraded(memory_store, legacy_raw):
    """Test that a legacy stored record loads through the normalizer."""
    memory_store.set(RESUME_STORAGE_KEY, json.dumps(legacy_raw).encode("utf-8"))
    doc = ResumeStore(memory_store).load_resume()

    assert doc.projects[0].title == "Sales Forecast"
    assert doc.skills_by_category.technical == ("SQL", "Excel", "Tableau")


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    [
        b"{not json",
        b"\xff\xfe\x00",
        b"",
        b"null",
        b"[1, 2]",
        b'{"summary": ' + b"1" * 5000 + b"}",
        b"[" * 100000 + b"]" * 100000,
    ],
    ids=["syntax", "not-utf8", "empty", "null", "list", "oversized-int", "deep-nesting"],
)
def test_unreadable_record_loads_empty(memory_store, raw):
    """Test that corrupt or wrong-shaped records never raise."""
    memory_store.set(RESUME_STORAGE_KEY, raw)

    assert ResumeStore(memory_store).load_resume() == create_empty_resume()


@pytest.mark.unit
def test_clear_resume_overwrites(memory_store, full_resume):
    """Test that clearing stores the blank document instead of deleting the record."""
    resume_store = ResumeStore(memory_store)
    resume_store.save_resume(full_resume)

    cleared = resume_store.clear_resume()

    assert cleared == create_empty_resume()
    assert memory_store.has(RESUME_STORAGE_KEY)
    assert resume_store.load_resume() == create_empty_resume()


@pytest.mark.unit
def test_edit_save_load_cycle(memory_store):
    """Test persisting an edited document."""
    resume_store = ResumeStore(memory_store)
    doc = update_summary(resume_store.load_resume(), "Backend engineer")
    resume_store.save_resume(doc)

    assert resume_store.load_resume().summary == "Backend engineer"


@pytest.mark.unit
def test_save_revalidates_document(memory_store, full_resume):
    """Test that a document holding values of the wrong type is stored in canonical form."""
    broken = replace(full_resume, summary=None, github=2024, education=())
    resume_store = ResumeStore(memory_store)
    resume_store.save_resume(broken)

    stored = json.loads(memory_store.get(RESUME_STORAGE_KEY).decode("utf-8"))
    loaded = resume_store.load_resume()

    assert stored["summary"] == ""
    assert stored["github"] == "2024"
    assert stored["education"] == [{"school": "", "degree": "", "year": ""}]
    # summary 15 and education 10 lost
    assert compute_ats_score(loaded).score == 55


@pytest.mark.unit
def test_removed_legacy_skills_stay_removed(memory_store):
    """Test that skills removed from a legacy-string document do not return after reload."""
    doc = normalize_resume({"skills": "Python, SQL"})
    doc = remove_skill(remove_skill(doc, "technical", "Python"), "technical", "SQL")
    resume_store = ResumeStore(memory_store)
    resume_store.save_resume(doc)

    reloaded = resume_store.load_resume()

    assert reloaded.skills_by_category.technical == ()
    assert reloaded.skills == ""


class TestTemplateChoice:
    """Tests for the template choice record."""

    @pytest.mark.unit
    def test_default_template(self, memory_store):
        """Test that no stored choice means classic."""
        assert ResumeStore(memory_store).load_template() == "classic"

    @pytest.mark.unit
    def test_save_and_load(self, memory_store):
        """Test that a known choice is persisted as plain text."""
        resume_store = ResumeStore(memory_store)
        resume_store.save_template("minimal")

        assert memory_store.get(RESUME_TEMPLATE_KEY) == b"minimal"
        assert resume_store.load_template() == "minimal"

    @pytest.mark.unit
    def test_unknown_stored_value(self, memory_store):
        """Test that a stale stored choice falls back to classic."""
        memory_store.set(RESUME_TEMPLATE_KEY, b"retro")

        assert ResumeStore(memory_store).load_template() == "classic"

    @pytest.mark.unit
    def test_save_unknown_template(self, memory_store):
        """Test that saving an unknown choice is rejected."""
        with pytest.raises(UnknownTemplateError) as exc_info:
            ResumeStore(memory_store).save_template("retro")

        assert exc_info.value.template == "retro"
        assert "classic" in str(exc_info.value)
        assert memory_store.get(RESUME_TEMPLATE_KEY) is None


@pytest.mark.unit
def test_serialize_is_utf8_json(full_resume):
    """Test that serialized records decode back to the wire form."""
    doc = update_summary(full_resume, "Ingénieure logiciel")
    raw = serialize_resume(doc)

    assert isinstance(raw, bytes)
    assert "Ingénieure" in raw.decode("utf-8")
    assert normalize_resume(deserialize_resume(raw)) == doc


@pytest.mark.unit
def test_deserialize_none():
    """Test that a missing record deserializes to an empty mapping."""
    assert deserialize_resume(None) == {}
