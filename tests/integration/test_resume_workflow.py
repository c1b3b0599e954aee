"""
Integration test for the resume authoring workflow.
Tests: stored record -> normalize -> edit -> save -> score -> export, on a FileStore.
"""

import json

import pytest

from folio.contexts.normalization.defaults import RESUME_STORAGE_KEY
from folio.contexts.normalization.editing import (
    add_project,
    add_project_tech,
    add_skill,
    create_sample_resume,
    merge_suggested_skills,
    update_project,
)
from folio.contexts.persistence import FileStore, ResumeStore
from folio.contexts.rendering import EMPTY_PREVIEW_MESSAGE, export_resume_text
from folio.contexts.scoring import compute_ats_score, compute_top_improvements


@pytest.mark.integration
def test_legacy_record_upgrade_and_improve(tmp_path, legacy_raw):
    """Test upgrading a legacy file record and editing it to a higher score."""
    store = FileStore(tmp_path / "store")
    store.set(RESUME_STORAGE_KEY, json.dumps(legacy_raw).encode("utf-8"))
    resume_store = ResumeStore(store)

    doc = resume_store.load_resume()
    before = compute_ats_score(doc)
    assert before.score == 35

    # Fill the blank second project and grow the skill list
    doc = update_project(doc, 1, title="Churn Model", description="Built a churn model for 2 teams.")
    doc = add_project_tech(doc, 1, "scikit-learn")
    doc = merge_suggested_skills(doc, "technical", ["Python", "pandas", "dbt", "Airflow", "Looker"])
    doc = add_skill(doc, "soft", "Stakeholder management")
    resume_store.save_resume(doc)

    reloaded = resume_store.load_resume()
    assert reloaded == doc

    after = compute_ats_score(reloaded)
    # + projects 10 + skills 10
    assert after.score == 55
    assert after.suggestions == ("Write a stronger summary (40-120 words).",)
    assert compute_top_improvements(reloaded) == [
        "Expand summary to at least 40 words.",
        "Add internship or project-based experience.",
    ]


@pytest.mark.integration
def test_stored_record_is_upgraded_on_disk_after_save(tmp_path, legacy_raw):
    """Test that saving writes the modern wire form back to the file."""
    store = FileStore(tmp_path)
    store.set(RESUME_STORAGE_KEY, json.dumps(legacy_raw).encode("utf-8"))
    resume_store = ResumeStore(store)

    resume_store.save_resume(resume_store.load_resume())
    stored = json.loads((tmp_path / RESUME_STORAGE_KEY).read_text(encoding="utf-8"))

    assert stored["projects"][0]["title"] == "Sales Forecast"
    assert "name" not in stored["projects"][0]
    assert stored["skillsByCategory"]["technical"] == ["SQL", "Excel", "Tableau"]
    assert stored["skills"] == "SQL, Excel, , Tableau, sql"


@pytest.mark.integration
@pytest.mark.parametrize("template", ["classic", "modern", "minimal"])
def test_template_choice_drives_export(tmp_path, template):
    """Test exporting the sample resume with the stored template choice."""
    resume_store = ResumeStore(FileStore(tmp_path))
    resume_store.save_resume(create_sample_resume())
    resume_store.save_template(template)

    reopened = ResumeStore(FileStore(tmp_path))
    text = export_resume_text(reopened.load_resume(), reopened.load_template())

    assert "Nexa Labs" in text
    assert "Improved page load speed by 32% across core workflows." in text
    assert "Portfolio Platform" in text


@pytest.mark.integration
def test_clear_then_export(tmp_path, full_resume):
    """Test that clearing the resume leaves an empty preview."""
    resume_store = ResumeStore(FileStore(tmp_path))
    resume_store.save_resume(full_resume)

    cleared = resume_store.clear_resume()

    assert export_resume_text(cleared) == EMPTY_PREVIEW_MESSAGE + "\n"
    assert compute_ats_score(resume_store.load_resume()).score == 0


@pytest.mark.integration
def test_new_project_from_editor(tmp_path, full_resume):
    """Test adding a project through editing and seeing it in the export."""
    doc = add_project(full_resume)
    doc = update_project(doc, 2, title="CLI Toolkit", description="Automated release notes. Saved 5 hours weekly.")

    resume_store = ResumeStore(FileStore(tmp_path))
    resume_store.save_resume(doc)
    text = export_resume_text(resume_store.load_resume(), "classic")

    assert "### CLI Toolkit" in text
    assert "- Automated release notes." in text
    assert "- Saved 5 hours weekly." in text
