"""Shared fixtures for FOLIO tests."""

import json
from pathlib import Path

import pytest

from folio.contexts.normalization import normalize_resume
from folio.contexts.persistence import InMemoryStore

FIXTURES_PATH = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    return json.loads((FIXTURES_PATH / name).read_text(encoding="utf-8"))


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def sample_raw():
    return load_fixture("sample_resume.json")


@pytest.fixture
def legacy_raw():
    return load_fixture("legacy_resume.json")


@pytest.fixture
def full_resume(sample_raw):
    """Resume that meets every scoring criterion."""
    return normalize_resume(sample_raw)
