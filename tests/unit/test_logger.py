"""Unit tests for the shared logger setup."""

import pytest
from loguru import logger

from folio import __version__
from folio.contexts.persistence.logger import _log_debug, _log_warning, setup_persistence_logger


@pytest.mark.unit
def test_store_log_file(tmp_path):
    """Test that the store log records provenance and prefixed messages at every level."""
    log_file = setup_persistence_logger(tmp_path / "score_run")
    _log_debug("No stored resume")
    _log_warning("Stored resume is unreadable")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")

    assert log_file.name == "store.log"
    assert f"FOLIO: {__version__}" in text
    assert "Store: in-memory" in text
    assert "[store] No stored resume" in text
    assert "WARNING | [store] Stored resume is unreadable" in text
