"""
Persistence context logger.

Provides logging interface for the persistence context with automatic [store] prefix.
All persistence modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[store]"


def setup_persistence_logger(log_dir: Path, store_root: Path = None) -> Path:
    """
    Setup logger for the persistence context.

    Args:
        log_dir: Directory for this session's logs
        store_root: Store directory, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="store",
        log_dir=log_dir,
        extra_provenance={"Store": store_root or "in-memory"},
    )


def _log_info(message: str) -> None:
    """Log info message with [store] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [store] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [store] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
