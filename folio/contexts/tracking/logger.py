"""
Tracking context logger.

Provides logging interface for the tracking context with automatic [track] prefix.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[track]"


def setup_tracking_logger(log_dir: Path, store_root: Path) -> Path:
    """
    Setup logger for the tracking context.

    Args:
        log_dir: Directory for this session's logs
        store_root: Artifact store directory, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="track",
        log_dir=log_dir,
        extra_provenance={"Artifact store": store_root},
    )


def _log_info(message: str) -> None:
    """Log info message with [track] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [track] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")
