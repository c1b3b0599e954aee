"""
Shared loguru setup for FOLIO scripts.

Each context wraps setup_logger() in contexts/{context}/logger.py and adds its
own message prefix ([store], [render], [track]). Library code only logs through
those wrappers; sinks are configured once per script run.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from folio import __version__

load_dotenv()

# Warnings stand out on the console (recovered corrupt records, locked steps)
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
}


def setup_logger(context_name: str, log_dir: Path, extra_provenance: dict = None) -> Path:
    """
    Send FOLIO logs to {log_dir}/{context_name}.log (DEBUG) and stdout (INFO).

    Args:
        context_name: Log file stem ("store", "render" or "track")
        log_dir: Directory for this script run, created if missing
        extra_provenance: Context details for the provenance header

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/export_20260101_120000"),
            extra_provenance={"Template": "classic"},
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(
        log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
    )
    logger.add(
        sys.stdout,
        format="{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>",
        level="INFO",
        colorize=True,
    )

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Write the run header: FOLIO version, command line, working directory, Python version."""
    logger.info("=" * 80)
    logger.info(f"FOLIO: {__version__}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
