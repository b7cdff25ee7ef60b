"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
) -> Path:
    """
    Configure loguru for a context with provenance tracking.

    Replaces any existing sinks with a DEBUG file sink at
    <log_dir>/<context_name>.log and an INFO console sink, then writes the
    provenance header (see log_provenance).

    Args:
        context_name: Context identifier (e.g., "document", "review", "share")
        log_dir: Directory for this logging session
        extra_provenance: Additional key-value pairs for provenance header

    Returns:
        Path to log file

    Example:
        from cvembed.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="review",
            log_dir=Path("outs/logs/validate_20251114_123456"),
            extra_provenance={"Input": "resume.json"}
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    # Remove default logger
    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    # File handler captures everything
    logger.add(
        log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
    )

    # Console handler - only INFO and above, colorized by level
    logger.add(
        sys.stdout,
        format="{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>",
        level="INFO",
        colorize=True,
    )

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Log the command line and environment of this run.

    One "key: value" line per entry between two rules, so a log file can be
    traced back to the invocation that wrote it.

    Args:
        extra_context: Additional key-value pairs (e.g., {"Input": path})
    """
    entries = {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in entries.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
