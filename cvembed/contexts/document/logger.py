"""
Document context logger.

Provides logging interface for the document context with automatic [document] prefix.
All document modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from cvembed.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[document]"


def setup_document_logger(log_dir: Path, phase: str = "document") -> Path:
    """
    Setup logger for the document context.

    Args:
        log_dir: Directory for this session
        phase: Phase name for provenance (e.g., "import", "presets")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="document",
        log_dir=log_dir,
        extra_provenance={"Phase": phase},
    )


# Wrapper functions with automatic [document] prefix


def _log_info(message: str) -> None:
    """Log info message with [document] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [document] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [document] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [document] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [document] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level document-specific logging helpers


def log_import_start(input_path: Path, log_file: Path) -> None:
    """Log start of a resume import."""
    _log_info(f"Importing {input_path.name}")
    _log_info(f"Log file: {log_file}")
    _log_debug(f"Source: {input_path}")


def log_import_result(input_path: Path, resume: dict) -> None:
    """Log a successful import with a short summary of what was found."""
    name = resume["basics"].get("name") or "(unnamed)"
    _log_success(f"{input_path.name}: imported resume for {name}")
    counts = ", ".join(
        f"{section}={len(resume[section])}"
        for section in ("education", "experience", "projects")
    )
    _log_debug(f"  Sections: {counts}")


def log_presets_applied(preset_names: list, output_path: Path) -> None:
    """Log applied document presets."""
    _log_success(f"Applied presets: {', '.join(preset_names)}")
    _log_info(f"  Output: {output_path}")
