"""
Review context logger.

Provides logging interface for the review context with automatic [review] prefix.
All review modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from cvembed.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[review]"


def setup_review_logger(log_dir: Path, input_path: Path = None) -> Path:
    """
    Setup logger for the review context.

    Args:
        log_dir: Directory for this validation session
        input_path: Resume file being validated, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="review",
        log_dir=log_dir,
        extra_provenance={"Input": input_path} if input_path else None,
    )


# Wrapper functions with automatic [review] prefix


def _log_info(message: str) -> None:
    """Log info message with [review] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [review] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [review] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [review] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [review] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_validation_start(resume_name: str, log_file: Path) -> None:
    """Log start of validation."""
    _log_info(f"Validating {resume_name}")
    _log_info(f"Log file: {log_file}")


def log_validation_result(resume_name: str, result, verbose: bool = False) -> None:
    """
    Log validation result with findings.

    Args:
        resume_name: Resume identifier (usually the file stem)
        result: ValidationResult from validate_resume()
        verbose: Log every warning at INFO instead of DEBUG
    """
    if result.valid:
        _log_success(f"{resume_name}: valid, score {result.score}/100")
    else:
        _log_error(f"{resume_name}: {len(result.errors)} errors, score {result.score}/100")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")

    if result.warnings:
        _log_warning(f"{len(result.warnings)} warnings")
        for i, warn in enumerate(result.warnings, 1):
            if verbose:
                _log_info(f"  Warning {i}: {warn}")
            else:
                _log_debug(f"  Warning {i}: {warn}")

    _log_debug(f"  Signals: {result.signals}")
