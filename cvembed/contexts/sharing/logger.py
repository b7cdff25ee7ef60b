"""
Sharing context logger.

Provides logging interface for the sharing context with automatic [share] prefix.
All sharing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from cvembed.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[share]"


def setup_sharing_logger(log_dir: Path, base_url: str = None) -> Path:
    """
    Setup logger for the sharing context.

    Args:
        log_dir: Directory for this session
        base_url: Embed base URL, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="share",
        log_dir=log_dir,
        extra_provenance={"Base URL": base_url} if base_url else None,
    )


# Wrapper functions with automatic [share] prefix


def _log_info(message: str) -> None:
    """Log info message with [share] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [share] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [share] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [share] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_token_created(resume_name: str, token: str) -> None:
    """Log a freshly encoded share token."""
    _log_success(f"{resume_name}: share token created ({len(token)} chars)")
    if len(token) > 8000:
        _log_warning("Token is long; some browsers and servers cap URLs around 8 KB")
