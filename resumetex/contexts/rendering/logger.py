"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumetex.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, tex_file: Path = None) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        tex_file: LaTeX file being checked, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"TeX file": tex_file} if tex_file else None,
    )


# Wrapper functions with automatic [render] prefix


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_validation_start(source: str, num_chars: int) -> None:
    """Log start of validation."""
    _log_debug(f"Validating {source} ({num_chars} characters)")


def log_validation_result(source: str, result) -> None:
    """
    Log validation result.

    Args:
        source: What was validated (file name or "document text")
        result: ValidationResult from validate_latex()
    """
    if result.valid:
        _log_success(f"{source}: {result.message}")
    else:
        _log_error(f"{source}: {len(result.errors)} problem(s) found")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")
