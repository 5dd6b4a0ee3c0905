"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumetex.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, data_file: Path = None) -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session
        data_file: Resume data file being rendered, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Data file": data_file} if data_file else None,
    )


# Wrapper functions with automatic [template] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_assembly_start(name: str, section_counts: dict) -> None:
    """Log start of document assembly with the number of records per section."""
    _log_debug(f"Assembling resume for {name}")
    for section, count in section_counts.items():
        _log_debug(f"  {section}: {count}")


def log_assembly_result(included_sections: list, num_chars: int) -> None:
    """Log which sections made it into the document."""
    if included_sections:
        _log_debug(f"Sections rendered: {', '.join(included_sections)}")
    else:
        _log_debug("No optional sections rendered (heading only)")
    _log_debug(f"Document length: {num_chars} characters")


def log_missing_sections(missing: list) -> None:
    """Warn about recommended sections that have no data."""
    if missing:
        _log_warning(f"Missing or incomplete sections: {', '.join(missing)}")
