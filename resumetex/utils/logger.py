"""
Session logging for resumetex scripts.

Each CLI run gets its own directory with one log file per context. The core
library only emits records through the context wrappers
(contexts/{context}/logger.py); sinks are installed here, once per run.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()
CONSOLE_LOG_LEVEL = os.getenv("RESUMETEX_CONSOLE_LOG_LEVEL", "INFO")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"
HEADER_RULE = "-" * 72


def session_details(extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Describe the current run: entry script, arguments, directory, interpreter.

    Entries in extra are appended after the standard ones.

    Example:
        >>> list(session_details({"Data file": "me.yaml"}))[-1]
        'Data file'
    """
    details: Dict[str, Any] = {
        "Script": Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "<interactive>",
        "Arguments": " ".join(sys.argv[1:]) or "(none)",
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
    }
    details.update(extra or {})
    return details


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, Any]] = None,
    console_level: Optional[str] = None,
) -> Path:
    """
    Install a DEBUG file sink and a console sink for one context.

    Any previously installed sinks are dropped, so calling this twice in one
    process leaves only the latest session's sinks.

    Args:
        context_name: Context identifier; names the log file ("template", "render")
        log_dir: Session directory, created if missing
        extra_provenance: Extra lines for the session header
        console_level: Console threshold (default: RESUMETEX_CONSOLE_LOG_LEVEL or INFO)

    Returns:
        Path to the session's log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level or CONSOLE_LOG_LEVEL)

    logger.debug(HEADER_RULE)
    for key, value in session_details(extra_provenance).items():
        logger.debug(f"{key}: {value}")
    logger.debug(HEADER_RULE)

    return log_file
