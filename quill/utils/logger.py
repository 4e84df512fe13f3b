"""
Session logging for quill commands.

One loguru configuration per process: a DEBUG file sink inside a per-session
directory and an INFO console sink on stderr (stdout is reserved for command
output such as previews and compact event listings). Each session log opens
with a provenance block so a log file can be traced back to the invocation
that produced it.

Context modules never configure sinks; they log through the prefixed wrappers
in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from quill import __version__
from quill.utils.timestamp import now

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | <level>{message}</level>"

CONSOLE_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def session_dir(logs_root: Path, command: str) -> Path:
    """Directory for one command run, e.g. outs/logs/cli_export_20251114_123456."""
    return Path(logs_root) / f"cli_{command}_{now()}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru output to a session log file and stderr.

    Any previously installed sinks (including loguru's default) are removed,
    so calling this twice in one process starts a fresh session.

    Args:
        context_name: Session name; the log file is {log_dir}/{context_name}.log
        log_dir: Session directory, created if missing
        extra_provenance: Extra "key: value" lines for the provenance block
        console_level: Minimum level echoed to stderr

    Returns:
        Path to the session log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in CONSOLE_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    _log_provenance(extra_provenance or {})
    return log_file


def _log_provenance(extra: Dict[str, object]) -> None:
    # File-only detail; the console sink starts at INFO
    logger.debug("-" * 60)
    logger.debug(f"quill {__version__} | Python {sys.version.split()[0]}")
    logger.debug(f"Invocation: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    for key, value in extra.items():
        logger.debug(f"{key}: {value}")
    logger.debug("-" * 60)
