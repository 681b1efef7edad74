"""
Logging setup for the state workforce ranking tools.

Levels and the optional log file default to the values in Settings, so a
batch run configured through the environment needs no arguments here.
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.utils.config import get_settings


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Libraries that log per-cell or per-sheet detail at DEBUG
QUIET_LOGGERS = ("openpyxl", "pandas")


def _build_handlers(numeric_level: int, log_file: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> int:
    """
    Configure the root logger for a ranking run.

    Args:
        level: Logging level name; defaults to Settings.log_level.
            Unknown names fall back to INFO
        log_file: Log file path; defaults to Settings.log_file

    Returns:
        The numeric level applied
    """
    settings = get_settings()
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    for handler in _build_handlers(numeric_level, log_file):
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return numeric_level


def get_logger(name: str) -> logging.Logger:
    """Logger for a ranking module or script, namespaced under state_rankings for scripts."""
    if name == "__main__":
        name = "state_rankings.cli"
    return logging.getLogger(name)
