"""
Logging setup for the workout service.

Records may carry the plan they concern as ``extra["plan"]``
(``logger.bind(plan=...)``); records without one show ``-``.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_CONSOLE_FORMAT = ("<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | "
                   "<magenta>plan={extra[plan]}</magenta> | <cyan>{name}</cyan> - <level>{message}</level>")
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | plan={extra[plan]} | {name}:{line} - {message}"


def setup_logger(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Route loguru to stderr and, when *log_file* is set, to a daily-rotated file."""
    logger.remove()
    logger.configure(extra={"plan": "-"})
    logger.add(sys.stderr, format=_CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(path, format=_FILE_FORMAT, level=level, rotation="00:00", retention="14 days")

    logger.info(f"Logging at {level}" + (f", file {log_file}" if log_file else ""))
