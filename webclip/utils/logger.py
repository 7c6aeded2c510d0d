"""Loguru sinks for the clipping tool.

Clip content goes to stdout, so the console sink writes to stderr and only
shows warnings unless a lower level is asked for. The file sink keeps the
full trace at ``settings.log_level``.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger
from webclip.config import settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"


def setup_logging(console_level: Optional[str] = None):
    """Configure the console and file sinks.

    Args:
        console_level: Level for the stderr sink (defaults to ``settings.console_log_level``)
    """
    logger.remove()
    # Records logged without get_logger still need a name for the formats
    logger.configure(extra={"name": "webclip"})

    Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        sys.stderr,
        level=(console_level or settings.console_log_level).upper(),
        format=CONSOLE_FORMAT,
        colorize=True
    )

    logger.add(
        settings.log_file,
        level=settings.log_level,
        format=FILE_FORMAT,
        rotation="10 MB",
        retention="10 days",
        compression="zip"
    )

    return logger


def get_logger(name: str = __name__):
    """Get a logger tagged with the calling module's name."""
    return logger.bind(name=name)
