"""
Loguru setup for the mizan shell.

The menu prints to stdout, so log records go to stderr and default to
WARNING: routine add/remove/login records stay out of the way unless the
user asks for them with ``--log-level``. A log file, when configured,
always gets the full timestamped format.
"""

import sys

from loguru import logger

from mizan.core.config_schema import LoggingConfig

CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"
FILE_ROTATION = "10 MB"
FILE_RETENTION = "7 days"


def setup_logging(settings: LoggingConfig | None = None) -> None:
    """Replace loguru's default sink with mizan's stderr and file sinks."""
    settings = settings or LoggingConfig()

    logger.remove()
    logger.add(sys.stderr, level=settings.level, format=CONSOLE_FORMAT)

    if settings.file:
        logger.add(
            str(settings.file),
            level=settings.level,
            format=FILE_FORMAT,
            rotation=FILE_ROTATION,
            retention=FILE_RETENTION,
        )
