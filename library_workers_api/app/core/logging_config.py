"""
Logging configuration for the API process.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger once per process.  The MongoDB driver
publishes command and connection-pool events on the ``pymongo``
logger hierarchy; those are capped at ``WARNING`` unless the
application itself runs at ``DEBUG`` so request logs stay readable.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DRIVER_LOGGERS = ("pymongo", "motor")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    driver_loggers: Iterable[str] = DRIVER_LOGGERS,
) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to log to in addition to the console.  Empty or
        ``None`` disables the file handler.
    driver_loggers : Iterable[str]
        Logger names of the database driver to quieten.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (tests, or ``create_app`` called twice).
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if numeric_level > logging.DEBUG:
        for name in driver_loggers:
            logging.getLogger(name).setLevel(logging.WARNING)
