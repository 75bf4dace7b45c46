"""
Logging setup for the people service.

``run.py`` serves REST and gRPC from one process, and ``create_app``
may also be called on its own (uvicorn factory mode, tests).  Every
entry point calls ``setup_logging`` and the first call wins, so the
store loader, both adapters and the clients all log through a single
root configuration.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Does nothing if the root logger already has handlers.

    Parameters
    ----------
    level : str
        Level name from ``LOG_LEVEL``, case insensitive.  Names that are
        not logging levels fall back to ``INFO``.
    logfile : Optional[str]
        Value of ``LOG_FILE``.  When set, records are also appended to
        that file, resolved against the working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = logging.getLevelName(level.upper())
    root.setLevel(numeric_level if isinstance(numeric_level, int) else logging.INFO)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
