"""
Logging setup for the Northwind API.

``setup_logging`` attaches a console handler (and, when a path is
given, a file handler) to the root logger.  Every module logs through
``logging.getLogger(__name__)`` so records carry the dotted module
name, e.g. ``northwind_api.app.core.db``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name such as ``"DEBUG"`` or ``"info"``.  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to mirror log records into.  Resolved against
        the current working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (uvicorn, pytest or a previous create_app call).
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
