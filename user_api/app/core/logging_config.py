"""
Root logger setup for the User API.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.  Repository and service modules log
through ``logging.getLogger(__name__)``; storage failures and rejected
request bodies are logged by the exception handlers in ``main``.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_handlers(logfile: Optional[str] = None) -> List[logging.Handler]:
    """Return a console handler, plus a UTF-8 file handler for ``logfile``."""
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Attach the service's handlers to the root logger.

    Leaves the root logger alone when it already has handlers, as it
    does under uvicorn's own config or pytest, so repeated
    ``create_app`` calls never duplicate output.  Unknown level names
    fall back to ``INFO``.  Returns whether handlers were installed.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in build_handlers(logfile):
        root.addHandler(handler)
    return True
