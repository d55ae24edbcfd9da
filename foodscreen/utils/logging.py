"""Root logger setup for the Tk and NiceGUI runtimes.

The level is resolved by ``ScreenSettings``; this module only installs it.
"""

from __future__ import annotations

import logging
from typing import Iterable

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"

# web server loggers that flood INFO with per-request lines
_CHATTY_LOGGERS = ("nicegui", "uvicorn", "uvicorn.access", "watchfiles")


def configure_root(level: int = logging.INFO, *, chatty: Iterable[str] = _CHATTY_LOGGERS) -> int:
    """Install the compact root handler once and apply ``level``.

    Loggers named in ``chatty`` are held at WARNING unless ``level`` is DEBUG,
    so a section tick log is not buried under request lines.
    Returns the level applied to the root logger.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(level)

    library_level = logging.NOTSET if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in chatty:
        logging.getLogger(name).setLevel(library_level)
    return level
