"""
Logging setup for the noteg tools.

Console output goes through rich's RichHandler; a plain file log with
the full record format is added when a path is given. Library modules
only call logging.getLogger(__name__) and leave handlers to this.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

FILE_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    name: str = "noteg",
    console_level: int = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Configure the root logger and return the named tool logger.

    Calling it again replaces the handlers installed by the previous call;
    handlers added by anything else are left alone.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_noteg", False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.DEBUG)

    ch = RichHandler(
        level=console_level,
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    ch._noteg = True
    root.addHandler(ch)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        fh._noteg = True
        root.addHandler(fh)

    logger = logging.getLogger(name)
    logger.debug("Logger initialized: %s (console level %s)",
                 name, logging.getLevelName(console_level))
    return logger
