"""
Root logger setup for the record store service.

``create_app`` calls ``setup_logging`` with the configured level and
optional log file before the store is built, so the store's
create/update/delete messages and the per‑request access lines all go
through the same handlers.  Calling it again (every ``create_app`` in
the test suite does) only adjusts the level.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Set the root level and attach handlers once.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``; unknown names fall
        back to ``INFO``.
    logfile : Optional[str]
        Also write records to this file (UTF‑8, appended).  Ignored when
        the root logger already has handlers, e.g. under uvicorn or
        pytest.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
