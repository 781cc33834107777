"""
Logging configuration for the Catalog API.

``setup_logging`` installs a console handler, and a file handler when
``LOG_FILE`` is set, on the root logger.  Module loggers obtained with
``logging.getLogger(__name__)`` propagate to it.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger unless it already has handlers.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names mean ``INFO``.
    logfile : Optional[str]
        Optional file that receives the same records as the console.
    """
    if logging.getLogger().handlers:
        # pytest, uvicorn or an earlier create_app() got there first.
        return
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=_build_handlers(logfile),
    )
