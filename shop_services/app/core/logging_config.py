"""
Logging configuration for the services.

All three services usually ship their output to the same log
aggregator, so every line carries the name of the service that wrote
it.  The name comes from ``current_service``, a context variable that
each application sets for the duration of a request (see
``main._build_app``); lines logged outside a request use the value set
by the process entry point, or ``-``.
"""

import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(service)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

current_service: ContextVar[str] = ContextVar("current_service", default="-")


class ServiceNameFilter(logging.Filter):
    """Stamp every record with the ``service`` attribute used by ``LOG_FORMAT``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "service"):
            record.service = current_service.get()
        return True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    If no handlers are attached to the root logger, attach a console
    handler and optionally a file handler.  A root logger that is
    already configured (by uvicorn, pytest or an earlier call) is left
    alone.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file that receives the same records as the console.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(ServiceNameFilter())
        logger.addHandler(handler)
