"""
Logging setup for the demo service.

Every record is tagged with the name of the asyncio task that emitted it, so
the product and remote branches of one combined request can be told apart
while they interleave.
"""

import asyncio
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from async_demo.core.config import Settings, config

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(task)-18s | %(name)s | %(message)s"

# Handlers installed by the last setup_logging call
_installed: List[logging.Handler] = []


class TaskNameFilter(logging.Filter):
    """Adds ``record.task``: the current asyncio task name, or "-" outside one."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            task = asyncio.current_task()
        except RuntimeError:
            task = None
        record.task = task.get_name() if task is not None else "-"
        return True


def setup_logging(settings: Optional[Settings] = None, log_format: str = DEFAULT_LOG_FORMAT) -> None:
    """
    Configure root logging from settings.

    Installs a stdout handler and, when ``log_file`` is set, a rotating file
    handler. Calling again replaces the handlers from the previous call.
    With ``debug`` on, httpx logs each outbound request at INFO.
    """
    settings = settings or config

    root = logging.getLogger()
    for handler in _installed:
        root.removeHandler(handler)
        handler.close()
    _installed.clear()

    formatter = logging.Formatter(log_format)
    task_filter = TaskNameFilter()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(task_filter)
        root.addHandler(handler)
        _installed.append(handler)

    root.setLevel(getattr(logging, settings.log_level, logging.INFO))

    client_level = logging.INFO if settings.debug else logging.WARNING
    logging.getLogger("httpx").setLevel(client_level)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
