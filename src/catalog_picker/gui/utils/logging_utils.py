"""
Logging utilities: console setup and a queue handler for GUI display.
"""
from __future__ import annotations

import logging
from queue import Empty, Queue
from typing import List, Optional, Tuple

LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"
PACKAGE_LOGGER = "catalog_picker"


def configure_logging(level: int = logging.INFO, logger_name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Install a single stream handler on the package logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Level for the package logger
        logger_name: Logger to configure

    Returns:
        The configured logger
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    if not any(getattr(h, "_catalog_picker", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._catalog_picker = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


class QueueLogHandler(logging.Handler):
    """
    A logging handler that sends (message, level) tuples to a queue.

    Used to surface log messages from worker threads in the window's
    status bar. The GUI thread drains the queue with drain_queue().
    """

    def __init__(self, log_queue: Queue, level: int = logging.WARNING):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.log_queue.put((self.format(record), record.levelname))
        except Exception:
            self.handleError(record)


def attach_queue_handler(
    log_queue: Queue,
    logger_name: Optional[str] = PACKAGE_LOGGER,
    level: int = logging.WARNING,
) -> QueueLogHandler:
    """
    Attach a QueueLogHandler to the specified logger (or root logger if None).

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue, level)
    logger.addHandler(handler)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = PACKAGE_LOGGER) -> None:
    """Remove a QueueLogHandler from the specified logger."""
    logging.getLogger(logger_name).removeHandler(handler)


def drain_queue(log_queue: Queue, limit: int = 100) -> List[Tuple[str, str]]:
    """Pop up to ``limit`` pending (message, level) entries without blocking."""
    entries: List[Tuple[str, str]] = []
    while len(entries) < limit:
        try:
            entries.append(log_queue.get_nowait())
        except Empty:
            break
    return entries
