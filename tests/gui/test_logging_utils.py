"""Unit tests for logging utilities."""

import logging
import queue

from catalog_picker.gui.utils.logging_utils import (
    PACKAGE_LOGGER,
    attach_queue_handler,
    configure_logging,
    detach_queue_handler,
    drain_queue,
)


class TestQueueHandler:

    def test_forwards_warnings_not_info(self):
        log_queue = queue.Queue()
        handler = attach_queue_handler(log_queue)
        try:
            logger = logging.getLogger(f"{PACKAGE_LOGGER}.sub")
            logger.setLevel(logging.DEBUG)
            logger.info("quiet")
            logger.warning("loud %d", 1)
        finally:
            detach_queue_handler(handler)
        assert drain_queue(log_queue) == [("loud 1", "WARNING")]

    def test_drain_respects_limit(self):
        log_queue = queue.Queue()
        for i in range(5):
            log_queue.put((str(i), "INFO"))
        assert len(drain_queue(log_queue, limit=3)) == 3
        assert len(drain_queue(log_queue)) == 2


class TestConfigureLogging:

    def test_idempotent(self):
        logger = configure_logging(logging.DEBUG, "catalog_picker_test_logger")
        configure_logging(logging.INFO, "catalog_picker_test_logger")
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO
