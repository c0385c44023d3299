"""
Entry point for the Catalog Picker GUI.
"""
import logging
import queue
import sys

logger = logging.getLogger(__name__)


def run() -> int:
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication

    from catalog_picker import __version__
    from catalog_picker.bulk import BulkSelectConfig
    from catalog_picker.config import AppConfig
    from catalog_picker.gui.controller import CatalogController
    from catalog_picker.gui.main_window import MainWindow
    from catalog_picker.gui.utils.logging_utils import (
        attach_queue_handler,
        configure_logging,
        detach_queue_handler,
    )
    from catalog_picker.source import ArticSource

    config = AppConfig.from_env()
    configure_logging(config.log_level_value)
    logger.info(f"Catalog Picker {__version__} using {config.base_url}")

    app = QApplication(sys.argv)
    app.setApplicationName("Catalog Picker")
    app.setApplicationDisplayName("Catalog Picker")

    log_queue: queue.Queue = queue.Queue()
    handler = attach_queue_handler(log_queue)

    source = ArticSource(
        config.base_url,
        timeout_s=config.timeout_s,
        connect_retries=config.connect_retries,
    )
    controller = CatalogController(
        source,
        display_page_size=config.display_page_size,
        bulk_config=BulkSelectConfig(page_size=config.bulk_page_size),
    )
    try:
        window = MainWindow(controller, log_queue)
        window.show()
        return app.exec()
    finally:
        # Workers still in flight drop their results once shut down
        controller.shutdown()
        detach_queue_handler(handler)
        source.close()


if __name__ == "__main__":
    sys.exit(run())
