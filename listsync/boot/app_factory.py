"""Application factory - Creates the configured application.

Builds the ObservableList, its controller and the MainWindow, configures
logging and runs the Qt event loop.

Author: Michael Economou
Date: 2026-10-19
"""

from __future__ import annotations

import os
import platform
import random
import sys
import time
from collections.abc import Iterable, Sequence

from listsync.config import APP_NAME, APP_VERSION
from listsync.controllers.item_list_controller import ItemListController
from listsync.core.pyqt_imports import QApplication
from listsync.models.observable_list import ObservableList
from listsync.ui.main_window import MainWindow
from listsync.utils.logging.logger_factory import get_cached_logger
from listsync.utils.logging.logger_setup import ConfigureLogger

logger = get_cached_logger(__name__)


def get_user_config_dir(app_name: str = APP_NAME) -> str:
    """Get user configuration directory based on OS."""
    if os.name == "nt":
        base_dir = os.environ.get("APPDATA", os.path.expanduser("~"))
    else:
        base_dir = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return os.path.join(base_dir, app_name)


def create_main_window(
    items: Iterable[int] | None = None, rng: random.Random | None = None
) -> MainWindow:
    """Create the list, its controller and the window that shows them.

    Args:
        items: Initial contents (defaults to DEFAULT_ITEMS)
        rng: Random source for the "Add" action

    Returns:
        MainWindow, not yet shown

    """
    observable = ObservableList(items)
    controller = ItemListController(observable, rng)
    window = MainWindow(observable, controller)
    logger.info("[boot] Main window created with %d items", observable.count)
    return window


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for the listsync application.

    Configures logging, creates the Qt application and the main window,
    and enters the application's main loop.

    Returns:
        Process exit code
    """
    try:
        ConfigureLogger(log_name=APP_NAME, log_dir=os.path.join(get_user_config_dir(), "logs"))

        now = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        logger.info("%s %s started at %s", APP_NAME, APP_VERSION, now)
        logger.info("Platform: %s %s", platform.system(), platform.release())
        logger.debug("Python version: %s", sys.version, extra={"dev_only": True})

        app = QApplication(list(argv) if argv is not None else sys.argv)
        window = create_main_window()
        window.show()
        exit_code = app.exec_()
        logger.info("Application exited with code %d", exit_code)
        return exit_code
    except Exception as e:
        logger.critical("Fatal error in main: %s", e, exc_info=True)
        return 1
