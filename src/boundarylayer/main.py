"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Session Data Model (ProjectState).
2. Instantiates the Main Window (View).
3. Passes the Model into the View so they can communicate.
4. Kicks off the initial load of the bundled sample data.
"""
import logging
import os
import sys

import pyqtgraph as pg
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from boundarylayer.config import DEFAULT_DATA_PATH
from boundarylayer.logging_config import setup_logging
from boundarylayer.model.state import ProjectState
from boundarylayer.view.main_window import MainWindow, VISIBLE_APP_NAME

ORG_ID = "boundarylayer"
APP_ID = "boundary-layer-viewer"

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app


def main() -> None:
    # Use logging.DEBUG to see every skipped station
    setup_logging(level=logging.INFO)

    app = create_app()

    project = ProjectState()

    window = MainWindow(project)
    window.show()

    window.start_load(DEFAULT_DATA_PATH)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
