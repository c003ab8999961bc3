"""
gui_entry.py - GUI Entry

Starts the Bulk Renamer window
"""

import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from .. import __version__
from .gui_mainwindow import MainWindow


def create_application(argv: Optional[List[str]] = None) -> QApplication:
    """Return the process-wide QApplication, creating it on first use"""
    app = QApplication.instance()
    if app is None:
        # Rounding policy must be set before the application object exists
        QApplication.setHighDpiScaleFactorRoundingPolicy(
            Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
        )
        app = QApplication(sys.argv if argv is None else argv)

    app.setApplicationName("Bulk Renamer")
    app.setApplicationVersion(__version__)
    app.setStyle("Fusion")
    return app


def main():
    """GUI main entry"""
    app = create_application()

    window = MainWindow()
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
