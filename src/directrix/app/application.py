from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

from directrix.config import APP_ID, ORG_DOMAIN, ORG_ID, WINDOW_TITLE


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    existing = QApplication.instance()
    if existing is not None:
        return existing

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv)
    app.setApplicationDisplayName(WINDOW_TITLE)

    return app
