"""
Application Initialization
==========================
Builds the model, the view and the Qt event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the default Site and the SiteStore that owns it.
2. Instantiates the Main Window (View), passing the store in.
3. Prevents circular import errors by being the orchestrator.
"""
import sys

from directrix.app.application import create_app
from directrix.app.state import SiteStore
from directrix.config import WINDOW_INIT_HEIGHT, WINDOW_INIT_WIDTH
from directrix.logging_config import setup_logging
from directrix.model.site import Site
from directrix.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (Console + optional file from DIRECTRIX_LOG_FILE)
    # DIRECTRIX_LOG_LEVEL=DEBUG traces every pointer-driven mutation
    setup_logging()

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    store = SiteStore(Site.default(WINDOW_INIT_WIDTH, WINDOW_INIT_HEIGHT))

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
