"""
Main Application Window
=======================
Top-level window hosting the parabola canvas.
"""
from PySide6.QtWidgets import QMainWindow

from directrix.app.state import SiteStore
from directrix.config import WINDOW_INIT_HEIGHT, WINDOW_INIT_WIDTH, WINDOW_TITLE
from directrix.view.canvas import ParabolaCanvas


class MainWindow(QMainWindow):
    def __init__(self, store: SiteStore) -> None:
        super().__init__()
        self.store: SiteStore = store

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(WINDOW_INIT_WIDTH, WINDOW_INIT_HEIGHT)

        self.canvas = ParabolaCanvas(self.store, self)
        self.setCentralWidget(self.canvas)
