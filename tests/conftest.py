"""Shared fixtures: an offscreen QApplication and a command-recording surface."""
from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from directrix.model.site import Site
from directrix.view.surface import SurfaceError


class RecordingSurface:
    """DrawingSurface that stores every command it receives."""

    def __init__(self, fail_on: tuple[str, ...] = (), fail_times: int | None = None) -> None:
        self.commands: list[tuple] = []
        self.fail_on = set(fail_on)
        self.fail_times = fail_times

    def _record(self, *command) -> None:
        self.commands.append(command)
        if command[0] in self.fail_on and (self.fail_times is None or self.fail_times > 0):
            if self.fail_times is not None:
                self.fail_times -= 1
            raise SurfaceError(f"{command[0]} failed")

    def set_color(self, rgba) -> None:
        self._record("set_color", tuple(rgba))

    def new_path(self) -> None:
        self._record("new_path")

    def add_circle(self, cx, cy, radius) -> None:
        self._record("add_circle", cx, cy, radius)

    def move_to(self, x, y) -> None:
        self._record("move_to", x, y)

    def line_to(self, x, y) -> None:
        self._record("line_to", x, y)

    def stroke(self) -> None:
        self._record("stroke")

    def draw_text(self, x, y, text, family, size) -> None:
        self._record("draw_text", x, y, text, family, size)

    def named(self, name: str) -> list[tuple]:
        return [c for c in self.commands if c[0] == name]


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def default_site() -> Site:
    """Start-up site for a 600x400 canvas: focus (300, 200), directrix 210."""
    return Site.default(600, 400)
