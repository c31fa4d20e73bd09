"""
Drawing Surfaces
================
The renderer draws through a small, cairo-like command interface so that it
does not depend on any particular toolkit.

Classes:
    DrawingSurface: Protocol the renderer draws on.
    QPainterSurface: Adapter from the protocol to a ``QPainter``.
    SurfaceError: Raised when a command cannot be carried out.
"""
from __future__ import annotations

from typing import Protocol

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QFont, QPainter, QPainterPath, QPen

from directrix.config import Rgba


class SurfaceError(RuntimeError):
    """A drawing command failed on the underlying surface."""


class DrawingSurface(Protocol):
    def set_color(self, rgba: Rgba) -> None: ...
    def new_path(self) -> None: ...
    def add_circle(self, cx: float, cy: float, radius: float) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def stroke(self) -> None: ...
    def draw_text(self, x: float, y: float, text: str, family: str, size: float) -> None: ...


class QPainterSurface:
    """
    Adapter exposing the ``DrawingSurface`` commands on top of a ``QPainter``.

    Path commands accumulate into a ``QPainterPath`` which ``stroke`` draws
    with a cosmetic pen of the current color and then clears. Text is drawn
    immediately with its baseline at ``(x, y)``.
    """

    def __init__(self, painter: QPainter) -> None:
        self._painter = painter
        self._path = QPainterPath()
        self._color = QColor(0, 0, 0)

    @staticmethod
    def _qcolor(rgba: Rgba) -> QColor:
        return QColor.fromRgbF(*(min(max(float(c), 0.0), 1.0) for c in rgba))

    def _require_active(self, operation: str) -> None:
        if not self._painter.isActive():
            raise SurfaceError(f"Cannot {operation}: painter is not active.")

    def set_color(self, rgba: Rgba) -> None:
        self._color = self._qcolor(rgba)

    def new_path(self) -> None:
        self._path = QPainterPath()

    def add_circle(self, cx: float, cy: float, radius: float) -> None:
        self._path.addEllipse(QPointF(cx, cy), radius, radius)

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(x, y)

    def line_to(self, x: float, y: float) -> None:
        self._path.lineTo(x, y)

    def stroke(self) -> None:
        path, self._path = self._path, QPainterPath()
        self._require_active("stroke path")

        pen = QPen(self._color)
        pen.setCosmetic(True)
        self._painter.save()
        self._painter.setPen(pen)
        self._painter.setBrush(Qt.BrushStyle.NoBrush)
        self._painter.drawPath(path)
        self._painter.restore()

    def draw_text(self, x: float, y: float, text: str, family: str, size: float) -> None:
        self._require_active("draw text")
        font = QFont(family)
        if family.lower() == "monospace":
            font.setStyleHint(QFont.StyleHint.Monospace)
        font.setPixelSize(max(1, int(round(size))))

        self._painter.save()
        self._painter.setFont(font)
        self._painter.setPen(QPen(self._color))
        self._painter.drawText(QPointF(x, y), text)
        self._painter.restore()
