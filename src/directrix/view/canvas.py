from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import QRect, Qt
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from directrix.config import WINDOW_INIT_HEIGHT, WINDOW_INIT_WIDTH
from directrix.model.geometry import ClipRect
from directrix.view.renderer import ParabolaRenderer
from directrix.view.surface import QPainterSurface

if TYPE_CHECKING:
    from directrix.app.state import SiteStore

logger = logging.getLogger(__name__)


def clip_rect_from_qrect(rect: QRect) -> ClipRect:
    """Exposed region as ``(x_min, y_min, x_max, y_max)``, far edges exclusive."""
    return ClipRect(
        x_min=float(rect.x()),
        y_min=float(rect.y()),
        x_max=float(rect.x() + rect.width()),
        y_max=float(rect.y() + rect.height()),
    )


class ParabolaCanvas(QWidget):
    """
    Drawing area for a single site.

    - paint: renders the site clipped to the exposed region,
    - button release: moves the focus to the pointer,
    - pointer motion (with or without a pressed button): moves the directrix
      to the pointer's y.
    """
    def __init__(self, store: SiteStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.renderer = ParabolaRenderer()

        self.setMouseTracking(True)
        self.setMinimumSize(WINDOW_INIT_WIDTH, WINDOW_INIT_HEIGHT)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)

        self.store.site_changed.connect(self._on_site_changed)

    def _on_site_changed(self, _site: object) -> None:
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
        try:
            painter.fillRect(event.rect(), Qt.GlobalColor.white)
            self.renderer.render(
                self.store.site,
                self.width(),
                self.height(),
                clip_rect_from_qrect(event.rect()),
                QPainterSurface(painter),
            )
        finally:
            painter.end()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        self.store.set_focus(pos.x(), pos.y())
        super().mouseReleaseEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self.store.set_directrix(event.position().y())
        event.accept()
