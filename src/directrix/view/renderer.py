"""
Parabola Renderer
=================
Draws one site onto a ``DrawingSurface``: the focus marker, the directrix
line, the visible part of the parabola and two text labels.

Rendering is best effort. Each marker is built and stroked as one group and
each label is drawn on its own; a group whose surface command fails is
logged and skipped, and the remaining groups are still issued.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable

from directrix.config import (
    DIRECTRIX_COLOR,
    DIRECTRIX_LABEL_POS,
    DIRECTRIX_START_X,
    FOCUS_COLOR,
    FOCUS_LABEL_POS,
    FOCUS_MARKER_RADIUS,
    LABEL_COLOR,
    LABEL_FONT_FAMILY,
    LABEL_FONT_SIZE,
    PARABOLA_COLOR,
    PARABOLA_X_STEP,
)
from directrix.model.geometry import trace_parabola

if TYPE_CHECKING:
    from directrix.model.geometry import ClipRect
    from directrix.model.site import Site
    from directrix.view.surface import DrawingSurface

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """
    Human-readable number for the on-canvas labels.

    Examples:
        >>> format_number(300.0)
        '300'
        >>> format_number(12.5)
        '12.5'
        >>> format_number(float("inf"))
        'inf'
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


class ParabolaRenderer:
    """Stateless renderer; one ``render`` call per repaint."""

    def __init__(self, step: int = PARABOLA_X_STEP) -> None:
        self.step = step

    def render(
        self,
        site: Site,
        width: int,
        height: int,
        clip: ClipRect,
        surface: DrawingSurface,
    ) -> None:
        # Each group is built and stroked on its own; a failing group is
        # skipped and the next one still runs.
        self._attempt("draw focus marker", lambda: self._draw_focus(site, surface))
        self._attempt("draw directrix", lambda: self._draw_directrix(site, width, surface))
        self._attempt("draw parabola", lambda: self._draw_parabola(site, height, clip, surface))
        self._draw_labels(site, surface)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _attempt(what: str, command: Callable[[], None]) -> None:
        try:
            command()
        except Exception as e:
            logger.warning(f"Failed to {what}: {e}")

    def _draw_focus(self, site: Site, surface: DrawingSurface) -> None:
        surface.set_color(FOCUS_COLOR)
        surface.new_path()
        surface.add_circle(site.focus_x, site.focus_y, FOCUS_MARKER_RADIUS)
        surface.stroke()

    def _draw_directrix(self, site: Site, width: int, surface: DrawingSurface) -> None:
        # spans the whole canvas regardless of the clip
        surface.set_color(DIRECTRIX_COLOR)
        surface.new_path()
        surface.move_to(DIRECTRIX_START_X, site.directrix_y)
        surface.line_to(float(width), site.directrix_y)
        surface.stroke()

    def _draw_parabola(self, site: Site, height: int, clip: ClipRect, surface: DrawingSurface) -> None:
        path = trace_parabola(site, height, clip, self.step)
        if path.is_empty:
            logger.debug("No visible parabola segment")
            return

        surface.set_color(PARABOLA_COLOR)
        surface.new_path()
        (x0, y0), *rest = path.points
        surface.move_to(x0, y0)
        for x, y in rest:
            surface.line_to(x, y)
        surface.stroke()

    def _draw_labels(self, site: Site, surface: DrawingSurface) -> None:
        focus_text = f"   Focus: [{format_number(site.focus_x)}, {format_number(site.focus_y)}]"
        directrix_text = f"Directrix: {format_number(site.directrix_y)}"

        self._attempt("set label color", lambda: surface.set_color(LABEL_COLOR))
        for (x, y), text in ((FOCUS_LABEL_POS, focus_text), (DIRECTRIX_LABEL_POS, directrix_text)):
            self._attempt(
                "draw label",
                lambda x=x, y=y, text=text: surface.draw_text(x, y, text, LABEL_FONT_FAMILY, LABEL_FONT_SIZE),
            )
