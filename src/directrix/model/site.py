"""
Site (Data Model)
=================
The one mutable value the application edits: a parabola focus and the
y-coordinate of its horizontal directrix.

Classes:
    Site: Focus/directrix pair with in-place mutators.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

import numpy as np

from directrix.config import DIRECTRIX_INIT_OFFSET

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass
class Site:
    """
    Simplified Voronoi site.

    Nothing is validated: ``focus_y == directrix_y`` is accepted and
    yields a degenerate parabola (see ``parabola_y``).
    """
    focus_x: float
    focus_y: float
    directrix_y: float

    @classmethod
    def default(cls, width: float, height: float) -> Site:
        """Focus centered on the canvas, directrix slightly below it."""
        return cls(
            focus_x=width / 2.0,
            focus_y=height / 2.0,
            directrix_y=height / 2.0 + DIRECTRIX_INIT_OFFSET,
        )

    def set_focus(self, x: float, y: float) -> None:
        self.focus_x = x
        self.focus_y = y
        logger.debug(f"Focus moved to ({x}, {y})")

    def set_directrix(self, y: float) -> None:
        self.directrix_y = y
        logger.debug(f"Directrix moved to y={y}")

    @property
    def is_degenerate(self) -> bool:
        return self.focus_y == self.directrix_y

    def parabola_y(self, x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """
        Evaluate the parabola equidistant from the focus and the directrix.

            y = (x - fx)^2 / (2 * (fy - d)) + (fy + d) / 2

        Works on scalars and arrays. When the focus lies on the directrix the
        divisor is zero; the result is then ``inf``/``-inf`` (or ``nan`` at
        ``x == fx``) instead of an exception.

        Examples:
            >>> Site(300.0, 200.0, 260.0).parabola_y(300.0)
            230.0
        """
        xs = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            scale = np.float64(1.0) / (np.float64(2.0) * (np.float64(self.focus_y) - np.float64(self.directrix_y)))
            ys = scale * (xs - self.focus_x) ** 2 + (self.focus_y + self.directrix_y) / 2.0
        if ys.ndim == 0:
            return float(ys)
        return ys
