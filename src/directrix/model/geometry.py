"""
Parabola Sampling and Clipping
==============================
Turns a focus/directrix pair into the polyline that is visible inside the
currently exposed part of the canvas.

The curve is sampled at a fixed horizontal step across the clip rectangle
(plus one step of margin on each side). A single subpath is traced: it
starts at the first sample inside the vertical band ``(0, clip.y_max)``,
anchored on the preceding off-band sample so the line enters from outside
the band, and it ends for good at the first sample that leaves the canvas
vertically.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING

import numpy as np

from directrix.config import PARABOLA_X_STEP

if TYPE_CHECKING:
    import numpy.typing as npt
    from directrix.model.site import Site

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClipRect:
    """Visible region of the canvas for one draw call."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float


@dataclass
class TracedPath:
    """
    Ordered polyline vertices. The first point is the move-to anchor, every
    following point is a line-to.
    """
    points: list[tuple[float, float]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return len(self.points) < 2

    def __len__(self) -> int:
        return len(self.points)


def sample_xs(clip: ClipRect, step: int = PARABOLA_X_STEP) -> npt.NDArray[np.float64]:
    """
    Sample abscissae covering the clip rectangle with one step of margin.

    Clip bounds are truncated toward zero to whole canvas units and the
    sampling never starts left of x = 0. Both ends are inclusive.

    Examples:
        >>> sample_xs(ClipRect(50.0, 0.0, 550.0, 400.0))[[0, -1]]
        array([ 45., 555.])
        >>> float(sample_xs(ClipRect(2.0, 0.0, 10.0, 10.0))[0])
        0.0
    """
    if step <= 0:
        raise ValueError(f"Sampling step must be positive, got {step}.")
    start_x = max(int(clip.x_min) - step, 0)
    end_x = max(int(clip.x_max), 0) + step
    return np.arange(start_x, end_x + 1, step, dtype=np.float64)


def trace_parabola(
    site: Site,
    height: float,
    clip: ClipRect,
    step: int = PARABOLA_X_STEP,
) -> TracedPath:
    """
    Trace the visible part of the site's parabola.

    Args:
        site: Focus/directrix pair. Degenerate sites produce an empty path.
        height: Canvas height; leaving ``[0, height]`` ends the trace.
        clip: Exposed region; its ``x`` range bounds the sampling and
            ``y_max`` bounds the band in which tracing may start.
        step: Horizontal sampling step in canvas units.

    Returns:
        The traced polyline, possibly empty.
    """
    xs = sample_xs(clip, step)
    ys = site.parabola_y(xs)

    path = TracedPath()
    tracing = False
    prev: tuple[float, float] | None = None

    for x, y in zip(xs.tolist(), ys.tolist()):
        if tracing:
            path.points.append((x, y))
        elif 0.0 < y < clip.y_max:
            tracing = True
            if prev is not None:
                path.points.append(prev)
            path.points.append((x, y))
        else:
            # non-finite samples (degenerate site) always land here
            prev = (x, y)
            continue

        if y < 0.0 or y > height:
            break

    logger.debug(f"Traced {len(path)} points from {len(xs)} samples")
    return path
