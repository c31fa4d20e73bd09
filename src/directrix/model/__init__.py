"""
The MODEL layer contains pure data structures and the curve sampling logic.
It has NO knowledge of the GUI (Qt).
"""
from directrix.model.geometry import ClipRect, TracedPath, sample_xs, trace_parabola
from directrix.model.site import Site

__all__ = ["ClipRect", "Site", "TracedPath", "sample_xs", "trace_parabola"]
