"""Smoothed area curve: data points to a cubic-bezier SVG path."""

from .bezier import CurveTo, MoveTo, build_commands, control_point
from .config import SMOOTHING_RATIO
from .controller import AreaCurveController, CurvePath, compute_path
from .errors import CurveError, DegenerateDataError, EmptyPointsError, InvalidPointError, InvalidSmoothingError
from .geometry import Line, Point, Viewport, line_between
from .normalize import normalize
from .svg import STATIC_DEFS, render_fragment, serialize, svg_document

__all__ = [
    "AreaCurveController",
    "CurvePath",
    "CurveError",
    "CurveTo",
    "DegenerateDataError",
    "EmptyPointsError",
    "InvalidPointError",
    "InvalidSmoothingError",
    "Line",
    "MoveTo",
    "Point",
    "SMOOTHING_RATIO",
    "STATIC_DEFS",
    "Viewport",
    "build_commands",
    "compute_path",
    "control_point",
    "line_between",
    "normalize",
    "render_fragment",
    "serialize",
    "svg_document",
]
