"""SVG serialization of the smoothed area path."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence, Union
import logging
import math

from .bezier import MoveTo, PathCommand, build_commands
from .config import SMOOTHING_RATIO
from .geometry import Point

logger = logging.getLogger(__name__)

# Emitted once per document; only the path data changes between draws.
STATIC_DEFS = """<defs>
  <linearGradient id="gradient" x1="0%" y1="0%" x2="0" y2="100%">
    <stop offset="0%" stop-color="red"/>
    <stop offset="100%" stop-color="black"/>
  </linearGradient>
  <marker id="dot" viewBox="-5 -5 10 10" markerWidth="5" markerHeight="5">
    <circle r="5" fill="red"/>
    <circle r="3" fill="black"/>
  </marker>
</defs>"""


def fmt_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


def _xy(point: Point) -> str:
    return f"{fmt_number(point.x)},{fmt_number(point.y)}"


def format_command(command: PathCommand) -> str:
    if isinstance(command, MoveTo):
        return f"M {_xy(command.point)}"
    return f"C {_xy(command.entry)} {_xy(command.exit)} {_xy(command.point)}"


def serialize_commands(commands: Iterable[PathCommand]) -> str:
    return " ".join(format_command(cmd) for cmd in commands)


def serialize(points: Sequence[Point], smoothing: float = SMOOTHING_RATIO) -> str:
    """Path data (``d`` attribute) for render *points*: one M then one C per point."""
    return serialize_commands(build_commands(points, smoothing))


def is_finite_path(points: Iterable[Point]) -> bool:
    return all(p.is_finite() for p in points)


def path_element(d: str) -> str:
    return f'<path id="area" d="{d}" fill="url(#gradient)" stroke="grey" marker-mid="url(#dot)"/>'


def render_fragment(points: Sequence[Point], smoothing: float = SMOOTHING_RATIO) -> str:
    """``<defs>`` plus ``<path>``, ready to inject in an ``<svg>`` element."""
    return f"{STATIC_DEFS}\n{path_element(serialize(points, smoothing))}"


def svg_document(path_or_points: Union[str, Sequence[Point]], width: float, height: float) -> str:
    if isinstance(path_or_points, str):
        d = path_or_points
    else:
        d = serialize(path_or_points)
    return (
        f'<svg version="1.1" width="{fmt_number(width)}" height="{fmt_number(height)}" '
        f'xmlns="http://www.w3.org/2000/svg">\n'
        f"{STATIC_DEFS}\n{path_element(d)}\n</svg>\n"
    )


def write_svg(path: Path, d: str, width: float, height: float) -> Path:
    path = Path(path)
    path.write_text(svg_document(d, width, height), encoding="utf-8")
    logger.info("SVG written to %s (%sx%s)", path, width, height)
    return path


__all__ = [
    "STATIC_DEFS",
    "fmt_number",
    "format_command",
    "is_finite_path",
    "path_element",
    "render_fragment",
    "serialize",
    "serialize_commands",
    "svg_document",
    "write_svg",
]
