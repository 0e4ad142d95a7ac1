"""Control points and cubic bezier commands for the smoothed curve."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union
import math

from .config import SMOOTHING_RANGE, SMOOTHING_RATIO
from .errors import EmptyPointsError, InvalidSmoothingError
from .geometry import Point, line_between, round2


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class CurveTo:
    entry: Point
    exit: Point
    point: Point


PathCommand = Union[MoveTo, CurveTo]


def check_smoothing(smoothing: float) -> float:
    value = float(smoothing)
    low, high = SMOOTHING_RANGE
    if not (low <= value <= high):
        raise InvalidSmoothingError(value, low, high)
    return value


def control_point(
    current: Point,
    previous: Optional[Point],
    next_: Optional[Point],
    reverse: bool = False,
    smoothing: float = SMOOTHING_RATIO,
) -> Point:
    """Position of the control point attached to *current*.

    The tangent follows the opposing line (previous -> next). At either end of
    the sequence the missing neighbour is replaced by *current* itself, which
    shortens the opposing line instead of failing. ``reverse`` points the
    control point backwards, for the end of a segment.
    """
    p = previous or current
    n = next_ or current
    opposed = line_between(p, n)
    angle = opposed.angle + (math.pi if reverse else 0.0)
    length = opposed.length * smoothing
    x = current.x + math.cos(angle) * length
    y = current.y + math.sin(angle) * length
    return Point(round2(x), round2(y))


def bezier_command(points: Sequence[Point], i: int, smoothing: float = SMOOTHING_RATIO) -> CurveTo:
    """Cubic segment ending at ``points[i]`` (``i >= 1``)."""
    point = points[i]
    before = points[i - 2] if i >= 2 else None
    after = points[i + 1] if i + 1 < len(points) else None
    entry = control_point(points[i - 1], before, point, smoothing=smoothing)
    exit_ = control_point(point, points[i - 1], after, reverse=True, smoothing=smoothing)
    return CurveTo(entry, exit_, point)


def build_commands(points: Sequence[Point], smoothing: float = SMOOTHING_RATIO) -> List[PathCommand]:
    if not points:
        raise EmptyPointsError("render points")
    smoothing = check_smoothing(smoothing)
    commands: List[PathCommand] = [MoveTo(points[0])]
    for idx in range(1, len(points)):
        commands.append(bezier_command(points, idx, smoothing))
    return commands


__all__ = [
    "CurveTo",
    "MoveTo",
    "PathCommand",
    "bezier_command",
    "build_commands",
    "check_smoothing",
    "control_point",
]
