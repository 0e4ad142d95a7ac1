"""Plain geometry values shared by the curve pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping
import math

from .errors import EmptyPointsError, InvalidPointError


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float

    @property
    def degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Line:
    length: float
    angle: float


def line_between(a: Point, b: Point) -> Line:
    """Length and direction (radians) of the segment from *a* to *b*."""
    dx = b.x - a.x
    dy = b.y - a.y
    return Line(length=math.sqrt(dx * dx + dy * dy), angle=math.atan2(dy, dx))


def round2(value: float) -> float:
    """Round to 2 decimals, halves toward +inf.

    NaN/inf, and values too large to scale by 100, are returned as-is.
    """
    scaled = value * 100
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / 100


def as_point(raw, index: int = 0) -> Point:
    if isinstance(raw, Point):
        return raw
    try:
        if isinstance(raw, Mapping):
            x, y = raw["x"], raw["y"]
        else:
            x, y = raw
        return Point(float(x), float(y))
    except (KeyError, TypeError, ValueError):
        raise InvalidPointError(index, raw) from None


def as_points(raw: Iterable) -> List[Point]:
    """Accept Points, (x, y) pairs or {"x", "y"} mappings."""
    if raw is None:
        raise EmptyPointsError()
    pts = [as_point(item, idx) for idx, item in enumerate(raw)]
    if not pts:
        raise EmptyPointsError()
    return pts


__all__ = ["Line", "Point", "Viewport", "as_point", "as_points", "line_between", "round2"]
