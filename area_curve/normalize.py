"""Projection of data points into the pixel space of the drawing surface."""

from __future__ import annotations

import logging
from typing import Iterable, List, Literal

import numpy as np

from .config import DEFAULT_POLICY
from .errors import DegenerateDataError
from .geometry import Point, as_points

logger = logging.getLogger(__name__)

DegeneratePolicy = Literal["propagate", "reject", "clamp"]
POLICIES = ("propagate", "reject", "clamp")

# Baseline anchors, in data space, closing the area against a flat bottom.
BASELINE_START = Point(0.0, 0.0)
BASELINE_END = Point(100.0, 0.0)


def get_percentage(value, maximum):
    return (value / maximum) * 100


def reverse_percentage(value):
    return abs(100 - value)


def _percent_axis(values: np.ndarray, maximum: float, axis: str, policy: str) -> np.ndarray:
    if maximum == 0:
        if policy == "reject":
            raise DegenerateDataError(axis)
        logger.debug("max%s is 0, policy=%s", axis.upper(), policy)
    with np.errstate(divide="ignore", invalid="ignore"):
        percent = get_percentage(values, maximum)
    if policy == "clamp":
        bad = ~np.isfinite(percent)
        if bad.any():
            logger.warning("Clamped %d non-finite %s percentage(s) to 0", int(bad.sum()), axis)
            percent = np.where(bad, 0.0, percent)
    return percent


def normalize(
    points: Iterable,
    width: float,
    height: float,
    policy: DegeneratePolicy = DEFAULT_POLICY,
) -> List[Point]:
    """Return render points for *points* inside a ``width`` x ``height`` surface.

    The baseline anchors are added first, then every point is expressed as a
    percentage of the data maxima (computed on the caller's points only),
    flipped vertically and scaled by the viewport multipliers. The result has
    ``len(points) + 2`` entries in the same order.
    """
    if policy not in POLICIES:
        raise ValueError(f"unknown degenerate policy {policy!r}")
    data = as_points(points)
    w = float(width)
    h = float(height)
    if w < 0 or h < 0:
        logger.debug("Negative viewport %sx%s clamped to 0", w, h)
        w, h = max(0.0, w), max(0.0, h)

    max_x = max(p.x for p in data)
    max_y = max(p.y for p in data)

    augmented = [BASELINE_START, *data, BASELINE_END]
    xs = np.array([p.x for p in augmented], dtype=float)
    ys = np.array([p.y for p in augmented], dtype=float)

    x_percent = _percent_axis(xs, max_x, "x", policy)
    y_percent = _percent_axis(ys, max_y, "y", policy)

    render_x = x_percent * (w / 100)
    render_y = reverse_percentage(y_percent) * (h / 100)
    return [Point(float(x), float(y)) for x, y in zip(render_x, render_y)]


__all__ = [
    "BASELINE_END",
    "BASELINE_START",
    "DegeneratePolicy",
    "POLICIES",
    "get_percentage",
    "normalize",
    "reverse_percentage",
]
