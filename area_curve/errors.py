"""Exceptions raised by the curve pipeline."""

from __future__ import annotations


class CurveError(ValueError):
    """Base class for invalid curve inputs."""


class EmptyPointsError(CurveError):
    def __init__(self, what: str = "points") -> None:
        super().__init__(f"{what}: at least one point is required")


class InvalidPointError(CurveError):
    def __init__(self, index: int, raw) -> None:
        super().__init__(f"point #{index} is not an (x, y) pair: {raw!r}")
        self.index = index
        self.raw = raw


class DegenerateDataError(CurveError):
    """maxX or maxY is zero, percentages cannot be computed."""

    def __init__(self, axis: str) -> None:
        super().__init__(f"max{axis.upper()} is 0, cannot normalize the {axis} axis")
        self.axis = axis


class InvalidSmoothingError(CurveError):
    def __init__(self, value: float, low: float, high: float) -> None:
        super().__init__(f"smoothing ratio {value!r} outside [{low}, {high}]")
        self.value = value


__all__ = [
    "CurveError",
    "DegenerateDataError",
    "EmptyPointsError",
    "InvalidPointError",
    "InvalidSmoothingError",
]
