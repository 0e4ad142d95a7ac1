"""Pytest fixtures and configuration."""

import matplotlib

matplotlib.use("Agg")

import pytest

from area_curve.geometry import Point, Viewport


class FakeHandle:
    def __init__(self, surface):
        self.surface = surface

    def release(self):
        self.surface.released += 1


class FakeSurface:
    """In-memory stand-in for the Tk chart widget."""

    def __init__(self, size=(200, 60)):
        self.size = size
        self.defs = []
        self.painted = []
        self.callbacks = []
        self.released = 0

    def measure(self):
        if self.size is None:
            return None
        return Viewport(*self.size)

    def install_defs(self, defs):
        self.defs.append(defs)

    def paint(self, d, commands):
        self.painted.append(d)

    def observe_resize(self, callback):
        self.callbacks.append(callback)
        return FakeHandle(self)

    def resize(self, width, height):
        self.size = (width, height)
        for cb in self.callbacks:
            cb(width, height)


def make_surface(size=(200, 60)):
    return FakeSurface(size)


@pytest.fixture
def sample_points():
    """Data set shipped with the demo window."""
    return [
        {"x": 0, "y": 100},
        {"x": 20, "y": 20},
        {"x": 40, "y": 50},
        {"x": 60, "y": 20},
        {"x": 80, "y": 50},
        {"x": 100, "y": 20},
    ]


@pytest.fixture
def triangle():
    """Render points of a single data point (50, 50) in a 100x100 viewport."""
    return [Point(0.0, 100.0), Point(100.0, 0.0), Point(200.0, 100.0)]


@pytest.fixture
def surface():
    return make_surface()
