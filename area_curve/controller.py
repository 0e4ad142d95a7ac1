"""Host-facing controller: recompute the curve on data or size changes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Sequence

from .bezier import PathCommand, build_commands, check_smoothing
from .config import DEFAULT_POLICY, SMOOTHING_RATIO
from .geometry import Point, Viewport
from .normalize import DegeneratePolicy, normalize
from .svg import STATIC_DEFS, is_finite_path, serialize_commands

logger = logging.getLogger(__name__)


class ResizeHandle(Protocol):
    def release(self) -> None: ...


class Surface(Protocol):
    """What the controller needs from the widget that shows the path."""

    def measure(self) -> Optional[Viewport]: ...

    def install_defs(self, defs: str) -> None: ...

    def paint(self, d: str, commands: Sequence[PathCommand]) -> None: ...

    def observe_resize(self, callback: Callable[[float, float], None]) -> ResizeHandle: ...


@dataclass(frozen=True)
class CurvePath:
    viewport: Viewport
    render_points: List[Point]
    commands: List[PathCommand]
    d: str

    @property
    def finite(self) -> bool:
        return is_finite_path(self.render_points)


def compute_path(
    points,
    viewport: Viewport,
    smoothing: float = SMOOTHING_RATIO,
    policy: DegeneratePolicy = DEFAULT_POLICY,
) -> CurvePath:
    render = normalize(points, viewport.width, viewport.height, policy=policy)
    commands = build_commands(render, smoothing)
    return CurvePath(viewport, render, commands, serialize_commands(commands))


class AreaCurveController:
    """Owns the last inputs and the resize subscription of one surface.

    ``initialize`` draws once and starts observing resizes, ``teardown``
    releases the subscription. Every recompute is a call to
    :func:`compute_path`; the controller only decides *when* to call it.
    """

    def __init__(
        self,
        points,
        *,
        smoothing: float = SMOOTHING_RATIO,
        policy: DegeneratePolicy = DEFAULT_POLICY,
    ) -> None:
        self._points = points
        self.smoothing = check_smoothing(smoothing)
        self.policy = policy
        self._surface: Optional[Surface] = None
        self._handle: Optional[ResizeHandle] = None
        self._viewport: Optional[Viewport] = None
        self.last_result: Optional[CurvePath] = None
        self.draw_count = 0

    @property
    def points(self):
        return self._points

    @property
    def last_path(self) -> Optional[str]:
        return self.last_result.d if self.last_result else None

    @property
    def observing(self) -> bool:
        return self._handle is not None

    # Lifecycle --------------------------------------------------------
    def initialize(self, surface: Surface) -> Optional[str]:
        if self._handle is not None:
            self.teardown()
        self._surface = surface
        self._viewport = None
        surface.install_defs(STATIC_DEFS)
        d = self.draw()
        self._handle = surface.observe_resize(self.on_resize)
        return d

    def teardown(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.release()
            logger.debug("Resize observer released")
        self._surface = None

    # Signals ----------------------------------------------------------
    def on_inputs_changed(self, points=None, viewport: Optional[Viewport] = None) -> Optional[str]:
        if points is not None:
            self._points = points
        if viewport is not None:
            self._viewport = Viewport(float(viewport.width), float(viewport.height))
        return self.draw()

    def on_resize(self, width: float, height: float) -> Optional[str]:
        return self.on_inputs_changed(viewport=Viewport(width, height))

    def set_props(self, points=None, **others) -> bool:
        """Host property update. Only a new ``points`` object triggers a redraw."""
        if points is not None and points is not self._points:
            self.on_inputs_changed(points=points)
            return True
        if others:
            logger.debug("No redraw for props %s", ", ".join(sorted(others)))
        return False

    def set_smoothing(self, smoothing: float) -> Optional[str]:
        self.smoothing = check_smoothing(smoothing)
        return self.draw()

    # Drawing ----------------------------------------------------------
    def _target_viewport(self) -> Optional[Viewport]:
        if self._surface is None:
            return self._viewport
        measured = self._surface.measure()
        if measured is None:
            return None
        return self._viewport or measured

    def draw(self) -> Optional[str]:
        viewport = self._target_viewport()
        if viewport is None:
            logger.debug("No render target, draw skipped")
            return None
        if viewport.degenerate:
            logger.debug("Degenerate viewport %sx%s", viewport.width, viewport.height)
        result = compute_path(self._points, viewport, self.smoothing, self.policy)
        if not result.finite:
            logger.warning("Non-finite coordinates in path (policy=%s)", self.policy)
        self.last_result = result
        self.draw_count += 1
        if self._surface is not None:
            self._surface.paint(result.d, result.commands)
        return result.d


__all__ = ["AreaCurveController", "CurvePath", "ResizeHandle", "Surface", "compute_path"]
