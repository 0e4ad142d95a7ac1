"""Matplotlib widget drawing the smoothed area path inside a Tk frame."""

from __future__ import annotations

import logging
import tkinter as tk
from typing import Callable, Optional, Sequence

import numpy as np
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure
from matplotlib.patches import PathPatch

from ..bezier import PathCommand
from ..config import DEFAULT_HEIGHT_PX, DEFAULT_WIDTH_PX, RESIZE_DEBOUNCE_MS
from ..geometry import Viewport
from .paths import mid_vertices, to_mpl_path
from .resize import ResizeBinding
from .theming import fill_cmap, marker_layers, theme

logger = logging.getLogger(__name__)

_DPI = 96


class AreaChartWidget:
    """Resizable surface for :class:`~area_curve.controller.AreaCurveController`.

    The frame plays the role of the container whose size drives the curve;
    :meth:`set_width` resizes it, which in turn fires the resize observer.
    """

    def __init__(self, parent, width_px: int = DEFAULT_WIDTH_PX, height_px: int = DEFAULT_HEIGHT_PX):
        t = theme()
        self.frame = tk.Frame(parent, width=width_px, height=height_px, bg=t.bg, highlightthickness=0)
        self.frame.pack_propagate(False)

        self.fig = Figure(figsize=(width_px / _DPI, height_px / _DPI), dpi=_DPI)
        self.ax = self.fig.add_axes([0.0, 0.0, 1.0, 1.0])
        self.ax.set_axis_off()

        self.canvas = FigureCanvasTkAgg(self.fig, master=self.frame)
        self.widget = self.canvas.get_tk_widget()
        self.widget.pack(fill="both", expand=True)

        self.defs: Optional[str] = None
        self.last_d: Optional[str] = None

    def pack(self, **kwargs):  # pragma: no cover - Tk binding
        self.frame.pack(**kwargs)

    def grid(self, **grid_kw):  # pragma: no cover
        self.frame.grid(**grid_kw)

    def set_width(self, width_px: int) -> None:
        self.frame.configure(width=int(width_px))

    # Surface protocol -------------------------------------------------
    def measure(self) -> Optional[Viewport]:
        try:
            if not self.frame.winfo_exists():
                return None
            self.frame.update_idletasks()
            return Viewport(float(self.frame.winfo_width()), float(self.frame.winfo_height()))
        except tk.TclError:
            return None

    def install_defs(self, defs: str) -> None:
        self.defs = defs

    def observe_resize(self, callback: Callable[[float, float], None]) -> ResizeBinding:
        return ResizeBinding(self.frame, callback, RESIZE_DEBOUNCE_MS)

    def paint(self, d: str, commands: Sequence[PathCommand]) -> None:
        self.last_d = d
        size = self.measure()
        if size is None:
            return
        width = max(1.0, size.width)
        height = max(1.0, size.height)
        t = theme()

        self.ax.clear()
        self.ax.set_axis_off()
        self.ax.set_facecolor(t.surface)
        self.ax.set_xlim(0.0, width)
        self.ax.set_ylim(height, 0.0)  # screen y grows downward

        outline = to_mpl_path(commands, close=True)
        if not np.isfinite(outline.vertices).all():
            logger.warning("Path has non-finite vertices, nothing painted")
            self.canvas.draw_idle()
            return

        # Edge colour and width come from the theme rcParams.
        patch = PathPatch(outline, facecolor="none", zorder=3)
        self.ax.add_patch(patch)

        gradient = np.linspace(0.0, 1.0, 256).reshape(-1, 1)
        image = self.ax.imshow(
            gradient,
            cmap=fill_cmap(t),
            extent=(0.0, width, height, 0.0),
            aspect="auto",
            alpha=t.fill_alpha,
            zorder=2,
        )
        image.set_clip_path(patch)

        mids = mid_vertices(commands)
        if len(mids):
            for zorder, (marker_size, color) in enumerate(marker_layers(t), start=4):
                self.ax.scatter(mids[:, 0], mids[:, 1], s=marker_size, color=color, zorder=zorder)
        self.canvas.draw_idle()


__all__ = ["AreaChartWidget"]
