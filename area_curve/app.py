"""Tk window: width slider plus the smoothed area chart."""

from __future__ import annotations

import tkinter as tk
from pathlib import Path
from tkinter import filedialog, ttk
from typing import Optional, Sequence

from .config import DEFAULT_HEIGHT_PX, PREFS_PATH, SAMPLE_POINTS, SLIDER_MAX_PX, SLIDER_MIN_PX
from .controller import AreaCurveController
from .prefs import Prefs, load_prefs, save_prefs
from .svg import write_svg
from .ui.chart_widget import AreaChartWidget
from .ui.theming import apply_theme


class AreaChartApp(tk.Tk):
    def __init__(self, points: Sequence = SAMPLE_POINTS, prefs_path: Path = PREFS_PATH):
        super().__init__()
        self.title("Area curve")
        self.prefs_path = Path(prefs_path)
        self.prefs: Prefs = load_prefs(self.prefs_path)
        t = apply_theme(self.prefs.theme)
        self.configure(bg=t.bg)

        self.points = points
        self.width_var = tk.IntVar(value=self.prefs.width)

        top = ttk.Frame(self)
        top.pack(fill="x", padx=10, pady=(10, 4))
        self.lbl_width = ttk.Label(top, text=self._width_text())
        self.lbl_width.pack(side="left")
        ttk.Button(top, text="Export SVG...", command=self._export).pack(side="right")

        self.slider = ttk.Scale(
            self,
            from_=SLIDER_MIN_PX,
            to=SLIDER_MAX_PX,
            orient="horizontal",
            command=self._on_slider,
        )
        self.slider.set(self.prefs.width)
        self.slider.pack(fill="x", padx=10, pady=4)

        holder = ttk.Frame(self)
        holder.pack(fill="both", expand=True, padx=10, pady=(4, 10))
        self.chart = AreaChartWidget(holder, width_px=self.prefs.width, height_px=DEFAULT_HEIGHT_PX)
        self.chart.pack(side="top", anchor="w")

        self.controller = AreaCurveController(
            self.points,
            smoothing=self.prefs.smoothing,
            policy=self.prefs.policy,
        )
        self.protocol("WM_DELETE_WINDOW", self._on_close)
        if self.prefs.geom:
            self.geometry(self.prefs.geom)
        self.after(0, lambda: self.controller.initialize(self.chart))

    def _width_text(self) -> str:
        return f"Current Width {self.width_var.get()}"

    def _on_slider(self, raw: str) -> None:
        value = int(float(raw))
        if value == self.width_var.get():
            return
        self.width_var.set(value)
        self.lbl_width.configure(text=self._width_text())
        # Width is not a redraw trigger; the resize observer picks it up.
        self.controller.set_props(points=self.points, width=value)
        self.chart.set_width(value)

    def set_points(self, points: Sequence) -> None:
        self.points = points
        self.controller.set_props(points=points)

    def _export(self) -> Optional[Path]:
        d = self.controller.last_path
        result = self.controller.last_result
        if d is None or result is None:
            return None
        target = filedialog.asksaveasfilename(
            parent=self,
            defaultextension=".svg",
            filetypes=[("SVG", "*.svg")],
        )
        if not target:
            return None
        return write_svg(Path(target), d, result.viewport.width, result.viewport.height)

    def _on_close(self) -> None:
        self.prefs.width = self.width_var.get()
        self.prefs.geom = self.winfo_geometry()
        save_prefs(self.prefs, self.prefs_path)
        self.controller.teardown()
        self.destroy()


def run(points: Sequence = SAMPLE_POINTS) -> None:  # pragma: no cover - GUI loop
    app = AreaChartApp(points)
    app.mainloop()


__all__ = ["AreaChartApp", "run"]
