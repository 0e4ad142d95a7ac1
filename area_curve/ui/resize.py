"""Debounced ``<Configure>`` subscription handed to the curve controller."""

from __future__ import annotations

import tkinter as tk
from typing import Callable, Optional


class ResizeBinding:
    """Handle returned by :meth:`AreaChartWidget.observe_resize`.

    Bursts of ``<Configure>`` events are coalesced with ``after()``: only the
    last size reaches *callback*. :meth:`release` drops the binding and any
    pending call.
    """

    def __init__(self, widget: tk.Misc, callback: Callable[[float, float], None], delay_ms: int):
        self._widget = widget
        self._callback = callback
        self._delay_ms = delay_ms
        self._after_id: Optional[str] = None
        self._funcid: Optional[str] = widget.bind("<Configure>", self._on_configure, add="+")

    @property
    def active(self) -> bool:
        return self._funcid is not None

    def _on_configure(self, event) -> None:
        if self._after_id is not None:
            self._widget.after_cancel(self._after_id)
        size = (float(event.width), float(event.height))
        self._after_id = self._widget.after(self._delay_ms, lambda: self._fire(*size))

    def _fire(self, width: float, height: float) -> None:
        self._after_id = None
        self._callback(width, height)

    def release(self) -> None:
        if self._after_id is not None:
            try:
                self._widget.after_cancel(self._after_id)
            except tk.TclError:
                pass
            self._after_id = None
        if self._funcid is not None:
            try:
                self._widget.unbind("<Configure>", self._funcid)
            except tk.TclError:
                pass
            self._funcid = None


__all__ = ["ResizeBinding"]
