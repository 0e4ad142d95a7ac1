"""Current chart theme and the Matplotlib settings derived from it."""

from __future__ import annotations

from typing import List, Tuple

from matplotlib import rcParams
from matplotlib.colors import LinearSegmentedColormap

from .theme import THEMES, Theme

_current_theme: Theme = THEMES["light"]

# Marker sizes (points^2) of the outer and inner dot, as in the SVG marker (r=5, r=3).
_MARKER_SIZES = (25, 9)


def apply_theme(name: str) -> Theme:
    """Select *name* (unknown names keep the current theme) and push the curve style."""
    global _current_theme
    _current_theme = THEMES.get(name, _current_theme)
    t = _current_theme

    rcParams.update({
        "figure.facecolor": t.bg,
        "savefig.facecolor": t.bg,
        "axes.facecolor": t.surface,
        # Outline of the area path, drawn with facecolor="none".
        "patch.edgecolor": t.stroke,
        "patch.force_edgecolor": True,
        "patch.linewidth": 1.0,
        "scatter.edgecolors": "none",
    })
    return t


def theme() -> Theme:
    return _current_theme


def fill_cmap(t: Theme | None = None) -> LinearSegmentedColormap:
    """Vertical fill gradient, top of the chart to the baseline."""
    t = t or _current_theme
    return LinearSegmentedColormap.from_list(f"area_fill_{t.name}", [t.gradient_top, t.gradient_bottom])


def marker_layers(t: Theme | None = None) -> List[Tuple[int, str]]:
    """(size, colour) of each dot layer, drawn in order."""
    t = t or _current_theme
    outer, inner = _MARKER_SIZES
    return [(outer, t.marker_outer), (inner, t.marker_inner)]


__all__ = ["apply_theme", "fill_cmap", "marker_layers", "theme"]
