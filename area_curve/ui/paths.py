"""Conversion of path commands into Matplotlib paths."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np
from matplotlib.path import Path as MplPath

from ..bezier import CurveTo, MoveTo, PathCommand


def to_mpl_path(commands: Sequence[PathCommand], close: bool = False) -> MplPath:
    """MOVETO followed by one CURVE4 triple per cubic segment.

    With ``close`` the outline is closed back to the first point, which is
    what the filled area needs (first and last points sit on the baseline).
    """
    verts: List[Tuple[float, float]] = []
    codes: List[int] = []
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            verts.append((cmd.point.x, cmd.point.y))
            codes.append(MplPath.MOVETO)
        elif isinstance(cmd, CurveTo):
            verts.extend([(cmd.entry.x, cmd.entry.y), (cmd.exit.x, cmd.exit.y), (cmd.point.x, cmd.point.y)])
            codes.extend([MplPath.CURVE4] * 3)
    if close and verts:
        verts.append(verts[0])
        codes.append(MplPath.CLOSEPOLY)
    return MplPath(np.array(verts, dtype=float).reshape(-1, 2), codes)


def mid_vertices(commands: Sequence[PathCommand]) -> np.ndarray:
    """On-curve points except the first and last (where marker-mid applies)."""
    pts = [cmd.point for cmd in commands]
    inner = pts[1:-1]
    return np.array([(p.x, p.y) for p in inner], dtype=float).reshape(-1, 2)


__all__ = ["mid_vertices", "to_mpl_path"]
