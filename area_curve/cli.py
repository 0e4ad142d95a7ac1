"""Command line entry point: print or export the path, or open the window."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import DEFAULT_HEIGHT_PX, DEFAULT_POLICY, DEFAULT_WIDTH_PX, SAMPLE_POINTS, SMOOTHING_RATIO
from .controller import compute_path
from .errors import CurveError
from .geometry import Viewport
from .normalize import POLICIES
from .svg import write_svg

logger = logging.getLogger(__name__)


def read_points(path: Optional[Path]) -> List:
    """JSON list of ``[x, y]`` pairs or ``{"x": .., "y": ..}`` objects."""
    if path is None:
        return list(SAMPLE_POINTS)
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise CurveError(f"{path}: expected a JSON list of points")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="area-curve", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command")

    def _common(p: argparse.ArgumentParser) -> None:
        p.add_argument("--points", type=Path, help="JSON file with the data points (default: sample set)")
        p.add_argument("--width", type=float, default=DEFAULT_WIDTH_PX)
        p.add_argument("--height", type=float, default=DEFAULT_HEIGHT_PX)
        p.add_argument("--smoothing", type=float, default=SMOOTHING_RATIO)
        p.add_argument("--policy", choices=POLICIES, default=DEFAULT_POLICY,
                       help="what to do when max x or max y is 0")

    p_path = sub.add_parser("path", help="print the path data (d attribute)")
    _common(p_path)

    p_export = sub.add_parser("export", help="write a standalone SVG file")
    _common(p_export)
    p_export.add_argument("output", type=Path)

    p_gui = sub.add_parser("gui", help="open the interactive window")
    p_gui.add_argument("--points", type=Path)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    command = args.command or "gui"

    try:
        points = read_points(getattr(args, "points", None))
        if command == "gui":
            from .app import run

            run(points)
            return 0
        result = compute_path(points, Viewport(args.width, args.height), args.smoothing, args.policy)
    except (CurveError, OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 2

    if not result.finite:
        logger.warning("Path contains non-finite coordinates")
    if command == "path":
        sys.stdout.write(result.d + "\n")
    else:
        write_svg(args.output, result.d, args.width, args.height)
    return 0


__all__ = ["build_parser", "main", "read_points"]
