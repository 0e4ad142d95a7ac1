"""User preferences persisted as JSON (slider width, theme, smoothing)."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

from .config import (
    DEFAULT_POLICY,
    DEFAULT_WIDTH_PX,
    PREFS_PATH,
    SLIDER_MAX_PX,
    SLIDER_MIN_PX,
    SMOOTHING_RANGE,
    SMOOTHING_RATIO,
)
from .normalize import POLICIES

logger = logging.getLogger(__name__)


@dataclass
class Prefs:
    width: int = DEFAULT_WIDTH_PX
    theme: str = "light"
    smoothing: float = SMOOTHING_RATIO
    policy: str = DEFAULT_POLICY
    geom: Optional[str] = None

    def sanitized(self) -> "Prefs":
        low, high = SMOOTHING_RANGE
        try:
            width = int(float(self.width))
        except (TypeError, ValueError):
            width = DEFAULT_WIDTH_PX
        try:
            smoothing = float(self.smoothing)
        except (TypeError, ValueError):
            smoothing = SMOOTHING_RATIO
        if not (low <= smoothing <= high):
            smoothing = SMOOTHING_RATIO
        return Prefs(
            width=max(SLIDER_MIN_PX, min(SLIDER_MAX_PX, width)),
            theme=str(self.theme or "light"),
            smoothing=smoothing,
            policy=self.policy if self.policy in POLICIES else DEFAULT_POLICY,
            geom=self.geom or None,
        )


def load_prefs(path: Path = PREFS_PATH) -> Prefs:
    """Read *path*; missing or unreadable files give the defaults."""
    path = Path(path)
    if not path.exists():
        return Prefs()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable prefs %s: %s", path, exc)
        return Prefs()
    if not isinstance(data, dict):
        logger.warning("Ignoring prefs %s: expected an object", path)
        return Prefs()
    known = {f.name for f in fields(Prefs)}
    return Prefs(**{k: v for k, v in data.items() if k in known}).sanitized()


def save_prefs(prefs: Prefs, path: Path = PREFS_PATH) -> bool:
    path = Path(path)
    try:
        path.write_text(json.dumps(asdict(prefs), indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not save prefs to %s: %s", path, exc)
        return False
    return True


__all__ = ["Prefs", "load_prefs", "save_prefs"]
