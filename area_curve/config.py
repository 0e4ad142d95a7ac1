"""Application-wide configuration values."""

from pathlib import Path

# Control points extend by this fraction of the opposing line length.
SMOOTHING_RATIO = 0.2
SMOOTHING_RANGE = (0.0, 1.0)

DEFAULT_WIDTH_PX = 200
DEFAULT_HEIGHT_PX = 60
SLIDER_MIN_PX = 100
SLIDER_MAX_PX = 800

RESIZE_DEBOUNCE_MS = 50
PREFS_PATH = Path.home() / ".area_curve_prefs.json"

# "propagate" | "reject" | "clamp"
DEFAULT_POLICY = "propagate"

SAMPLE_POINTS = (
    (0.0, 100.0),
    (20.0, 20.0),
    (40.0, 50.0),
    (60.0, 20.0),
    (80.0, 50.0),
    (100.0, 20.0),
)
