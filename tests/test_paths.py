"""Tests for the Matplotlib path conversion used by the Tk widget."""

from matplotlib.path import Path as MplPath

from area_curve.bezier import build_commands
from area_curve.ui.paths import mid_vertices, to_mpl_path


class TestToMplPath:
    def test_codes(self, triangle):
        path = to_mpl_path(build_commands(triangle))
        assert list(path.codes) == [MplPath.MOVETO] + [MplPath.CURVE4] * 6
        assert path.vertices.shape == (7, 2)
        assert tuple(path.vertices[-1]) == (200.0, 100.0)

    def test_closed(self, triangle):
        path = to_mpl_path(build_commands(triangle), close=True)
        assert path.codes[-1] == MplPath.CLOSEPOLY
        assert tuple(path.vertices[-1]) == (0.0, 100.0)


def test_mid_vertices(triangle):
    mids = mid_vertices(build_commands(triangle))
    assert mids.shape == (1, 2)
    assert tuple(mids[0]) == (100.0, 0.0)
