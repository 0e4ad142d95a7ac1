"""Tests for theme switching."""

import pytest
from matplotlib import rcParams
from matplotlib.colors import to_hex

from area_curve.ui.theme import DARK, LIGHT
from area_curve.ui.theming import apply_theme, fill_cmap, marker_layers, theme


@pytest.fixture(autouse=True)
def restore_light():
    yield
    apply_theme("light")


def test_apply_theme_updates_rcparams():
    t = apply_theme("dark")
    assert t is DARK
    assert theme() is DARK
    assert rcParams["axes.facecolor"] == DARK.surface


def test_unknown_theme_keeps_current():
    apply_theme("light")
    assert apply_theme("neon") is LIGHT


def test_apply_theme_pushes_curve_style():
    apply_theme("dark")
    assert rcParams["patch.edgecolor"] == DARK.stroke
    assert rcParams["patch.force_edgecolor"] is True
    assert rcParams["figure.facecolor"] == DARK.bg


def test_fill_cmap_runs_top_to_baseline():
    cmap = fill_cmap(LIGHT)
    assert to_hex(cmap(0.0)) == to_hex(LIGHT.gradient_top)
    assert to_hex(cmap(1.0)) == to_hex(LIGHT.gradient_bottom)


def test_marker_layers_outer_then_inner():
    layers = marker_layers(DARK)
    assert [color for _, color in layers] == [DARK.marker_outer, DARK.marker_inner]
    assert layers[0][0] > layers[1][0]
