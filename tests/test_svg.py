"""Tests for path serialization and the SVG fragments."""

import pytest

from area_curve.errors import EmptyPointsError
from area_curve.geometry import Point
from area_curve.normalize import normalize
from area_curve.svg import (
    STATIC_DEFS,
    fmt_number,
    is_finite_path,
    path_element,
    render_fragment,
    serialize,
    svg_document,
    write_svg,
)

TRIANGLE_D = "M 0,100 C 20,80 60,0 100,0 C 140,0 180,80 200,100"


class TestFmtNumber:
    def test_integral_without_decimal(self):
        assert fmt_number(60.0) == "60"
        assert fmt_number(-0.0) == "0"

    def test_fraction(self):
        assert fmt_number(12.5) == "12.5"

    def test_huge_integral_uses_exponent(self):
        assert fmt_number(5.642869427821188e76) == "5.642869427821188e+76"
        assert fmt_number(1e20) == "100000000000000000000"

    def test_non_finite_tokens(self):
        assert fmt_number(float("nan")) == "NaN"
        assert fmt_number(float("inf")) == "Infinity"
        assert fmt_number(float("-inf")) == "-Infinity"


class TestSerialize:
    def test_triangle(self, triangle):
        assert serialize(triangle) == TRIANGLE_D

    def test_command_counts(self, sample_points):
        render = normalize(sample_points, 200, 60)
        tokens = serialize(render).split()
        assert tokens.count("M") == 1
        assert tokens.count("C") == len(render) - 1
        assert tokens[0] == "M"
        assert tokens[1] == "0,60"
        assert tokens[-1] == "200,60"

    def test_deterministic(self, sample_points):
        first = serialize(normalize(sample_points, 200, 60))
        again = serialize(normalize(sample_points, 200, 60))
        assert first == again

    def test_one_data_point(self):
        d = serialize(normalize([(50, 50)], 100, 100))
        assert d == TRIANGLE_D

    def test_zero_viewport_is_all_zeros(self, sample_points):
        d = serialize(normalize(sample_points, 0, 0))
        numbers = [n for tok in d.split() if tok not in ("M", "C") for n in tok.split(",")]
        assert set(numbers) == {"0"}

    def test_degenerate_data_propagates(self):
        d = serialize(normalize([(10, 0), (20, 0)], 200, 60))
        assert "NaN" in d

    def test_empty_raises(self):
        with pytest.raises(EmptyPointsError):
            serialize([])


class TestMarkup:
    def test_defs_hold_gradient_and_marker(self):
        assert '<linearGradient id="gradient"' in STATIC_DEFS
        assert '<marker id="dot"' in STATIC_DEFS

    def test_path_element(self):
        el = path_element("M 0,0")
        assert 'd="M 0,0"' in el
        assert 'fill="url(#gradient)"' in el
        assert 'marker-mid="url(#dot)"' in el

    def test_fragment(self, triangle):
        fragment = render_fragment(triangle)
        assert fragment.startswith(STATIC_DEFS)
        assert TRIANGLE_D in fragment

    def test_document_from_points(self, triangle):
        doc = svg_document(triangle, 200, 60)
        assert doc.startswith('<svg version="1.1" width="200" height="60"')
        assert TRIANGLE_D in doc
        assert doc.rstrip().endswith("</svg>")

    def test_write_svg(self, tmp_path):
        out = write_svg(tmp_path / "curve.svg", TRIANGLE_D, 200, 60)
        assert TRIANGLE_D in out.read_text(encoding="utf-8")


def test_is_finite_path():
    assert is_finite_path([Point(0, 0), Point(1, 2)])
    assert not is_finite_path([Point(0, float("nan"))])
