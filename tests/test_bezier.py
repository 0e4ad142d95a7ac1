"""Tests for the control point solver and bezier commands."""

import pytest

from area_curve.bezier import CurveTo, MoveTo, bezier_command, build_commands, check_smoothing, control_point
from area_curve.errors import EmptyPointsError, InvalidSmoothingError
from area_curve.geometry import Point


class TestControlPoint:
    def test_follows_opposing_line(self):
        cp = control_point(Point(10, 10), Point(0, 0), Point(20, 0))
        assert cp == Point(14.0, 10.0)

    def test_reverse_goes_backwards(self):
        cp = control_point(Point(10, 10), Point(0, 0), Point(20, 0), reverse=True)
        assert cp == Point(6.0, 10.0)

    def test_missing_previous_uses_current(self):
        cp = control_point(Point(0, 60), None, Point(0, 0))
        assert cp == Point(0.0, 48.0)

    def test_missing_both_neighbours_returns_current(self):
        cp = control_point(Point(3.333, 7), None, None, reverse=True)
        assert cp == Point(3.33, 7.0)

    def test_zero_smoothing_is_the_point_itself(self):
        cp = control_point(Point(10, 10), Point(0, 0), Point(20, 0), smoothing=0.0)
        assert cp == Point(10.0, 10.0)

    def test_rounded_to_two_decimals(self):
        cp = control_point(Point(0, 0), Point(0, 0), Point(1, 0), smoothing=0.3333)
        assert cp == Point(0.33, 0.0)

    def test_huge_coordinates_do_not_fail(self):
        cp = control_point(Point(1.6e307, 0), None, None)
        assert cp == Point(1.6e307, 0.0)


class TestBezierCommand:
    def test_first_segment(self, triangle):
        cmd = bezier_command(triangle, 1)
        assert cmd == CurveTo(Point(20.0, 80.0), Point(60.0, 0.0), Point(100.0, 0.0))

    def test_last_segment(self, triangle):
        cmd = bezier_command(triangle, 2)
        assert cmd == CurveTo(Point(140.0, 0.0), Point(180.0, 80.0), Point(200.0, 100.0))


class TestBuildCommands:
    def test_one_move_then_curves(self, triangle):
        commands = build_commands(triangle)
        assert commands[0] == MoveTo(Point(0.0, 100.0))
        assert all(isinstance(cmd, CurveTo) for cmd in commands[1:])
        assert len(commands) == len(triangle)

    def test_single_point_is_a_move(self):
        assert build_commands([Point(1, 2)]) == [MoveTo(Point(1, 2))]

    def test_empty_raises(self):
        with pytest.raises(EmptyPointsError):
            build_commands([])

    def test_invalid_smoothing(self, triangle):
        with pytest.raises(InvalidSmoothingError):
            build_commands(triangle, smoothing=1.5)


def test_check_smoothing_bounds():
    assert check_smoothing(0) == 0.0
    assert check_smoothing(1) == 1.0
    with pytest.raises(InvalidSmoothingError):
        check_smoothing(-0.1)
