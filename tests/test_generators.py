import math

import pytest
from pymunk import Vec2d

from slice_sandbox.geometry import (
    blade_points,
    bounding_box,
    calculate_area,
    circle_edge_count,
    circle_points,
    rectangle_points,
)
from slice_sandbox.utils.config import Config


def test_rectangle_points_order():
    points = rectangle_points((30.0, 20.0))
    assert points == [Vec2d(30, 20), Vec2d(-30, 20), Vec2d(-30, -20), Vec2d(30, -20)]


def test_rectangle_points_zero_extents_still_four_points():
    points = rectangle_points((0.0, 0.0))
    assert len(points) == 4
    assert calculate_area(points) == 0.0


@pytest.mark.parametrize("half_extents", [(100.0, 100.0), (12.5, 3.0), (0.0, 7.0)])
def test_rectangle_bounding_box(half_extents):
    a, b = half_extents
    assert bounding_box(rectangle_points(half_extents)) == Vec2d(2 * a, 2 * b)


@pytest.mark.parametrize("radius", [-5.0, 0.0, 0.5, 1.0, 2.0])
def test_circle_edge_count_is_clamped(radius):
    assert circle_edge_count(radius) == Config.CIRCLE_MIN_EDGES
    assert len(circle_points(radius)) == Config.CIRCLE_MIN_EDGES


def test_circle_edge_count_grows_with_radius():
    counts = [circle_edge_count(r) for r in range(1, 2000, 7)]
    assert counts == sorted(counts)
    assert circle_edge_count(50.0) == 24
    assert circle_edge_count(50.0) == circle_edge_count(50.0)


def test_circle_points_lie_on_circle():
    points = circle_points(50.0)
    assert points[0] == pytest.approx(Vec2d(50.0, 0.0))
    for point in points:
        assert point.length == pytest.approx(50.0)
    # Screen convention: the second vertex is below the first (positive Y).
    assert points[1].y > 0


def test_blade_points_form_thin_rectangle():
    points = blade_points((1.0, 0.0), 4.0, 10.0)
    expected = [(0.0, 2.0), (0.0, -2.0), (10.0, -2.0), (10.0, 2.0)]
    for point, (x, y) in zip(points, expected):
        assert point.x == pytest.approx(x, abs=1e-9)
        assert point.y == pytest.approx(y, abs=1e-9)
    assert calculate_area(points) == pytest.approx(40.0)


def test_blade_points_with_half_turn_normal_collapse():
    points = blade_points((0.0, 1.0), 4.0, 10.0, normal_angle=math.pi)
    assert calculate_area(points) == pytest.approx(0.0, abs=1e-9)
