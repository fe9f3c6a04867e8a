import numpy as np
import pytest
from pymunk import Vec2d

from slice_sandbox.geometry import (
    bounding_box,
    calculate_area,
    is_degenerate,
    relative_center_of_mass,
    rectangle_points,
    signed_area,
    translate,
)

L_SHAPE = [(0.0, 0.0), (120.0, 0.0), (120.0, 40.0), (40.0, 40.0), (40.0, 160.0), (0.0, 160.0)]


def test_area_of_square():
    assert calculate_area(rectangle_points((100.0, 100.0))) == pytest.approx(40000.0)


def test_signed_area_encodes_winding():
    square = rectangle_points((10.0, 10.0))
    assert signed_area(square) == pytest.approx(-signed_area(list(reversed(square))))
    assert calculate_area(list(reversed(square))) == pytest.approx(400.0)


@pytest.mark.parametrize("offset", [(0.0, 0.0), (250.0, -13.5), (-1e4, 3e3)])
def test_area_invariant_under_translation(offset):
    assert calculate_area(translate(L_SHAPE, offset)) == pytest.approx(calculate_area(L_SHAPE))


def test_centroid_of_translated_rectangle():
    rect = translate(rectangle_points((30.0, 10.0)), (5.0, -7.0))
    assert relative_center_of_mass(rect) == pytest.approx(Vec2d(5.0, -7.0))


@pytest.mark.parametrize("polygon", [L_SHAPE, list(reversed(L_SHAPE))])
def test_reorigin_moves_centroid_to_zero(polygon):
    centroid = relative_center_of_mass(polygon)
    reorigined = translate(polygon, -centroid)
    np.testing.assert_allclose(tuple(relative_center_of_mass(reorigined)), (0.0, 0.0), atol=1e-9)


def test_centroid_of_l_shape():
    # Union of a 120x40 and a 40x120 rectangle.
    expected_x = (120 * 40 * 60 + 40 * 120 * 20) / (120 * 40 + 40 * 120)
    expected_y = (120 * 40 * 20 + 40 * 120 * 100) / (120 * 40 + 40 * 120)
    assert relative_center_of_mass(L_SHAPE) == pytest.approx(Vec2d(expected_x, expected_y))


def test_centroid_of_zero_area_polygon_does_not_raise():
    collinear = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
    assert relative_center_of_mass(collinear) == Vec2d(0.0, 0.0)
    assert calculate_area(collinear) == 0.0


def test_translate_returns_new_polygon():
    original = rectangle_points((1.0, 1.0))
    moved = translate(original, (2.0, 0.0))
    assert moved is not original
    assert original[0] == Vec2d(1.0, 1.0)
    assert moved[0] == Vec2d(3.0, 1.0)


def test_bounding_box_of_l_shape():
    assert bounding_box(L_SHAPE) == Vec2d(120.0, 160.0)
    assert bounding_box(L_SHAPE).length == pytest.approx(200.0)


def test_is_degenerate():
    assert is_degenerate([(0.0, 0.0), (1.0, 1.0)])
    assert is_degenerate(rectangle_points((4.0, 4.0)))
    assert not is_degenerate(rectangle_points((10.0, 10.0)))
