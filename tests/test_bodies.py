import logging
import math

import numpy as np
import pymunk
import pytest
from pymunk import Vec2d
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from slice_sandbox.bodies import (
    PhysicsCircle,
    PhysicsObject,
    PhysicsRectangle,
    get_body_factory,
)
from slice_sandbox.geometry import calculate_area, circle_points, rectangle_points, relative_center_of_mass, translate
from slice_sandbox.physics import PhysicsEngine


@pytest.fixture
def engine():
    return PhysicsEngine(gravity=0.0)


U_SHAPE = [(0, 0), (100, 0), (100, 200), (200, 200), (200, 0), (300, 0), (300, 300), (0, 300)]


def spawn_u_shape(engine, position=(400.0, 300.0)):
    polygon = translate(U_SHAPE, -relative_center_of_mass(U_SHAPE))
    return engine.spawn("object", polygon=polygon, position=position)


def seam_points(obj):
    """World-space midpoints of collider edges that lie inside the outline."""
    outline = ShapelyPolygon(obj.world_polygon())
    points = []
    for shape in obj.shapes:
        vertices = [obj.body.local_to_world(v) for v in shape.get_vertices()]
        for a, b in zip(vertices, vertices[1:] + vertices[:1]):
            middle = (a + b) / 2
            if outline.contains(ShapelyPoint(middle.x, middle.y)):
                points.append(middle)
    return points


def test_rectangle_mass_is_area(engine):
    rect = engine.spawn("rectangle", half_extents=(100.0, 100.0), position=(300.0, 300.0))
    assert isinstance(rect, PhysicsRectangle)
    assert rect.alive
    assert rect.mass == pytest.approx(40000.0)
    assert rect.body.mass == pytest.approx(40000.0)
    assert rect.body.space is engine.space
    assert len(rect.shapes) == 1
    assert rect in engine.objects


def test_circle_mass_matches_polygon(engine):
    circle = engine.spawn("circle", radius=60.0, position=(100.0, 100.0))
    assert isinstance(circle, PhysicsCircle)
    assert circle.mass == pytest.approx(calculate_area(circle_points(60.0)))
    assert len(circle.polygon) == 32


def test_too_small_body_is_destroyed(engine):
    rect = engine.spawn("rectangle", half_extents=(4.0, 4.0))
    assert not rect.alive
    assert rect.body.space is None
    assert engine.objects == []


def test_half_extents_setter_regenerates_polygon(engine):
    rect = engine.spawn("rectangle", half_extents=(50.0, 50.0))
    rect.half_extents = (20.0, 10.0)
    assert rect.mass == pytest.approx(800.0)
    assert len(engine.space.shapes) == 1
    rect.half_extents = (2.0, 2.0)
    assert not rect.alive
    assert len(engine.space.shapes) == 0


def test_radius_setter_regenerates_polygon(engine):
    circle = engine.spawn("circle", radius=20.0)
    circle.radius = 100.0
    assert circle.mass == pytest.approx(calculate_area(circle_points(100.0)))


def test_unknown_kind_falls_back_to_object(engine, caplog):
    with caplog.at_level(logging.WARNING):
        obj = engine.spawn("hexagon", polygon=rectangle_points((20.0, 20.0)))
    assert type(obj) is PhysicsObject
    assert "hexagon" in caplog.text
    assert get_body_factory("Circle") is PhysicsCircle


def test_split_replaces_body_with_reorigined_pieces(engine):
    rect = engine.spawn("rectangle", half_extents=(100.0, 100.0), position=(300.0, 300.0))
    rect.velocity = (10.0, -5.0)
    rect.angular_velocity = 0.5

    pieces = rect.split((-100.0, 0.0), (1.0, 0.0))

    assert not rect.alive
    assert rect not in engine.objects
    assert len(pieces) == 2
    assert sorted(p.position.y for p in pieces) == pytest.approx([300.0 - 51.25, 300.0 + 51.25])
    for piece in pieces:
        assert type(piece) is PhysicsObject
        assert piece.mass == pytest.approx(19500.0)
        np.testing.assert_allclose(tuple(relative_center_of_mass(piece.polygon)), (0.0, 0.0), atol=1e-9)
        assert piece.velocity == pytest.approx(Vec2d(10.0, -5.0))
        assert piece.angular_velocity == pytest.approx(0.5)


def test_split_of_rotated_body_places_pieces_in_world_frame(engine):
    rect = engine.spawn("rectangle", half_extents=(100.0, 100.0), position=(500.0, 300.0), angle=math.pi / 2)
    pieces = rect.split((-100.0, 0.0), (1.0, 0.0))
    assert sorted(p.position.x for p in pieces) == pytest.approx([500.0 - 51.25, 500.0 + 51.25])
    for piece in pieces:
        assert piece.position.y == pytest.approx(300.0)
        assert piece.angle == pytest.approx(math.pi / 2)


def test_missed_split_is_a_no_op(engine):
    rect = engine.spawn("rectangle", half_extents=(100.0, 100.0))
    assert rect.split((500.0, 500.0), (1.0, 0.0)) == []
    assert rect.alive
    assert engine.objects == [rect]


def test_small_pieces_are_discarded(engine):
    rect = engine.spawn("rectangle", half_extents=(100.0, 100.0))
    # The blade leaves a 0.3 unit strip along the top edge (area 60).
    pieces = rect.split((-100.0, -97.2), (1.0, 0.0))
    assert len(pieces) == 1
    assert not rect.alive
    assert engine.objects == pieces
    assert pieces[0].mass == pytest.approx(200.0 * 194.7)


def test_non_convex_object_uses_several_shapes(engine):
    obj = spawn_u_shape(engine)
    assert obj.mass == pytest.approx(70000.0)
    assert len(obj.shapes) >= 2
    assert all(isinstance(shape, pymunk.Poly) for shape in obj.shapes)


def test_contains_point(engine):
    rect = engine.spawn("rectangle", half_extents=(50.0, 50.0), position=(200.0, 200.0))
    assert rect.contains_point((210.0, 190.0))
    assert not rect.contains_point((300.0, 200.0))


def test_destroy_is_idempotent(engine):
    rect = engine.spawn("rectangle", half_extents=(50.0, 50.0))
    rect.destroy()
    rect.destroy()
    assert not rect.alive
    assert len(engine.space.bodies) == 0
    assert rect.set_polygon(rectangle_points((50.0, 50.0))) is False


def test_contains_point_on_internal_seam(engine):
    obj = spawn_u_shape(engine)
    seams = seam_points(obj)
    assert seams
    for point in seams:
        assert all(shape.point_query(point).distance > -1e-6 for shape in obj.shapes)
        assert obj.contains_point(point)


def test_contains_point_excludes_outline_edge(engine):
    rect = engine.spawn("rectangle", half_extents=(50.0, 50.0), position=(200.0, 200.0))
    assert not rect.contains_point((150.0, 200.0))


def test_blade_covering_whole_body_keeps_it(engine):
    # 200x4 strip under a 5 wide blade along its axis: nothing is left over.
    strip = engine.spawn("rectangle", half_extents=(100.0, 2.0), position=(300.0, 300.0))
    assert strip.mass == pytest.approx(800.0)
    assert strip.split((-100.0, 0.0), (1.0, 0.0)) == []
    assert strip.alive
    assert engine.objects == [strip]
