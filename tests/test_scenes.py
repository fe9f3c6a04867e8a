import pytest

from slice_sandbox.bodies import PhysicsCircle, PhysicsRectangle
from slice_sandbox.physics import PhysicsEngine
from slice_sandbox.scenes import load_scene_payload, populate


@pytest.fixture
def engine():
    return PhysicsEngine()


def test_default_scene(engine):
    spawned = populate(engine)
    assert engine.viewport == (1152.0, 648.0)
    assert len(spawned) == 3
    assert [type(obj) for obj in spawned] == [PhysicsRectangle, PhysicsRectangle, PhysicsCircle]
    assert spawned[1].angle == pytest.approx(0.3)


def test_stack_scene(engine):
    spawned = populate(engine, "stack")
    assert engine.viewport == (800.0, 600.0)
    assert len(spawned) == 4


def test_unknown_scene(engine):
    with pytest.raises(FileNotFoundError):
        load_scene_payload("does_not_exist")


def test_body_without_kind_is_rejected(engine, monkeypatch):
    monkeypatch.setattr(
        "slice_sandbox.scenes.load_scene_payload",
        lambda name: {"viewport": [800, 600], "bodies": [{"position": [10, 10]}]},
    )
    with pytest.raises(ValueError):
        populate(engine, "broken")
