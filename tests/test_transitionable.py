import pytest

from kenjikit.color import RED
from kenjikit.shapes import Circle
from kenjikit.transitionable import Transitionable
from kenjikit.vec2d import Vec2D


def test_interface_and_partial_subclass_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Transitionable()

    class OnlyGetter(Transitionable):
        def get_values(self, transition_id):
            return []

    with pytest.raises(TypeError):
        OnlyGetter()


def test_circle_round_trips_through_interface():
    target: Transitionable = Circle(Vec2D(3, 4), 5, RED)
    position_id = Circle.TransitionId.POSITION
    target.set_values(position_id, [7.0, 9.0])
    assert target.get_values(position_id) == [7.0, 9.0]
    assert isinstance(target, Transitionable)