"""Simple shapes: circles, lines, rectangles and triangles."""

from __future__ import annotations

from abc import ABC
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import IntEnum

from kenjikit.color import TRANSPARENT, RGBAColor
from kenjikit.transitionable import Transitionable
from kenjikit.vec2d import Vec2D

_COLOR_IDS = frozenset(
    {
        "FILL_COLOR_RGB",
        "FILL_COLOR_ALPHA",
        "BORDER_COLOR_RGB",
        "BORDER_COLOR_ALPHA",
    }
)


def _channel(value: float) -> int:
    return max(0, min(255, int(value)))


def _expect(values: Sequence[float], count: int, what: str) -> list[float]:
    values = list(values)
    if len(values) != count:
        raise ValueError(f"{what} needs {count} value(s), got {len(values)}")
    return values


def _point_values(point: Vec2D) -> list[float]:
    return [float(point.x), float(point.y)]


def _point_from(values: Sequence[float]) -> Vec2D:
    x, y = _expect(values, 2, "a position")
    return Vec2D(int(x), int(y))


class Shape(ABC):
    """Base of every shape: a fill colour and a border colour."""

    fill_color: RGBAColor
    border_color: RGBAColor

    def _color_values(self, name: str) -> list[float]:
        color = self.fill_color if name.startswith("FILL") else self.border_color
        if name.endswith("RGB"):
            return [float(color.red), float(color.green), float(color.blue)]
        return [float(color.alpha)]

    def _set_color_values(self, name: str, values: Sequence[float]) -> None:
        attribute = "fill_color" if name.startswith("FILL") else "border_color"
        color: RGBAColor = getattr(self, attribute)
        if name.endswith("RGB"):
            red, green, blue = _expect(values, 3, "an RGB colour")
            color = RGBAColor(_channel(red), _channel(green), _channel(blue), color.alpha)
        else:
            (alpha,) = _expect(values, 1, "an alpha channel")
            color = RGBAColor(color.red, color.green, color.blue, _channel(alpha))
        setattr(self, attribute, color)


@dataclass
class Circle(Shape, Transitionable):
    """A circle given by its centre and radius."""

    class TransitionId(IntEnum):
        FILL_COLOR_RGB = 0
        FILL_COLOR_ALPHA = 1
        BORDER_COLOR_RGB = 2
        BORDER_COLOR_ALPHA = 3
        POSITION = 4
        RADIUS = 5

    position: Vec2D
    radius: int
    fill_color: RGBAColor
    border_color: RGBAColor = TRANSPARENT

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"radius must not be negative, got {self.radius}")

    def get_values(self, transition_id: int) -> list[float]:
        tid = self.TransitionId(transition_id)
        if tid.name in _COLOR_IDS:
            return self._color_values(tid.name)
        if tid is self.TransitionId.POSITION:
            return _point_values(self.position)
        return [float(self.radius)]

    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        tid = self.TransitionId(transition_id)
        if tid.name in _COLOR_IDS:
            self._set_color_values(tid.name, values)
        elif tid is self.TransitionId.POSITION:
            self.position = _point_from(values)
        else:
            (radius,) = _expect(values, 1, "a radius")
            self.radius = max(0, int(radius))

    def __add__(self, offset: Vec2D) -> Circle:
        if not isinstance(offset, Vec2D):
            return NotImplemented
        return replace(self, position=self.position + offset)

    def __mul__(self, factor: float) -> Circle:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return replace(self, position=self.position * factor)


@dataclass
class Line(Shape, Transitionable):
    """A segment between two points, drawn with a given width."""

    class TransitionId(IntEnum):
        FILL_COLOR_RGB = 0
        FILL_COLOR_ALPHA = 1
        BORDER_COLOR_RGB = 2
        BORDER_COLOR_ALPHA = 3
        FIRST_POSITION = 4
        SECOND_POSITION = 5
        LINE_WIDTH = 6

    first_position: Vec2D
    second_position: Vec2D
    fill_color: RGBAColor
    line_width: float = 1.0
    border_color: RGBAColor = TRANSPARENT

    def get_values(self, transition_id: int) -> list[float]:
        tid = self.TransitionId(transition_id)
        if tid.name in _COLOR_IDS:
            return self._color_values(tid.name)
        if tid is self.TransitionId.FIRST_POSITION:
            return _point_values(self.first_position)
        if tid is self.TransitionId.SECOND_POSITION:
            return _point_values(self.second_position)
        return [float(self.line_width)]

    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        tid = self.TransitionId(transition_id)
        if tid.name in _COLOR_IDS:
            self._set_color_values(tid.name, values)
        elif tid is self.TransitionId.FIRST_POSITION:
            self.first_position = _point_from(values)
        elif tid is self.TransitionId.SECOND_POSITION:
            self.second_position = _point_from(values)
        else:
            (width,) = _expect(values, 1, "a line width")
            self.line_width = float(width)

    def __add__(self, offset: Vec2D) -> Line:
        if not isinstance(offset, Vec2D):
            return NotImplemented
        return replace(
            self,
            first_position=self.first_position + offset,
            second_position=self.second_position + offset,
        )

    def __mul__(self, factor: float) -> Line:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return replace(
            self,
            first_position=self.first_position * factor,
            second_position=self.second_position * factor,
        )


@dataclass
class Rectangle(Shape, Transitionable):
    """A rectangle given by its top-left and bottom-right corners."""

    class TransitionId(IntEnum):
        FILL_COLOR_RGB = 0
        FILL_COLOR_ALPHA = 1
        BORDER_COLOR_RGB = 2
        BORDER_COLOR_ALPHA = 3
        FIRST_POSITION = 4
        SECOND_POSITION = 5

    first_position: Vec2D
    second_position: Vec2D
    fill_color: RGBAColor
    border_color: RGBAColor = TRANSPARENT

    @classmethod
    def from_size(
        cls,
        position: Vec2D,
        width: int,
        height: int,
        fill_color: RGBAColor,
        border_color: RGBAColor = TRANSPARENT,
    ) -> Rectangle:
        """Build a rectangle from its top-left corner and its size."""
        if width < 0 or height < 0:
            raise ValueError(f"size must not be negative, got {width}x{height}")
        return cls(position, position + Vec2D(width, height), fill_color, border_color)

    def get_values(self, transition_id: int) -> list[float]:
        tid = self.TransitionId(transition_id)
        if tid.name in _COLOR_IDS:
            return self._color_values(tid.name)
        if tid is self.TransitionId.FIRST_POSITION:
            return _point_values(self.first_position)
        return _point_values(self.second_position)

    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        tid = self.TransitionId(transition_id)
        if tid.name in _COLOR_IDS:
            self._set_color_values(tid.name, values)
        elif tid is self.TransitionId.FIRST_POSITION:
            self.first_position = _point_from(values)
        else:
            self.second_position = _point_from(values)

    def __add__(self, offset: Vec2D) -> Rectangle:
        if not isinstance(offset, Vec2D):
            return NotImplemented
        return replace(
            self,
            first_position=self.first_position + offset,
            second_position=self.second_position + offset,
        )

    def __mul__(self, factor: float) -> Rectangle:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return replace(
            self,
            first_position=self.first_position * factor,
            second_position=self.second_position * factor,
        )


@dataclass
class Triangle(Shape, Transitionable):
    """A triangle given by its three vertices."""

    class TransitionId(IntEnum):
        FILL_COLOR_RGB = 0
        FILL_COLOR_ALPHA = 1
        BORDER_COLOR_RGB = 2
        BORDER_COLOR_ALPHA = 3
        FIRST_POSITION = 4
        SECOND_POSITION = 5
        THIRD_POSITION = 6

    first_position: Vec2D
    second_position: Vec2D
    third_position: Vec2D
    fill_color: RGBAColor
    border_color: RGBAColor = TRANSPARENT

    _VERTICES = {
        "FIRST_POSITION": "first_position",
        "SECOND_POSITION": "second_position",
        "THIRD_POSITION": "third_position",
    }

    def get_values(self, transition_id: int) -> list[float]:
        tid = self.TransitionId(transition_id)
        if tid.name in _COLOR_IDS:
            return self._color_values(tid.name)
        return _point_values(getattr(self, self._VERTICES[tid.name]))

    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        tid = self.TransitionId(transition_id)
        if tid.name in _COLOR_IDS:
            self._set_color_values(tid.name, values)
        else:
            setattr(self, self._VERTICES[tid.name], _point_from(values))

    def __add__(self, offset: Vec2D) -> Triangle:
        if not isinstance(offset, Vec2D):
            return NotImplemented
        return replace(
            self,
            first_position=self.first_position + offset,
            second_position=self.second_position + offset,
            third_position=self.third_position + offset,
        )

    def __mul__(self, factor: float) -> Triangle:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return replace(
            self,
            first_position=self.first_position * factor,
            second_position=self.second_position * factor,
            third_position=self.third_position * factor,
        )