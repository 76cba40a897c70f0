"""A two-dimensional integer vector."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


@dataclass(frozen=True)
class Vec2D:
    """A vector with integer coordinates.

    Equality compares coordinates; ordering compares magnitudes.
    Integer division and modulo truncate toward zero.
    """

    x: int = 0
    y: int = 0

    def _squared(self) -> int:
        return self.x * self.x + self.y * self.y

    def __pos__(self) -> Vec2D:
        return Vec2D(self.x, self.y)

    def __neg__(self) -> Vec2D:
        return Vec2D(-self.x, -self.y)

    def __add__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vec2D | float) -> Vec2D:
        if isinstance(other, Vec2D):
            return Vec2D(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2D(int(self.x * other), int(self.y * other))
        return NotImplemented

    def __truediv__(self, other: Vec2D | float) -> Vec2D:
        if isinstance(other, Vec2D):
            return Vec2D(_trunc_div(self.x, other.x), _trunc_div(self.y, other.y))
        if isinstance(other, (int, float)):
            return Vec2D(int(self.x / other), int(self.y / other))
        return NotImplemented

    def __mod__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(_trunc_mod(self.x, other.x), _trunc_mod(self.y, other.y))

    def __lt__(self, other: Vec2D) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self._squared() < other._squared()

    def __gt__(self, other: Vec2D) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self._squared() > other._squared()

    def __le__(self, other: Vec2D) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self._squared() <= other._squared()

    def __ge__(self, other: Vec2D) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self._squared() >= other._squared()

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    @staticmethod
    def smallest(p1: Vec2D, p2: Vec2D) -> Vec2D:
        """Return the vector of smaller magnitude; ``p1`` on a tie."""
        return p2 if p2 < p1 else p1

    @staticmethod
    def is_smaller(p1: Vec2D, p2: Vec2D) -> bool:
        """Return whether ``p1`` is strictly smaller in magnitude than ``p2``."""
        return p1 < p2

    def is_colliding(self, first_corner: Vec2D, second_corner: Vec2D) -> bool:
        """Return whether this point lies in the rectangle spanned by two corners."""
        low_x, high_x = sorted((first_corner.x, second_corner.x))
        low_y, high_y = sorted((first_corner.y, second_corner.y))
        return low_x <= self.x <= high_x and low_y <= self.y <= high_y

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)