"""RGBA colours with 8-bit channels."""

from __future__ import annotations

from dataclasses import dataclass, fields

from kenjikit.errors import ErrorCode, MinGLError

_MAX = 255


def _clamp(value: float) -> int:
    return max(0, min(_MAX, int(value)))


@dataclass(frozen=True)
class RGBAColor:
    """A colour with red, green, blue and alpha channels, each 0 to 255."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 255

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, int) or not 0 <= value <= _MAX:
                raise MinGLError(
                    f"{field.name} must be an integer between 0 and {_MAX}, got {value!r}",
                    ErrorCode.COLOR_OUT_OF_BOUNDS,
                )

    def __add__(self, other: RGBAColor) -> RGBAColor:
        """Add the channels, saturating at 255."""
        if not isinstance(other, RGBAColor):
            return NotImplemented
        return RGBAColor(
            _clamp(self.red + other.red),
            _clamp(self.green + other.green),
            _clamp(self.blue + other.blue),
            _clamp(self.alpha + other.alpha),
        )

    def __mul__(self, factor: float) -> RGBAColor:
        """Scale the red, green and blue channels; alpha is kept."""
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return RGBAColor(
            _clamp(self.red * factor),
            _clamp(self.green * factor),
            _clamp(self.blue * factor),
            self.alpha,
        )

    def __str__(self) -> str:
        return f"({self.red}, {self.green}, {self.blue}, {self.alpha})"


BLACK = RGBAColor(0, 0, 0)
WHITE = RGBAColor(255, 255, 255)
RED = RGBAColor(255, 0, 0)
LIME = RGBAColor(0, 255, 0)
BLUE = RGBAColor(0, 0, 255)
YELLOW = RGBAColor(255, 255, 0)
CYAN = RGBAColor(0, 255, 255)
MAGENTA = RGBAColor(255, 0, 255)
SILVER = RGBAColor(192, 192, 192)
GRAY = RGBAColor(128, 128, 128)
MAROON = RGBAColor(128, 0, 0)
OLIVE = RGBAColor(128, 128, 0)
GREEN = RGBAColor(0, 128, 0)
PURPLE = RGBAColor(128, 0, 128)
TEAL = RGBAColor(0, 128, 128)
NAVY = RGBAColor(0, 0, 128)
TRANSPARENT = RGBAColor(0, 0, 0, 0)