"""Images loaded from the ``.si2`` format or built from a list of pixels.

An ``.si2`` file starts with a packed little-endian header:

* 2 bytes: the magic ``SI``
* 4 bytes: the header magic ``HEAD``
* 2 bytes: the format version
* 4 bytes: the number of pixels
* 4 bytes: the number of pixels per row
* 4 bytes: the data magic ``DATA``

followed by one red, green, blue, alpha byte quadruple per pixel.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from enum import IntEnum
from os import PathLike

from kenjikit.color import RGBAColor
from kenjikit.errors import ErrorCode, MinGLError
from kenjikit.transitionable import Transitionable
from kenjikit.vec2d import Vec2D

_HEADER = struct.Struct("<2s4sHII4s")
_FILE_MAGIC = b"SI"
_HEAD_MAGIC = b"HEAD"
_DATA_MAGIC = b"DATA"
_PIXEL_SIZE = 4


class SpriteFormatError(MinGLError, ValueError):
    """Raised when sprite data cannot be read or is malformed."""

    def __init__(self, label: str, code: int = ErrorCode.FILE_ERROR) -> None:
        super().__init__(label, code)


class Sprite(Transitionable):
    """An image made of rows of RGBA pixels, drawn at a position."""

    class TransitionId(IntEnum):
        POSITION = 0

    def __init__(
        self,
        pixels: Iterable[RGBAColor],
        row_size: int,
        position: Vec2D | None = None,
    ) -> None:
        pixel_list = tuple(pixels)
        if row_size <= 0:
            raise ValueError(f"row size must be positive, got {row_size}")
        if len(pixel_list) % row_size:
            raise ValueError(
                f"{len(pixel_list)} pixel(s) do not fill rows of {row_size}"
            )
        self.pixels: tuple[RGBAColor, ...] = pixel_list
        self.row_size = row_size
        self.position = position if position is not None else Vec2D()

    @classmethod
    def from_bytes(cls, data: bytes, position: Vec2D | None = None) -> Sprite:
        """Build a sprite from the contents of an ``.si2`` file."""
        if len(data) < _HEADER.size:
            raise SpriteFormatError(
                f"data too short for a sprite header: {len(data)} byte(s)"
            )
        magic, head, _version, count, row_size, data_magic = _HEADER.unpack_from(data)
        if magic != _FILE_MAGIC:
            raise SpriteFormatError(f"bad file magic {magic!r}")
        if head != _HEAD_MAGIC:
            raise SpriteFormatError(f"bad header magic {head!r}")
        if data_magic != _DATA_MAGIC:
            raise SpriteFormatError(f"bad data magic {data_magic!r}")
        body = data[_HEADER.size:]
        needed = count * _PIXEL_SIZE
        if len(body) < needed:
            raise SpriteFormatError(
                f"expected {count} pixel(s), data holds {len(body) // _PIXEL_SIZE}"
            )
        pixels = [
            RGBAColor(*body[offset:offset + _PIXEL_SIZE])
            for offset in range(0, needed, _PIXEL_SIZE)
        ]
        try:
            return cls(pixels, row_size, position)
        except ValueError as error:
            raise SpriteFormatError(str(error)) from None

    @classmethod
    def from_file(
        cls, filename: str | PathLike[str], position: Vec2D | None = None
    ) -> Sprite:
        """Load a sprite from an ``.si2`` file."""
        try:
            with open(filename, "rb") as stream:
                data = stream.read()
        except OSError as error:
            raise SpriteFormatError(f"cannot read {filename}: {error}") from error
        return cls.from_bytes(data, position)

    def get_values(self, transition_id: int) -> list[float]:
        self.TransitionId(transition_id)
        return [float(self.position.x), float(self.position.y)]

    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        self.TransitionId(transition_id)
        values = list(values)
        if len(values) != 2:
            raise ValueError(f"a position needs 2 value(s), got {len(values)}")
        self.position = Vec2D(int(values[0]), int(values[1]))

    def compute_size(self) -> Vec2D:
        """Return the width and height of the image in pixels."""
        return Vec2D(self.row_size, len(self.pixels) // self.row_size)