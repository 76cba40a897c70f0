import struct

import pytest

from kenjikit.color import BLUE, RED, WHITE, RGBAColor
from kenjikit.errors import ErrorCode, MinGLError
from kenjikit.sprite import Sprite, SpriteFormatError
from kenjikit.vec2d import Vec2D


def _si2(pixels, row_size, count=None, magic=b"SI", head=b"HEAD", data=b"DATA"):
    count = len(pixels) if count is None else count
    header = struct.pack("<2s4sHII4s", magic, head, 1, count, row_size, data)
    body = b"".join(bytes((p.red, p.green, p.blue, p.alpha)) for p in pixels)
    return header + body


PIXELS = [RED, BLUE, WHITE, RGBAColor(1, 2, 3, 4), RGBAColor(9, 8, 7, 6), RED]


def test_compute_size():
    sprite = Sprite(PIXELS, 3)
    assert sprite.compute_size() == Vec2D(3, 2)


def test_default_position_is_origin():
    assert Sprite(PIXELS, 2).position == Vec2D(0, 0)


def test_from_bytes_reads_pixels():
    sprite = Sprite.from_bytes(_si2(PIXELS, 2), Vec2D(5, 6))
    assert sprite.pixels == tuple(PIXELS)
    assert sprite.row_size == 2
    assert sprite.position == Vec2D(5, 6)
    assert sprite.compute_size() == Vec2D(2, 3)


def test_header_is_twenty_bytes():
    sprite = Sprite.from_bytes(_si2([], 1))
    assert len(_si2([], 1)) == 20
    assert sprite.pixels == ()


def test_from_file(tmp_path):
    path = tmp_path / "image.si2"
    path.write_bytes(_si2(PIXELS, 3))
    sprite = Sprite.from_file(path)
    assert sprite.pixels == tuple(PIXELS)
    assert sprite.compute_size() == Vec2D(3, 2)


def test_missing_file_raises_file_error(tmp_path):
    with pytest.raises(SpriteFormatError) as info:
        Sprite.from_file(tmp_path / "absent.si2")
    assert info.value.code == ErrorCode.FILE_ERROR


@pytest.mark.parametrize(
    "kwargs",
    [{"magic": b"XX"}, {"head": b"HEAX"}, {"data": b"DATX"}],
)
def test_bad_magic_rejected(kwargs):
    with pytest.raises(SpriteFormatError):
        Sprite.from_bytes(_si2(PIXELS, 2, **kwargs))


def test_truncated_header_rejected():
    with pytest.raises(SpriteFormatError):
        Sprite.from_bytes(b"SIHEAD")


def test_short_pixel_data_rejected():
    with pytest.raises(SpriteFormatError):
        Sprite.from_bytes(_si2(PIXELS, 2, count=10))


def test_format_error_is_mingl_and_value_error():
    with pytest.raises(MinGLError):
        Sprite.from_bytes(b"")
    with pytest.raises(ValueError):
        Sprite.from_bytes(b"")


def test_zero_row_size_rejected():
    with pytest.raises(ValueError):
        Sprite(PIXELS, 0)


def test_incomplete_row_rejected():
    with pytest.raises(ValueError):
        Sprite(PIXELS, 4)


def test_position_values_round_trip():
    sprite = Sprite(PIXELS, 2, Vec2D(10, 20))
    assert sprite.get_values(Sprite.TransitionId.POSITION) == [10.0, 20.0]
    sprite.set_values(Sprite.TransitionId.POSITION, [3.7, 4.2])
    assert sprite.position == Vec2D(3, 4)
    assert sprite.get_values(0) == [3.0, 4.0]


def test_set_values_wrong_length():
    sprite = Sprite(PIXELS, 2)
    with pytest.raises(ValueError):
        sprite.set_values(0, [1.0])


def test_unknown_transition_id():
    sprite = Sprite(PIXELS, 2)
    with pytest.raises(ValueError):
        sprite.get_values(1)