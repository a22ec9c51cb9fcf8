import math

import pytest

from goldspr.errors import InvalidFrameDimensions
from goldspr.sprite.types import (
    Frame,
    Sprite,
    SpriteType,
    Synchronization,
    TextureFormat,
    UnknownValue,
    from_raw,
)


def test_empty_sprite_defaults():
    sprite = Sprite()
    assert sprite.frames == []
    assert sprite.palette == []
    assert sprite.type == SpriteType.PARALLEL_UPRIGHT
    assert sprite.texture_format == TextureFormat.NORMAL
    assert sprite.synchronization == Synchronization.SYNCHRONIZED
    assert sprite.max_width == 0
    assert sprite.max_height == 0


def test_max_dimensions():
    sprite = Sprite()
    sprite.add_frame(10, 20)
    sprite.add_frame(30, 5)
    assert (sprite.max_width, sprite.max_height) == (30, 20)


def test_max_dimensions_follow_frames():
    sprite = Sprite()
    sprite.add_frame(10, 20)
    assert sprite.max_width == 10
    sprite.frames.append(Frame(40, 1))
    assert sprite.max_width == 40
    sprite.frames.clear()
    assert sprite.max_width == 0


def test_recalculate_bounding_radius():
    sprite = Sprite()
    sprite.add_frame(10, 20)
    radius = sprite.recalculate_bounding_radius()
    assert radius == pytest.approx(math.sqrt(125), rel=1e-6)
    assert sprite.bounding_radius == radius


def test_recalculate_bounding_radius_uses_truncated_halves():
    sprite = Sprite()
    sprite.add_frame(11, 21)
    assert sprite.recalculate_bounding_radius() == pytest.approx(math.sqrt(125), rel=1e-6)


def test_bounding_radius_not_maintained_implicitly():
    sprite = Sprite()
    sprite.add_frame(10, 20)
    assert sprite.bounding_radius == 0.0


def test_empty_sprite_radius():
    sprite = Sprite(bounding_radius=3.0)
    assert sprite.recalculate_bounding_radius() == 0.0


def test_frame_data_is_zeroed():
    frame = Frame(4, 3)
    assert bytes(frame.data) == b'\x00' * 12


def test_empty_frame():
    frame = Frame(0, 0)
    assert len(frame.data) == 0
    assert Frame(0, 3).data.nbytes == 0


@pytest.mark.parametrize('width,height', [(-1, 5), (5, -1), (-1, -1)])
def test_negative_frame_dimensions(width, height):
    with pytest.raises(InvalidFrameDimensions):
        Frame(width, height)


def test_frame_dimensions_are_read_only():
    frame = Frame(2, 2)
    with pytest.raises(AttributeError):
        frame.width = 3
    with pytest.raises(AttributeError):
        frame.height = 3


def test_frame_pixels_are_mutable():
    frame = Frame(2, 2)
    frame.data[3] = 7
    frame.data[0:2] = b'\x01\x02'
    assert bytes(frame.data) == b'\x01\x02\x00\x07'


def test_frame_data_assignment_keeps_length():
    frame = Frame(2, 2)
    frame.data = b'\x01\x02\x03\x04'
    assert bytes(frame.data) == b'\x01\x02\x03\x04'
    with pytest.raises(ValueError):
        frame.data = b'\x01\x02\x03'
    with pytest.raises(ValueError):
        frame.data[:] = b'\x01'
    assert len(frame.data) == 4


def test_frame_data_length_checked_on_creation():
    with pytest.raises(ValueError):
        Frame(2, 2, data=b'\x00' * 5)


def test_frame_equality():
    assert Frame(1, 1, group=2, data=b'\x05') == Frame(1, 1, group=2, data=b'\x05')
    assert Frame(1, 1, group=2, data=b'\x05') != Frame(1, 1, group=3, data=b'\x05')
    assert Frame(1, 1, data=b'\x05') != Frame(1, 1, data=b'\x06')
    assert Frame(1, 2) != Frame(2, 1)


def test_from_raw():
    assert from_raw(SpriteType, 3) is SpriteType.ORIENTED
    assert from_raw(TextureFormat, 9) == UnknownValue(9)
    assert int(from_raw(Synchronization, -4)) == -4
