from struct import Struct
from typing import NamedTuple

from goldspr.kernel.structured import StructuredTuple

SPRITE_TAG = b'IDSP'
SPRITE_MAGIC = int.from_bytes(SPRITE_TAG, byteorder='little', signed=False)
SPRITE_VERSION = 2

# palette size is stored as 16 bit count
MAX_PALETTE_SIZE = 0xFFFF
COLOR_SIZE = 3


class SpritePreamble(NamedTuple):
    etag: bytes
    version: int


class SpriteHeader(NamedTuple):
    type: int
    texture_format: int
    bounding_radius: float
    max_width: int
    max_height: int
    nframes: int
    beam_length: float
    synchronization: int
    palette_size: int


class FrameHeader(NamedTuple):
    group: int
    origin_x: int
    origin_y: int
    width: int
    height: int


SPRITE_PREAMBLE = StructuredTuple(
    ('etag', 'version'),
    Struct('<4si'),
    SpritePreamble,
)

SPRITE_HEADER = StructuredTuple(
    (
        'type',
        'texture_format',
        'bounding_radius',
        'max_width',
        'max_height',
        'nframes',
        'beam_length',
        'synchronization',
        'palette_size',
    ),
    Struct('<2if3ifiH'),
    SpriteHeader,
)

FRAME_HEADER = StructuredTuple(
    ('group', 'origin_x', 'origin_y', 'width', 'height'),
    Struct('<5i'),
    FrameHeader,
)
