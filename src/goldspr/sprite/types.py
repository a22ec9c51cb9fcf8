import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, List, NamedTuple, Optional, Type, TypeVar, Union

import numpy as np

from goldspr.errors import InvalidFrameDimensions
from goldspr.kernel.buffer import BufferLike

T_Enum = TypeVar('T_Enum', bound=IntEnum)


class SpriteType(IntEnum):
    """How the sprite is oriented relative to the camera"""

    PARALLEL_UPRIGHT = 0
    FACING_UPRIGHT = 1
    PARALLEL = 2
    ORIENTED = 3
    PARALLEL_ORIENTED = 4


class TextureFormat(IntEnum):
    """How the sprite is blended when rendered"""

    NORMAL = 0
    ADDITIVE = 1
    INDEX_ALPHA = 2
    ALPHA_TEST = 3


class Synchronization(IntEnum):
    SYNCHRONIZED = 0
    RANDOM = 1


@dataclass(frozen=True)
class UnknownValue(object):
    """Raw enum value with no known meaning, kept as is for writing back"""

    raw: int

    def __int__(self) -> int:
        return self.raw

    def __index__(self) -> int:
        return self.raw


EnumValue = Union[T_Enum, UnknownValue]


def from_raw(enum: Type[T_Enum], value: int) -> Union[T_Enum, UnknownValue]:
    try:
        return enum(value)
    except ValueError:
        return UnknownValue(value)


class Color(NamedTuple):
    r: int
    g: int
    b: int


class Frame(object):
    """Single image of a sprite.

    Each byte of `data` is an index into the owning sprite palette,
    rows are stored top to bottom with `width` as stride.
    Dimensions are fixed on creation, only pixel values may change.
    """

    def __init__(
        self,
        width: int,
        height: int,
        group: int = 0,
        origin_x: int = 0,
        origin_y: int = 0,
        data: Optional[BufferLike] = None,
    ) -> None:
        if width < 0 or height < 0:
            raise InvalidFrameDimensions(width, height)
        self._width = width
        self._height = height
        self._data = bytearray(width * height)
        self._view = memoryview(self._data)
        self.group = group
        self.origin_x = origin_x
        self.origin_y = origin_y
        if data is not None:
            self.data = data

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def data(self) -> memoryview:
        return self._view

    @data.setter
    def data(self, value: BufferLike) -> None:
        if len(value) != len(self._data):
            raise ValueError(
                f'Expected {len(self._data)} bytes of pixel data but got {len(value)}'
            )
        self._view[:] = value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return (
            self.group,
            self.origin_x,
            self.origin_y,
            self.width,
            self.height,
            self._data,
        ) == (
            other.group,
            other.origin_x,
            other.origin_y,
            other.width,
            other.height,
            other._data,
        )

    def __repr__(self) -> str:
        return (
            f'Frame<{self.width}x{self.height}>'
            f'(group={self.group}, origin=({self.origin_x}, {self.origin_y}))'
        )


@dataclass
class Sprite:
    type: EnumValue[SpriteType] = SpriteType.PARALLEL_UPRIGHT
    texture_format: EnumValue[TextureFormat] = TextureFormat.NORMAL
    bounding_radius: float = 0.0
    beam_length: float = 0.0
    synchronization: EnumValue[Synchronization] = Synchronization.SYNCHRONIZED
    palette: List[Color] = field(default_factory=list)
    frames: List[Frame] = field(default_factory=list)

    @property
    def max_width(self) -> int:
        """Width of the widest frame, 0 if there are no frames"""
        return max((frame.width for frame in self.frames), default=0)

    @property
    def max_height(self) -> int:
        """Height of the tallest frame, 0 if there are no frames"""
        return max((frame.height for frame in self.frames), default=0)

    def add_frame(self, width: int, height: int, **fields: Any) -> Frame:
        frame = Frame(width, height, **fields)
        self.frames.append(frame)
        return frame

    def recalculate_bounding_radius(self) -> float:
        """Recalculate bounding radius from the largest frame dimensions.

        Should be called before saving if frames of different sizes were added,
        it is never done implicitly.
        """
        half_width, half_height = self.max_width >> 1, self.max_height >> 1
        radius = math.sqrt(half_width * half_width + half_height * half_height)
        # stored as float32 on disk
        self.bounding_radius = float(np.float32(radius))
        return self.bounding_radius
