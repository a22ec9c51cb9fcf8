from goldspr.errors import (
    FormatError,
    InvalidFieldValue,
    InvalidFrameCount,
    InvalidFrameDimensions,
    NotASprite,
    PaletteTooLarge,
    Truncated,
    UnsupportedVersion,
)
from goldspr.sprite.preset import spr
from goldspr.sprite.types import (
    Color,
    Frame,
    Sprite,
    SpriteType,
    Synchronization,
    TextureFormat,
    UnknownValue,
)

__all__ = [
    'spr',
    'Color',
    'Frame',
    'Sprite',
    'SpriteType',
    'Synchronization',
    'TextureFormat',
    'UnknownValue',
    'FormatError',
    'InvalidFieldValue',
    'InvalidFrameCount',
    'InvalidFrameDimensions',
    'NotASprite',
    'PaletteTooLarge',
    'Truncated',
    'UnsupportedVersion',
]
