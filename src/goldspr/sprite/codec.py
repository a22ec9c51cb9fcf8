import io
import os
from itertools import chain
from typing import IO, Iterator, List, Sequence

from goldspr.errors import (
    InvalidFrameCount,
    InvalidFrameDimensions,
    NotASprite,
    PaletteTooLarge,
    UnsupportedVersion,
)
from goldspr.kernel.buffer import read_exact
from goldspr.kernel.settings import _SpriteSetting
from goldspr.utils.fileio import read_file, write_file

from .header import (
    COLOR_SIZE,
    FRAME_HEADER,
    MAX_PALETTE_SIZE,
    SPRITE_HEADER,
    SPRITE_PREAMBLE,
    SPRITE_TAG,
    SPRITE_VERSION,
    FrameHeader,
    SpriteHeader,
    SpritePreamble,
)
from .types import (
    Color,
    Frame,
    Sprite,
    SpriteType,
    Synchronization,
    TextureFormat,
    from_raw,
)


def read_palette(stream: IO[bytes], size: int) -> List[Color]:
    data = read_exact(stream, size * COLOR_SIZE)
    return [Color(*rgb) for rgb in zip(*[iter(data)] * COLOR_SIZE)]


def read_frames(stream: IO[bytes], nframes: int) -> Iterator[Frame]:
    for _ in range(nframes):
        header = FRAME_HEADER.unpack(stream)
        if header.width < 0 or header.height < 0:
            raise InvalidFrameDimensions(header.width, header.height)
        data = read_exact(stream, header.width * header.height)
        yield Frame(
            header.width,
            header.height,
            group=header.group,
            origin_x=header.origin_x,
            origin_y=header.origin_y,
            data=data,
        )


def read_sprite(cfg: _SpriteSetting, stream: IO[bytes]) -> Sprite:
    """Read sprite from given binary stream.

    Nothing is returned unless the whole sprite was read successfully.
    """
    preamble = SPRITE_PREAMBLE.unpack(stream)
    if preamble.etag != SPRITE_TAG:
        raise NotASprite(preamble.etag)
    if preamble.version != SPRITE_VERSION:
        raise UnsupportedVersion(preamble.version)

    header = SPRITE_HEADER.unpack(stream)
    cfg.logger.debug(header)
    if header.nframes < 0:
        raise InvalidFrameCount(header.nframes)

    palette = read_palette(stream, header.palette_size)
    frames = list(read_frames(stream, header.nframes))

    sprite = Sprite(
        type=from_raw(SpriteType, header.type),
        texture_format=from_raw(TextureFormat, header.texture_format),
        bounding_radius=header.bounding_radius,
        beam_length=header.beam_length,
        synchronization=from_raw(Synchronization, header.synchronization),
        palette=palette,
        frames=frames,
    )

    # max dimensions are only a hint, always derived from frames
    if (header.max_width, header.max_height) != (sprite.max_width, sprite.max_height):
        cfg.logger.debug(
            f'ignoring stored max dimensions {header.max_width}x{header.max_height}, '
            f'frames give {sprite.max_width}x{sprite.max_height}'
        )

    return sprite


def from_bytes(cfg: _SpriteSetting, data: bytes) -> Sprite:
    with io.BytesIO(data) as stream:
        sprite = read_sprite(cfg, stream)
        extra = stream.read()
    if extra:
        cfg.logger.warning(f'ignoring {len(extra)} bytes of trailing data')
    return sprite


def from_path(cfg: _SpriteSetting, path: str) -> Sprite:
    return from_bytes(cfg, read_file(path))


def get_palette(cfg: _SpriteSetting, palette: Sequence[Color]) -> Sequence[Color]:
    if len(palette) <= MAX_PALETTE_SIZE:
        return palette
    if cfg.strict:
        raise PaletteTooLarge(len(palette))
    cfg.logger.warning(
        f'palette has {len(palette)} colors, '
        f'only the first {MAX_PALETTE_SIZE} will be written'
    )
    return palette[:MAX_PALETTE_SIZE]


def write_frame(frame: Frame) -> bytes:
    header = FrameHeader(
        group=frame.group,
        origin_x=frame.origin_x,
        origin_y=frame.origin_y,
        width=frame.width,
        height=frame.height,
    )
    return FRAME_HEADER.pack(header) + bytes(frame.data)


def write_sprite(cfg: _SpriteSetting, sprite: Sprite, stream: IO[bytes]) -> int:
    """Write sprite to given binary stream, return number of bytes written.

    Max frame dimensions, frame count and palette size are derived on write.
    Bounding radius is written as is, see `Sprite.recalculate_bounding_radius`.
    """
    palette = get_palette(cfg, sprite.palette)
    header = SpriteHeader(
        type=int(sprite.type),
        texture_format=int(sprite.texture_format),
        bounding_radius=sprite.bounding_radius,
        max_width=sprite.max_width,
        max_height=sprite.max_height,
        nframes=len(sprite.frames),
        beam_length=sprite.beam_length,
        synchronization=int(sprite.synchronization),
        palette_size=len(palette),
    )
    # pack everything first, nothing reaches the stream on invalid values
    data = b''.join(
        [
            SPRITE_PREAMBLE.pack(SpritePreamble(SPRITE_TAG, SPRITE_VERSION)),
            SPRITE_HEADER.pack(header),
            bytes(chain.from_iterable(palette)),
            *(write_frame(frame) for frame in sprite.frames),
        ]
    )
    return stream.write(data)


def to_bytes(cfg: _SpriteSetting, sprite: Sprite) -> bytes:
    with io.BytesIO() as stream:
        write_sprite(cfg, sprite, stream)
        return stream.getvalue()


def save(cfg: _SpriteSetting, sprite: Sprite, path: str) -> int:
    """Save sprite to file, the file is left untouched if encoding fails."""
    data = to_bytes(cfg, sprite)
    cfg.logger.debug(f'writing {len(data)} bytes to {os.path.basename(path)}')
    return write_file(path, data)
