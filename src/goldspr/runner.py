import glob
import logging
import os
from enum import Enum, IntEnum
from itertools import chain
from typing import Iterable, List, Set, Type, TypeVar

import typer
from PIL import Image

from goldspr.graphics.image import (
    convert_to_pil_image,
    frame_from_image,
    palette_from_image,
)
from goldspr.sprite.preset import spr
from goldspr.sprite.types import Sprite, SpriteType, Synchronization, TextureFormat

app = typer.Typer()

T_Enum = TypeVar('T_Enum', bound=IntEnum)


@app.callback()
def main(
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Show debug output'),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def get_files(globs: Iterable[str]) -> Set[str]:
    return set(chain.from_iterable(glob.iglob(fname) for fname in globs))


@app.command('info')
def info(
    files: List[str] = typer.Argument(..., help='Files to read from'),
) -> None:
    for filename in sorted(get_files(files)):
        sprite = spr.from_path(filename)
        print(os.path.basename(filename))
        print(f'  type: {sprite.type!r}')
        print(f'  texture format: {sprite.texture_format!r}')
        print(f'  synchronization: {sprite.synchronization!r}')
        print(f'  bounding radius: {sprite.bounding_radius}')
        print(f'  beam length: {sprite.beam_length}')
        print(f'  max size: {sprite.max_width}x{sprite.max_height}')
        print(f'  palette: {len(sprite.palette)} colors')
        print(f'  frames: {len(sprite.frames)}')
        for idx, frame in enumerate(sprite.frames):
            print(f'    {idx}: {frame!r}')


@app.command('decode')
def decode(
    files: List[str] = typer.Argument(..., help='Files to read from'),
    target_dir: str = typer.Option('out', '--target', '-t', help='Target directory'),
) -> None:
    for filename in sorted(get_files(files)):
        basename = os.path.basename(filename)
        print(f'Decoding file: {basename}')
        sprite = spr.from_path(filename)
        output_dir = os.path.join(target_dir, basename)
        os.makedirs(output_dir, exist_ok=True)
        for idx, frame in enumerate(sprite.frames):
            if not frame.width or not frame.height:
                print(f'Skipping empty frame {idx} ({frame.width}x{frame.height})')
                continue
            im = convert_to_pil_image(frame, sprite.palette)
            im.save(os.path.join(output_dir, f'frame_{idx:04d}.png'))


def choices(enum: Type[IntEnum]) -> Type[Enum]:
    names = [member.name.lower().replace('_', '-') for member in enum]
    return Enum(f'{enum.__name__}Choice', dict(zip(names, names)))  # type: ignore


def from_choice(enum: Type[T_Enum], choice: Enum) -> T_Enum:
    return enum[choice.value.upper().replace('-', '_')]


TypeChoice = choices(SpriteType)
TextureFormatChoice = choices(TextureFormat)
SyncChoice = choices(Synchronization)


@app.command('build')
def build(
    images: List[str] = typer.Argument(..., help='Palette images, one per frame'),
    output: str = typer.Option(..., '--output', '-o', help='Target sprite file'),
    stype: TypeChoice = typer.Option('parallel', '--type', help='Sprite orientation'),
    texture_format: TextureFormatChoice = typer.Option(
        'normal', '--texture-format', help='Sprite blending'
    ),
    sync: SyncChoice = typer.Option(
        'synchronized', '--sync', help='Animation synchronization'
    ),
    beam_length: float = typer.Option(0.0, '--beam-length', help='Beam length'),
) -> None:
    sprite = Sprite(
        type=from_choice(SpriteType, stype),
        texture_format=from_choice(TextureFormat, texture_format),
        synchronization=from_choice(Synchronization, sync),
        beam_length=beam_length,
    )
    # frame order follows argument order
    for idx, filename in enumerate(images):
        with Image.open(filename) as im:
            if idx == 0:
                sprite.palette = palette_from_image(im)
            sprite.frames.append(frame_from_image(im))
    sprite.recalculate_bounding_radius()
    written = spr.save(sprite, output)
    print(f'Wrote {len(sprite.frames)} frames ({written} bytes) to {output}')


@app.command('radius')
def radius(
    files: List[str] = typer.Argument(..., help='Files to update'),
) -> None:
    for filename in sorted(get_files(files)):
        sprite = spr.from_path(filename)
        old = sprite.bounding_radius
        new = sprite.recalculate_bounding_radius()
        spr.save(sprite, filename)
        print(f'{os.path.basename(filename)}: {old} -> {new}')


if __name__ == '__main__':
    app()
