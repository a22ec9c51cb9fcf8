from itertools import chain
from typing import Any, List, Sequence

import numpy as np
from PIL import Image

from goldspr.sprite.types import Color, Frame

PALETTE_COLORS = 256


def convert_to_pil_image(frame: Frame, palette: Sequence[Color]) -> Image.Image:
    """Create 256 color image from frame using given sprite palette"""
    npp = np.array(frame.data, dtype=np.uint8).reshape(frame.height, frame.width)
    # grayscale image becomes palette image once palette is attached
    im = Image.fromarray(npp)
    colors = list(chain.from_iterable(palette[:PALETTE_COLORS]))
    im.putpalette(colors + [0] * (PALETTE_COLORS * 3 - len(colors)))
    return im


def frame_from_image(im: Image.Image, **fields: Any) -> Frame:
    if im.mode != 'P':
        raise ValueError(f'expected palette image but got mode {im.mode}')
    width, height = im.size
    npp = np.asarray(im, dtype=np.uint8)
    return Frame(width, height, data=npp.tobytes(), **fields)


def palette_from_image(im: Image.Image) -> List[Color]:
    palette = im.getpalette() or []
    return [Color(*rgb) for rgb in zip(*[iter(palette[: PALETTE_COLORS * 3])] * 3)]
