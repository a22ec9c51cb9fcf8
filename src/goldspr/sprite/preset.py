from dataclasses import dataclass

from goldspr.kernel.settings import _SpriteSetting


@dataclass(frozen=True)
class _SpritePreset(_SpriteSetting):

    # isort: off
    from .codec import (
        read_sprite,
        write_sprite,
        from_bytes,
        from_path,
        to_bytes,
        save,
    )
    # isort: on


spr = _SpritePreset()
