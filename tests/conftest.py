import pytest

from goldspr.sprite.types import (
    Color,
    Frame,
    Sprite,
    SpriteType,
    Synchronization,
    TextureFormat,
)


@pytest.fixture
def sprite() -> Sprite:
    sprite = Sprite(
        type=SpriteType.ORIENTED,
        texture_format=TextureFormat.ADDITIVE,
        bounding_radius=11.5,
        beam_length=0.25,
        synchronization=Synchronization.RANDOM,
        palette=[Color(0, 0, 0), Color(255, 128, 0), Color(10, 20, 30)],
    )
    sprite.frames.append(
        Frame(3, 2, group=1, origin_x=-1, origin_y=1, data=b'\x00\x01\x02\x02\x01\x00')
    )
    sprite.frames.append(Frame(1, 4, group=0, origin_x=5, origin_y=-7, data=b'\x02' * 4))
    return sprite
