import math

import pytest

from tbquake.qmap import QuakeMapEntities, QuakeMapEntity
from tbquake.special_textures import (
    LiquidMaterialExt,
    QuakeSkyMaterial,
    SpecialTextureKind,
    animation_frames,
    special_texture_kind,
    split_sky_image,
    water_alpha,
)
from tbquake.util import Vec2, Vec3


def test_liquid_defaults():
    ext = LiquidMaterialExt()
    assert ext.magnitude == 0.1
    assert ext.cycles == math.pi


def test_sky_defaults():
    sky = QuakeSkyMaterial()
    assert sky.fg_scroll == Vec2(0.1, 0.1)
    assert sky.bg_scroll == Vec2(0.05, 0.05)
    assert sky.texture_scale == 2.0
    assert sky.sphere_scale == Vec3(1.0, 3.0, 1.0)


@pytest.mark.parametrize(
    "name,kind",
    [
        ("*water0", SpecialTextureKind.LIQUID),
        ("sky1", SpecialTextureKind.SKY),
        ("+0button", SpecialTextureKind.ANIMATED),
        ("brick", None),
    ],
)
def test_special_texture_kind(name, kind):
    assert special_texture_kind(name) is kind


def _map(*props):
    return QuakeMapEntities(QuakeMapEntity(properties=dict(p)) for p in props)


def test_water_alpha_from_worldspawn():
    entities = _map(
        {"classname": "info_player_start"},
        {"classname": "worldspawn", "water_alpha": "0.5"},
    )
    assert water_alpha(entities) == 0.5


def test_water_alpha_missing_defaults_to_one():
    assert water_alpha(_map({"classname": "worldspawn"})) == 1.0
    assert water_alpha(_map()) == 1.0


def test_water_alpha_invalid_defaults_to_one():
    assert water_alpha(_map({"classname": "worldspawn", "water_alpha": "abc"})) == 1.0


def _image(pixels):
    return b"".join(bytes(p) for row in pixels for p in row)


def test_split_sky_image_halves():
    red = (255, 0, 0, 255)
    green = (0, 255, 0, 255)
    data = _image([[red, green], [red, green]])
    fg, bg = split_sky_image(data, 2, 2, 4)
    assert fg == _image([[red], [red]])
    assert bg == _image([[green], [green]])


def test_split_sky_black_becomes_transparent_in_foreground_only():
    black = (0, 0, 0, 255)
    data = _image([[black, black]])
    fg, bg = split_sky_image(data, 2, 1, 4)
    assert fg == bytes(4)
    assert bg == bytes(black)


def test_split_sky_sizes():
    data = bytes(range(4 * 2 * 4))
    fg, bg = split_sky_image(data, 4, 2, 4)
    assert len(fg) == len(bg) == len(data) // 2
    assert bg == data[8:16] + data[24:32]


def test_split_sky_rejects_bad_sizes():
    with pytest.raises(ValueError):
        split_sky_image(bytes(12), 3, 1, 4)
    with pytest.raises(ValueError):
        split_sky_image(bytes(5), 2, 1, 4)


def test_animation_frames_collects_sequence():
    names = {"+0lava", "+1lava", "+2lava", "+4lava", "+0other"}
    result = animation_frames("+2lava", names)
    assert result == (1, ["+0lava", "+1lava", "+2lava"])


def test_animation_frames_first_frame_wraps():
    start, frames = animation_frames("+0lava", {"+0lava"})
    assert start == 2**32 - 1
    assert frames == ["+0lava"]


def test_animation_frames_none_cases():
    assert animation_frames("+0lava", None) is None
    assert animation_frames("+alava", {"+0lava"}) is None
    assert animation_frames("lava", {"+0lava"}) is None