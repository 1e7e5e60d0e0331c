# tbquake

Helpers for working with Quake maps edited in TrenchBroom: entity property
access, coordinate-space conversions, rotation properties, and the
classification of Quake's special textures (liquids, skies and animated
textures).

The package has no dependencies outside the standard library.

## Installation

```
pip install tbquake
```

## Coordinates and rotations (`tbquake.util`)

TrenchBroom uses X forward, -Y right and Z up; the engine space used here has
-Z forward, X right and Y up.

```python
from tbquake.util import Vec3, angle_to_quat, mangle_to_quat, angles_to_quat, quake_light_to_lux

Vec3(1.0, 0.0, 0.0).trenchbroom_to_bevy()          # Vec3(x=-0.0, y=0.0, z=-1.0)
Vec3.X.trenchbroom_to_bevy().bevy_to_trenchbroom() # back to Vec3.X
angle_to_quat(90.0).rotate(Vec3.NEG_Z)             # points along -X
angle_to_quat(-1.0)                                # special value: straight up
angle_to_quat(-2.0)                                # special value: straight down
mangle_to_quat(Vec3(0.0, 90.0, 0.0))               # yaw, pitch, roll (for lights)
angles_to_quat(Vec3(90.0, 0.0, 0.0))               # negative pitch, yaw, negative roll
quake_light_to_lux(300.0)                          # 300 / 50_000
```

All angles are given in degrees. `Quat` also supports `from_rotation_x`,
`from_rotation_y`, `from_rotation_z`, `from_euler` with an `EulerRot` order,
and `*` to compose rotations or rotate a `Vec3`.

`Aabb.from_min_max` builds a center/half-extents box, `convert_zero_to_one`
(and `Vec2.convert_zero_to_one`) replaces zeros with ones for safe division,
and `almost_eq` compares numbers, `Vec3`s or `Quat`s component-wise within a
margin.

## Map entities (`tbquake.qmap`)

```python
from tbquake.qmap import QuakeMapEntity, QuakeMapEntities, with_default

world = QuakeMapEntity({"classname": "worldspawn", "water_alpha": "0.5"})
entities = QuakeMapEntities([world])

entities.worldspawn().classname()                         # "worldspawn"
world.get("water_alpha", float)                           # 0.5
with_default(lambda: world.get("gravity", float), 800.0)  # 800.0
```

A missing property raises `RequiredPropertyNotFound`; a value the parser
rejects with `ValueError`, `TypeError` or an arithmetic error raises
`PropertyParseError`. Both derive from `QuakeEntityError`, as do
`DefinitionNotFound` and `InvalidBase`. `QuakeMapEntities.worldspawn()`
returns `None` when the map has no worldspawn.

## Special textures (`tbquake.special_textures`)

```python
from tbquake.special_textures import special_texture_kind, water_alpha, split_sky_image, animation_frames

special_texture_kind("*water1")   # SpecialTextureKind.LIQUID
special_texture_kind("sky4")      # SpecialTextureKind.SKY
special_texture_kind("+0button")  # SpecialTextureKind.ANIMATED
special_texture_kind("wall")      # None
water_alpha(entities)             # 0.5 (1.0 if missing or invalid)

animation_frames("+1button", {"+0button", "+1button", "+2button"})
# (0, ["+0button", "+1button", "+2button"])
```

`split_sky_image(pixels, width, height, pixel_size)` divides raw sky texture
bytes into foreground (left half) and background (right half) byte strings,
zeroing opaque black foreground pixels so they become transparent; it raises
`ValueError` for an odd width or a byte count that does not match the size.

`LiquidMaterialExt` and `QuakeSkyMaterial` are plain dataclasses holding the
default parameters of the liquid wave and scrolling sky effects.

## What this package does not do

It does not read `.map` or `.bsp` files, build brush geometry or meshes, load
images, or render anything. Entities are built from property dictionaries you
supply, and texture data is handled as raw bytes.

## Running the tests

```
pip install tbquake[test]
pytest
```