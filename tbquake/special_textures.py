"""Quake special textures: liquids, skies and animated textures."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any, Collection, Iterable, List, Optional, Tuple

from .qmap import QuakeEntityError, QuakeMapEntity
from .util import Vec2, Vec3

_DIGITS = "0123456789"
_U32_RANGE = 1 << 32


@dataclass
class LiquidMaterialExt:
    """Parameters for the wave effect of Quake liquids."""

    magnitude: float = 0.1
    cycles: float = math.pi


@dataclass
class QuakeSkyMaterial:
    """Parameters of the two-layer scrolling Quake sky."""

    fg_scroll: Vec2 = field(default_factory=lambda: Vec2(0.1, 0.1))
    """The speed the foreground layer moves."""
    bg_scroll: Vec2 = field(default_factory=lambda: Vec2(0.05, 0.05))
    """The speed the background layer moves."""
    texture_scale: float = 2.0
    """The scale of the textures."""
    sphere_scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 3.0, 1.0))
    """Scales the sphere before it is re-normalized, used to shape it."""
    fg: Any = None
    bg: Any = None


class SpecialTextureKind(enum.Enum):
    """The kinds of special texture Quake recognises by name."""

    LIQUID = "liquid"
    SKY = "sky"
    ANIMATED = "animated"


def special_texture_kind(name: str) -> Optional[SpecialTextureKind]:
    """Classify a texture by its name prefix, or return None for an ordinary texture."""
    if name.startswith("*"):
        return SpecialTextureKind.LIQUID
    if name.startswith("sky"):
        return SpecialTextureKind.SKY
    if name.startswith("+"):
        return SpecialTextureKind.ANIMATED
    return None


def water_alpha(entities: Iterable[QuakeMapEntity]) -> float:
    """Return the worldspawn's ``water_alpha``, or 1.0 if it is missing or invalid."""
    worldspawn = next(
        (e for e in entities if e.properties.get("classname") == "worldspawn"), None
    )
    if worldspawn is None:
        return 1.0
    try:
        return worldspawn.get("water_alpha", float)
    except QuakeEntityError:
        return 1.0


def _is_black(pixel: bytes) -> bool:
    if len(pixel) < 3 or any(pixel[:3]):
        return False
    return len(pixel) < 4 or pixel[3] == 0xFF


def split_sky_image(
    pixels: bytes, width: int, height: int, pixel_size: int
) -> Tuple[bytes, bytes]:
    """Split a sky texture into its foreground (left) and background (right) halves.

    Opaque black pixels of the foreground become fully zeroed so they are transparent.
    """
    if width % 2:
        raise ValueError(f"sky image width must be even, got {width}")
    if len(pixels) != width * height * pixel_size:
        raise ValueError(
            f"expected {width * height * pixel_size} bytes for a {width}x{height} image, "
            f"got {len(pixels)}"
        )
    half = width // 2
    row_len = width * pixel_size
    blank = bytes(pixel_size)
    fg = bytearray()
    bg = bytearray()
    for row_start in range(0, len(pixels), row_len):
        row = pixels[row_start:row_start + row_len]
        left = row[:half * pixel_size]
        for offset in range(0, len(left), pixel_size):
            pixel = left[offset:offset + pixel_size]
            fg += blank if _is_black(pixel) else pixel
        bg += row[half * pixel_size:]
    return bytes(fg), bytes(bg)


def animation_frames(
    name: str, embedded_names: Optional[Collection[str]]
) -> Optional[Tuple[int, List[str]]]:
    """Find the frames of an animated ``+N`` texture among the embedded texture names.

    Returns the starting frame index and the frame names in order, or None when
    there are no embedded textures or the name has no frame digit.
    """
    if embedded_names is None or not name.startswith("+"):
        return None
    if len(name) < 2 or name[1] not in _DIGITS:
        return None
    frame_digit = int(name[1])
    content = name[2:]
    frames: List[str] = []
    while (candidate := f"+{len(frames)}{content}") in embedded_names:
        frames.append(candidate)
    return (frame_digit - 1) % _U32_RANGE, frames