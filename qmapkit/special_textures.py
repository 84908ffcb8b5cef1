"""Quake special textures: liquids (``*``), skies (``sky``) and animated textures (``+``)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, TypeVar

from qmapkit.mathutil import Vec3

T = TypeVar("T")

_BYTES_PER_PIXEL = 4
_OPAQUE_BLACK = (0, 0, 0, 255)
_DIGITS = "0123456789"


class Face(Enum):
    """A side of a mesh that can be culled."""

    FRONT = "front"
    BACK = "back"


@dataclass
class LiquidMaterialExt:
    """Parameters for the wave effect of Quake liquid surfaces."""

    magnitude: float = 0.1
    cycles: float = math.pi


@dataclass
class QuakeSkyMaterial:
    """Parameters for the two-layer scrolling Quake sky."""

    fg_scroll: tuple[float, float] = (0.1, 0.1)
    bg_scroll: tuple[float, float] = (0.05, 0.05)
    texture_scale: float = 2.0
    sphere_scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 3.0, 1.0))
    fg: Any = None
    bg: Any = None
    cull_mode: Optional[Face] = Face.BACK


@dataclass(frozen=True)
class QuakeSkyKey:
    """The part of a sky material that selects its render pipeline."""

    cull_mode: Optional[Face]

    @staticmethod
    def from_material(material: QuakeSkyMaterial) -> QuakeSkyKey:
        return QuakeSkyKey(cull_mode=material.cull_mode)


@dataclass(frozen=True)
class RgbaImage:
    """An 8-bit RGBA image stored row by row."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        expected = self.width * self.height * _BYTES_PER_PIXEL
        if len(self.data) != expected:
            raise ValueError(
                f"image data holds {len(self.data)} bytes, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )
        object.__setattr__(self, "data", bytes(self.data))

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the (r, g, b, a) bytes of the pixel at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        start = (y * self.width + x) * _BYTES_PER_PIXEL
        r, g, b, a = self.data[start : start + _BYTES_PER_PIXEL]
        return (r, g, b, a)


def is_liquid_texture(name: str) -> bool:
    return name.startswith("*")


def is_sky_texture(name: str) -> bool:
    return name.startswith("sky")


def is_animated_texture(name: str) -> bool:
    return name.startswith("+")


def liquid_base_color(water_alpha: float) -> Optional[tuple[float, float, float, float]]:
    """The blended base color for a liquid, or None when it stays opaque."""
    if water_alpha < 1.0:
        return (1.0, 1.0, 1.0, water_alpha)
    return None


def split_sky_image(image: RgbaImage, foreground: bool) -> RgbaImage:
    """Cut one half out of a Quake sky texture.

    The left half is the foreground layer, in which opaque black becomes fully
    transparent; the right half is the background layer, copied unchanged.
    """
    if image.width % 2:
        raise ValueError(f"sky image width {image.width} is not even")
    half = image.width // 2
    columns = range(0, half) if foreground else range(half, image.width)
    transparent = bytes(_BYTES_PER_PIXEL)
    out = bytearray()
    for y in range(image.height):
        for x in columns:
            pixel = image.pixel(x, y)
            if foreground and pixel == _OPAQUE_BLACK:
                out += transparent
            else:
                out += bytes(pixel)
    return RgbaImage(half, image.height, bytes(out))


def sky_layer_labels(name: str, prefix: str) -> tuple[str, str]:
    """Asset labels for the foreground and background layers of a sky texture."""
    return (f"FG_{prefix}{name}", f"BG_{prefix}{name}")


def animation_frames(name: str, available: Mapping[str, T]) -> Optional[tuple[int, list[T]]]:
    """Collect the frames of an animated ``+N`` texture.

    Returns the starting frame index and the frames ``+0name``, ``+1name``, ...
    up to the first one missing from ``available``, or None when ``name`` is not
    an animated texture name.
    """
    if not is_animated_texture(name) or len(name) < 2 or name[1] not in _DIGITS:
        return None
    frame_idx = int(name[1])
    content = name[2:]
    frames = []
    frame_num = 0
    while (key := f"+{frame_num}{content}") in available:
        frames.append(available[key])
        frame_num += 1
    current_frame = (frame_idx - 1) & 0xFFFFFFFF
    return current_frame, frames