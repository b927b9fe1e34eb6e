"""Glyph cache keys with subpixel position binning."""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass
from typing import Hashable


def _to_f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _f32_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


class SubpixelBin(enum.IntEnum):
    """Quarter-pixel bin of a fractional position."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3

    @classmethod
    def from_position(cls, pos: float) -> tuple[int, SubpixelBin]:
        """Split pos into a whole pixel and the bin of its fraction."""
        pos = _to_f32(pos)
        fract, whole = math.modf(pos)
        trunc = int(whole)
        if math.copysign(1.0, pos) < 0:
            if fract > -0.125:
                return trunc, cls.ZERO
            if fract > -0.375:
                return trunc - 1, cls.THREE
            if fract > -0.625:
                return trunc - 1, cls.TWO
            if fract > -0.875:
                return trunc - 1, cls.ONE
            return trunc - 1, cls.ZERO
        if fract < 0.125:
            return trunc, cls.ZERO
        if fract < 0.375:
            return trunc, cls.ONE
        if fract < 0.625:
            return trunc, cls.TWO
        if fract < 0.875:
            return trunc, cls.THREE
        return trunc + 1, cls.ZERO

    def as_float(self) -> float:
        """The fractional offset this bin stands for."""
        return self.value * 0.25


@dataclass(frozen=True, order=True)
class CacheKey:
    """Key identifying a rasterized glyph in a cache."""

    font_id: Hashable
    glyph_id: int
    font_size_bits: int
    x_bin: SubpixelBin
    y_bin: SubpixelBin

    def __post_init__(self) -> None:
        if not 0 <= self.glyph_id <= 0xFFFF:
            raise ValueError(f"glyph id out of range: {self.glyph_id}")

    @classmethod
    def new(
        cls,
        font_id: Hashable,
        glyph_id: int,
        font_size: float,
        pos: tuple[float, float],
    ) -> tuple[CacheKey, int, int]:
        """Build a key for a glyph at pos; also return its whole-pixel x and y."""
        x, x_bin = SubpixelBin.from_position(pos[0])
        y, y_bin = SubpixelBin.from_position(pos[1])
        key = cls(font_id, glyph_id, _f32_bits(font_size), x_bin, y_bin)
        return key, x, y