"""Cursor positions, layout positions and text metrics."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass

from richtextbuf.attrs import Color


class Affinity(enum.IntEnum):
    """Which run a cursor on a boundary between runs belongs to."""

    BEFORE = 0
    AFTER = 1

    def before(self) -> bool:
        return self is Affinity.BEFORE

    def after(self) -> bool:
        return self is Affinity.AFTER

    @classmethod
    def from_before(cls, before: bool) -> Affinity:
        return cls.BEFORE if before else cls.AFTER

    @classmethod
    def from_after(cls, after: bool) -> Affinity:
        return cls.AFTER if after else cls.BEFORE


@functools.total_ordering
@dataclass(frozen=True)
class Cursor:
    """A position in a buffer: line and character index of the glyph it precedes."""

    line: int = 0
    index: int = 0
    affinity: Affinity = Affinity.BEFORE
    color: Color | None = None

    @classmethod
    def with_affinity(cls, line: int, index: int, affinity: Affinity) -> Cursor:
        return cls(line, index, affinity)

    @classmethod
    def with_color(cls, line: int, index: int, color: Color) -> Cursor:
        return cls(line, index, Affinity.BEFORE, color)

    def _key(self) -> tuple:
        color_key = (0,) if self.color is None else (1, self.color.value)
        return (self.line, self.index, self.affinity, color_key)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._key() < other._key()


@dataclass(frozen=True)
class LayoutCursor:
    """A cursor resolved to a line, a layout line within it, and a glyph."""

    line: int
    layout: int
    glyph: int


def _format_px(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


@dataclass(frozen=True)
class Metrics:
    """Font size and line height, in pixels."""

    font_size: float = 0.0
    line_height: float = 0.0

    def scale(self, scale: float) -> Metrics:
        return Metrics(self.font_size * scale, self.line_height * scale)

    def __str__(self) -> str:
        return f"{_format_px(self.font_size)}px / {_format_px(self.line_height)}px"