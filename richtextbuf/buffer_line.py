"""A single line (paragraph) of text with its attributes and cached results."""

from __future__ import annotations

import copy
import enum
from typing import Any

from richtextbuf.attrs import AttrsList


class Wrap(enum.Enum):
    """How a line is wrapped when it does not fit the width."""

    NONE = "none"
    GLYPH = "glyph"
    WORD = "word"


class Align(enum.Enum):
    """Horizontal alignment of a line."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFIED = "justified"


class Shaping(enum.Enum):
    """Which shaping strategy a line uses."""

    BASIC = "basic"
    ADVANCED = "advanced"


class BufferLine:
    """A line of text with its attributes, wrap and alignment settings.

    Shaping and layout results are cached in ``shape_opt`` and
    ``layout_opt``; any change that invalidates them clears them.
    """

    def __init__(self, text: str, attrs_list: AttrsList, shaping: Shaping) -> None:
        self._text = str(text)
        self._attrs_list = attrs_list
        self._wrap = Wrap.WORD
        self._align: Align | None = None
        self._shaping = shaping
        self.shape_opt: Any | None = None
        self.layout_opt: list[Any] | None = None

    def __repr__(self) -> str:
        return (
            f"BufferLine(text={self._text!r}, wrap={self._wrap}, "
            f"align={self._align}, shaping={self._shaping})"
        )

    @property
    def text(self) -> str:
        return self._text

    @property
    def attrs_list(self) -> AttrsList:
        return self._attrs_list

    @property
    def wrap(self) -> Wrap:
        return self._wrap

    @property
    def align(self) -> Align | None:
        return self._align

    @property
    def shaping(self) -> Shaping:
        return self._shaping

    def set_text(self, text: str, attrs_list: AttrsList) -> bool:
        """Replace text and attributes; return True if the line was reset."""
        if text != self._text or attrs_list != self._attrs_list:
            self._text = str(text)
            self._attrs_list = attrs_list
            self.reset()
            return True
        return False

    def set_attrs_list(self, attrs_list: AttrsList) -> bool:
        """Replace the attributes; return True if the line was reset."""
        if attrs_list != self._attrs_list:
            self._attrs_list = attrs_list
            self.reset()
            return True
        return False

    def set_wrap(self, wrap: Wrap) -> bool:
        """Change wrapping; return True if the layout was reset."""
        if wrap != self._wrap:
            self._wrap = wrap
            self.reset_layout()
            return True
        return False

    def set_align(self, align: Align | None) -> bool:
        """Change alignment (None picks by direction); return True if the layout was reset."""
        if align != self._align:
            self._align = align
            self.reset_layout()
            return True
        return False

    def append(self, other: BufferLine) -> None:
        """Append another line's text and attributes; its wrap setting is lost."""
        offset = len(self._text)
        self._text += other.text
        other_defaults = other.attrs_list.defaults()
        if other_defaults != self._attrs_list.defaults():
            self._attrs_list.add_span(offset, offset + len(other.text), other_defaults)
        for start, end, attrs in other.attrs_list.spans():
            self._attrs_list.add_span(start + offset, end + offset, attrs)
        self.reset()

    def split_off(self, index: int) -> BufferLine:
        """Cut the line at index and return the part after it as a new line."""
        if not 0 <= index <= len(self._text):
            raise IndexError(f"split index {index} outside line of length {len(self._text)}")
        tail = self._text[index:]
        self._text = self._text[:index]
        tail_attrs = self._attrs_list.split_off(index)
        self.reset()
        new = BufferLine(tail, tail_attrs, self._shaping)
        new._wrap = self._wrap
        return new

    def reset(self) -> None:
        """Drop cached shaping and layout."""
        self.shape_opt = None
        self.layout_opt = None

    def reset_layout(self) -> None:
        """Drop cached layout only."""
        self.layout_opt = None

    def is_reset(self) -> bool:
        """Whether no shaping result is cached."""
        return self.shape_opt is None

    def __copy__(self) -> BufferLine:
        new = BufferLine(self._text, copy.copy(self._attrs_list), self._shaping)
        new._wrap = self._wrap
        new._align = self._align
        return new