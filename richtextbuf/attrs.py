"""Text attributes and per-line attribute span lists."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, order=True)
class Color:
    """A packed ARGB text color (alpha in the top byte)."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise ValueError(f"color value out of range: {self.value:#x}")

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """Create an opaque color from red, green and blue components."""
        return cls.rgba(r, g, b, 0xFF)

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Create a color from red, green, blue and alpha components."""
        for name, component in (("r", r), ("g", g), ("b", b), ("a", a)):
            if not 0 <= component <= 0xFF:
                raise ValueError(f"component {name} out of range: {component}")
        return cls((a << 24) | (r << 16) | (g << 8) | b)

    def as_rgba_tuple(self) -> tuple[int, int, int, int]:
        """Components in (r, g, b, a) order."""
        return (self.r(), self.g(), self.b(), self.a())

    def as_rgba(self) -> list[int]:
        """Components as a list in [r, g, b, a] order."""
        return list(self.as_rgba_tuple())

    def r(self) -> int:
        return (self.value >> 16) & 0xFF

    def g(self) -> int:
        return (self.value >> 8) & 0xFF

    def b(self) -> int:
        return self.value & 0xFF

    def a(self) -> int:
        return (self.value >> 24) & 0xFF


class FamilyKind(enum.Enum):
    """The kind of a font family: a specific name or a generic family."""

    NAME = "name"
    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    CURSIVE = "cursive"
    FANTASY = "fantasy"
    MONOSPACE = "monospace"


@dataclass(frozen=True)
class Family:
    """A font family, either generic or given by name."""

    kind: FamilyKind
    name: str | None = None

    SERIF: ClassVar[Family]
    SANS_SERIF: ClassVar[Family]
    CURSIVE: ClassVar[Family]
    FANTASY: ClassVar[Family]
    MONOSPACE: ClassVar[Family]

    def __post_init__(self) -> None:
        if self.kind is FamilyKind.NAME:
            if not isinstance(self.name, str):
                raise ValueError("a named family needs a name")
        elif self.name is not None:
            raise ValueError(f"generic family {self.kind.value} takes no name")

    @classmethod
    def named(cls, name: str) -> Family:
        """A family identified by its name."""
        return cls(FamilyKind.NAME, name)


Family.SERIF = Family(FamilyKind.SERIF)
Family.SANS_SERIF = Family(FamilyKind.SANS_SERIF)
Family.CURSIVE = Family(FamilyKind.CURSIVE)
Family.FANTASY = Family(FamilyKind.FANTASY)
Family.MONOSPACE = Family(FamilyKind.MONOSPACE)


class Stretch(enum.IntEnum):
    """Font width."""

    ULTRA_CONDENSED = 1
    EXTRA_CONDENSED = 2
    CONDENSED = 3
    SEMI_CONDENSED = 4
    NORMAL = 5
    SEMI_EXPANDED = 6
    EXPANDED = 7
    EXTRA_EXPANDED = 8
    ULTRA_EXPANDED = 9


class Style(enum.Enum):
    """Font slant."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


@dataclass(frozen=True, order=True)
class Weight:
    """Font weight on the usual 1..1000 scale."""

    value: int

    THIN: ClassVar[Weight]
    EXTRA_LIGHT: ClassVar[Weight]
    LIGHT: ClassVar[Weight]
    NORMAL: ClassVar[Weight]
    MEDIUM: ClassVar[Weight]
    SEMIBOLD: ClassVar[Weight]
    BOLD: ClassVar[Weight]
    EXTRA_BOLD: ClassVar[Weight]
    BLACK: ClassVar[Weight]

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFF:
            raise ValueError(f"weight out of range: {self.value}")


Weight.THIN = Weight(100)
Weight.EXTRA_LIGHT = Weight(200)
Weight.LIGHT = Weight(300)
Weight.NORMAL = Weight(400)
Weight.MEDIUM = Weight(500)
Weight.SEMIBOLD = Weight(600)
Weight.BOLD = Weight(700)
Weight.EXTRA_BOLD = Weight(800)
Weight.BLACK = Weight(900)


@dataclass(frozen=True)
class FaceInfo:
    """The properties of a font face that attribute matching looks at."""

    post_script_name: str
    style: Style = Style.NORMAL
    weight: Weight = Weight.NORMAL
    stretch: Stretch = Stretch.NORMAL
    families: tuple[str, ...] = ()


@dataclass(frozen=True)
class Attrs:
    """Text attributes; defaults to a regular sans-serif font."""

    color_opt: Color | None = None
    family: Family = Family.SANS_SERIF
    stretch: Stretch = Stretch.NORMAL
    style: Style = Style.NORMAL
    weight: Weight = Weight.NORMAL
    metadata: int = 0

    def with_color(self, color: Color) -> Attrs:
        return dataclasses.replace(self, color_opt=color)

    def with_family(self, family: Family) -> Attrs:
        return dataclasses.replace(self, family=family)

    def with_stretch(self, stretch: Stretch) -> Attrs:
        return dataclasses.replace(self, stretch=stretch)

    def with_style(self, style: Style) -> Attrs:
        return dataclasses.replace(self, style=style)

    def with_weight(self, weight: Weight) -> Attrs:
        return dataclasses.replace(self, weight=weight)

    def with_metadata(self, metadata: int) -> Attrs:
        return dataclasses.replace(self, metadata=metadata)

    def matches(self, face: FaceInfo) -> bool:
        """Whether a font face suits these attributes (emoji faces always do)."""
        return "Emoji" in face.post_script_name or (
            face.style == self.style
            and face.weight == self.weight
            and face.stretch == self.stretch
        )

    def compatible(self, other: Attrs) -> bool:
        """Whether text with these attributes can be shaped together with other."""
        return (
            self.family == other.family
            and self.stretch == other.stretch
            and self.style == other.style
            and self.weight == other.weight
        )


class AttrsList:
    """Attributes for a line: defaults plus non-overlapping spans.

    Span boundaries are character offsets into the line; ranges are
    half-open. Touching spans with equal attributes are merged.
    """

    def __init__(self, defaults: Attrs | None = None) -> None:
        self._defaults = defaults if defaults is not None else Attrs()
        self._spans: list[tuple[int, int, Attrs]] = []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttrsList):
            return NotImplemented
        return self._defaults == other._defaults and self._spans == other._spans

    def __repr__(self) -> str:
        return f"AttrsList(defaults={self._defaults!r}, spans={self._spans!r})"

    def __copy__(self) -> AttrsList:
        new = AttrsList(self._defaults)
        new._spans = list(self._spans)
        return new

    def defaults(self) -> Attrs:
        return self._defaults

    def spans(self) -> list[tuple[int, int, Attrs]]:
        """The spans as (start, end, attrs), ordered by start."""
        return list(self._spans)

    def clear_spans(self) -> None:
        self._spans.clear()

    def add_span(self, start: int, end: int, attrs: Attrs) -> None:
        """Set attrs on start..end, replacing whatever covered that range."""
        if start == end:
            return
        if start > end:
            raise ValueError(f"span start {start} is after its end {end}")
        self._insert(start, end, attrs)

    def get_span(self, index: int) -> Attrs:
        """The attributes in effect at index."""
        for start, end, attrs in self._spans:
            if start <= index < end:
                return attrs
            if start > index:
                break
        return self._defaults

    def split_off(self, index: int) -> AttrsList:
        """Keep spans before index; return a new list with the rest, rebased to 0."""
        new = AttrsList(self._defaults)
        kept: list[tuple[int, int, Attrs]] = []
        for start, end, attrs in self._spans:
            if end <= index:
                kept.append((start, end, attrs))
            elif start >= index:
                new._spans.append((start - index, end - index, attrs))
            else:
                kept.append((start, index, attrs))
                new._spans.append((0, end - index, attrs))
        self._spans = kept
        return new

    def _insert(self, start: int, end: int, attrs: Attrs) -> None:
        pieces: list[tuple[int, int, Attrs]] = []
        for s, e, value in self._spans:
            if e <= start or s >= end:
                pieces.append((s, e, value))
                continue
            if s < start:
                pieces.append((s, start, value))
            if e > end:
                pieces.append((end, e, value))
        pieces.append((start, end, attrs))
        pieces.sort(key=lambda piece: piece[0])

        merged: list[tuple[int, int, Attrs]] = []
        for piece in pieces:
            if merged and merged[-1][1] == piece[0] and merged[-1][2] == piece[2]:
                merged[-1] = (merged[-1][0], piece[1], piece[2])
            else:
                merged.append(piece)
        self._spans = merged