"""A buffer of text lines with metrics, size, wrapping and scroll state."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from richtextbuf.attrs import Attrs, AttrsList
from richtextbuf.bidi_para import bidi_paragraphs
from richtextbuf.buffer_line import BufferLine, Shaping, Wrap
from richtextbuf.cursor import Metrics

_I32_MAX = 2**31 - 1


def _paragraph_ranges(text: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) offsets of each paragraph of text."""
    start = 0
    for paragraph in bidi_paragraphs(text):
        end = start + len(paragraph)
        yield start, end
        # Each paragraph but possibly the last is followed by one separator.
        start = end + 1


class Buffer:
    """Lines of text together with the settings they are laid out with."""

    def __init__(self, metrics: Metrics) -> None:
        if metrics.line_height == 0.0:
            raise ValueError("line height cannot be 0")
        self.lines: list[BufferLine] = []
        self._metrics = metrics
        self._width = 0.0
        self._height = 0.0
        self._scroll = 0
        self._redraw = False
        self._wrap = Wrap.WORD

    def __repr__(self) -> str:
        return (
            f"Buffer(lines={len(self.lines)}, metrics={self._metrics}, "
            f"size={self.size()}, scroll={self._scroll}, wrap={self._wrap})"
        )

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    @property
    def wrap(self) -> Wrap:
        return self._wrap

    @property
    def scroll(self) -> int:
        return self._scroll

    @property
    def redraw(self) -> bool:
        """True if a redraw is needed."""
        return self._redraw

    def _relayout(self) -> None:
        for line in self.lines:
            if line.shape_opt is not None:
                line.reset_layout()
        self._redraw = True

    def set_metrics(self, metrics: Metrics) -> None:
        """Change font size and line height; a zero font size is rejected."""
        if metrics != self._metrics:
            if metrics.font_size == 0.0:
                raise ValueError("font size cannot be 0")
            self._metrics = metrics
            self._relayout()

    def set_wrap(self, wrap: Wrap) -> None:
        if wrap != self._wrap:
            self._wrap = wrap
            self._relayout()

    def size(self) -> tuple[float, float]:
        """The buffer dimensions as (width, height)."""
        return (self._width, self._height)

    def set_size(self, width: float, height: float) -> None:
        """Set the dimensions; negative values are clamped to zero."""
        width = max(float(width), 0.0)
        height = max(float(height), 0.0)
        if width != self._width or height != self._height:
            self._width = width
            self._height = height
            self._relayout()

    def set_scroll(self, scroll: int) -> None:
        if scroll != self._scroll:
            self._scroll = scroll
            self._redraw = True

    def visible_lines(self) -> int:
        """How many lines fit in the buffer's height."""
        line_height = self._metrics.line_height
        if line_height == 0.0:
            return 0 if self._height == 0.0 else _I32_MAX
        return min(int(self._height / line_height), _I32_MAX)

    def set_text(self, text: str, attrs: Attrs, shaping: Shaping) -> None:
        """Replace the contents with text, all in the given attributes."""
        self.set_rich_text([(text, attrs)], shaping)

    def set_rich_text(
        self, spans: Iterable[tuple[str, Attrs]], shaping: Shaping
    ) -> None:
        """Replace the contents with styled spans of (text, attrs)."""
        self.lines.clear()

        pieces: list[str] = []
        span_data: list[tuple[Attrs, int, int]] = []
        end = 0
        for text, attrs in spans:
            start = end
            end += len(text)
            pieces.append(text)
            span_data.append((attrs, start, end))
        string = "".join(pieces)

        spans_iter = iter(span_data)
        lines_iter = _paragraph_ranges(string)
        span = next(spans_iter, None)
        line = next(lines_iter, None)

        attrs_list = AttrsList(Attrs())
        line_string = ""

        while True:
            if line is None or span is None:
                # Only reached when the text is empty.
                self.lines.append(BufferLine("", AttrsList(Attrs()), shaping))
                break

            line_start, line_end = line
            attrs, span_start, span_end = span

            start = max(line_start, span_start)
            stop = min(line_end, span_end)
            if start < stop:
                text_start = len(line_string)
                line_string += string[start:stop]
                attrs_list.add_span(text_start, len(line_string), attrs)

            if span_end < line_end:
                span = next(spans_iter, None)
                continue

            line = next(lines_iter, None)
            self.lines.append(BufferLine(line_string, attrs_list, shaping))
            if line is None:
                break
            attrs_list = AttrsList(Attrs())
            line_string = ""

        self._scroll = 0
        self._redraw = True

    def set_redraw(self, redraw: bool) -> None:
        self._redraw = redraw