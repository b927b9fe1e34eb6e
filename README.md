# richtextbuf

A small, dependency-free library for holding rich text: lines of text with
attribute spans, paragraph splitting, cursors, text metrics, and a buffer
that keeps size, wrap and scroll settings for its lines.

## Installation

```
pip install richtextbuf
```

To run the tests:

```
pip install "richtextbuf[test]"
pytest
```

## Modules

- `richtextbuf.attrs`: `Color` (packed ARGB with `rgb`, `rgba`, `r`, `g`,
  `b`, `a`, `as_rgba`, `as_rgba_tuple`), `Family` (generic families such as
  `Family.MONOSPACE`, or `Family.named(name)`), `Weight`, `Style`,
  `Stretch`, `FaceInfo`, `Attrs` (immutable attributes with `with_color`,
  `with_family`, `with_weight`, `with_style`, `with_stretch`,
  `with_metadata`, plus `matches` and `compatible`) and `AttrsList`
  (default attributes plus non-overlapping spans; `add_span`, `get_span`,
  `spans`, `clear_spans`, `split_off`).
- `richtextbuf.bidi_para`: `bidi_paragraphs(text)` yields paragraphs,
  ending one at every character of bidi class B (`\n`, `\r`,
  `\x1c`–`\x1e`, `\x85`, `\u2029`) and dropping that character. Each
  separator ends a paragraph on its own, so `"\r\n"` yields an empty
  paragraph between `\r` and `\n`. A separator at the very end does not
  start a further empty paragraph.
- `richtextbuf.cache`: `SubpixelBin.from_position(pos)` splits a position
  into a whole pixel and a quarter-pixel bin; `CacheKey.new(font_id,
  glyph_id, font_size, pos)` builds a glyph cache key and returns it with
  the whole-pixel x and y.
- `richtextbuf.buffer_line`: `BufferLine` with its `Wrap`, `Align` and
  `Shaping` settings. Lines can be appended to each other and split at an
  index; changes that invalidate them clear the `shape_opt` and
  `layout_opt` caches.
- `richtextbuf.cursor`: `Cursor`, `Affinity`, `LayoutCursor` and `Metrics`
  (`str(Metrics(14.0, 20.0))` is `"14px / 20px"`).
- `richtextbuf.buffer`: `Buffer`, a list of `BufferLine`s with metrics,
  size, wrap, scroll and a redraw flag. `set_text` and `set_rich_text`
  split text into lines by paragraph and turn styled spans into each line's
  `AttrsList`.

Span offsets in `AttrsList` are character offsets into the line's text, and
ranges are half-open. Adding a span replaces whatever covered that range,
and touching spans with equal attributes are merged.

## Example

```python
from richtextbuf.attrs import Attrs, Color, Weight
from richtextbuf.buffer import Buffer
from richtextbuf.buffer_line import Shaping
from richtextbuf.cursor import Metrics

buffer = Buffer(Metrics(14.0, 20.0))
buffer.set_size(400.0, 300.0)

plain = Attrs()
bold = plain.with_weight(Weight.BOLD)
red = plain.with_color(Color.rgb(0xFF, 0x00, 0x00))

buffer.set_rich_text(
    [("Hello, ", plain), ("bold\n", bold), ("red text", red)],
    Shaping.ADVANCED,
)

for line in buffer.lines:
    print(line.text, line.attrs_list.spans())

print(buffer.visible_lines())  # 15
```

## What it does not do

The package does not load fonts, shape glyphs, lay out or wrap lines into
glyph runs, hit-test positions or draw anything. `Wrap`, `Align` and
`Shaping` are stored settings, and `BufferLine.shape_opt` and
`BufferLine.layout_opt` are caches that this package only clears; filling
them is left to the caller.