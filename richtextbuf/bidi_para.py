"""Split text into paragraphs the way the bidirectional algorithm does."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator


def bidi_paragraphs(text: str) -> Iterator[str]:
    """Yield each paragraph of text without its trailing paragraph separator.

    Every character of bidi class B (newlines, U+2029 and the like) ends a
    paragraph. A separator at the very end of the text does not start a
    further, empty paragraph.
    """
    start = 0
    for i, char in enumerate(text):
        if unicodedata.bidirectional(char) == "B":
            yield text[start:i]
            start = i + 1
    if start < len(text):
        yield text[start:]