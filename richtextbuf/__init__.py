"""Rich text lines with attribute spans, paragraph splitting, cursors, metrics and cache keys."""

__version__ = "0.1.0"
__all__ = ["attrs", "bidi_para", "cache", "buffer_line", "cursor", "buffer"]