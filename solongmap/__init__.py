"""Character, number, byte-buffer, linked-list, printf-style and line-reading helpers."""

__version__ = "0.1.0"