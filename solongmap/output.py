"""Writing characters, text and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from solongmap.numbers import itoa


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a one-character string or a code."""
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string")
    if isinstance(c, int):
        c = chr(c & 0xFF)
    elif not isinstance(c, str):
        raise TypeError("expected a character code or a one-character string")
    elif len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)}")
    _stream(stream).write(c)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s; None writes nothing."""
    if s is not None:
        _stream(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s followed by a newline; None writes nothing at all."""
    if s is not None:
        _stream(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of n."""
    _stream(stream).write(itoa(n))