"""A small printf supporting the conversions c, s, d, i, u, x, X, p and %.

Integers are reduced to the width of the C types the conversions stand for:
d and i use a signed 32-bit int, u, x and X an unsigned 32-bit int, and p an
unsigned 64-bit address. A conversion letter outside that set is written as
it stands and takes no argument.
"""

from __future__ import annotations

import sys
from typing import Any

_TAKES_ARGUMENT = frozenset("csdiuxXp")
_INT_BITS = 32
_POINTER_BITS = 64


def _as_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return int(value)


def _signed32(n: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return ((n + half) % (1 << _INT_BITS)) - half


def _unsigned(n: int, bits: int) -> int:
    return n & ((1 << bits) - 1)


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {len(value)}")
        return value
    return chr(_unsigned(_as_int(value, "c"), 8))


def to_hex(n: int, spec: str = "x") -> str:
    """Hexadecimal digits of a non-negative n, lower case for 'x', upper for 'X'."""
    if spec not in ("x", "X"):
        raise ValueError(f"hex conversion must be 'x' or 'X', not {spec!r}")
    n = _as_int(n, spec)
    if n < 0:
        raise ValueError("to_hex expects a non-negative number")
    return format(n, spec)


def format_pointer(ptr: int) -> str:
    """Render an address as 0x followed by hex digits; a null address is (nil)."""
    address = _unsigned(_as_int(ptr, "p"), _POINTER_BITS)
    if address == 0:
        return "(nil)"
    return "0x" + to_hex(address, "x")


def format_conversion(spec: str, value: Any = None) -> str:
    """Render one conversion given its letter and, where it takes one, its argument."""
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return str(_signed32(_as_int(value, spec)))
    if spec == "u":
        return str(_unsigned(_as_int(value, spec), _INT_BITS))
    if spec in ("x", "X"):
        return to_hex(_unsigned(_as_int(value, spec), _INT_BITS), spec)
    if spec == "p":
        return format_pointer(value)
    if spec == "%":
        return "%"
    return spec


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text printf would write for fmt and args.

    Surplus arguments are ignored. Too few arguments, or a format ending in a
    lone '%', raise ValueError.
    """
    parts: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        value = None
        if spec in _TAKES_ARGUMENT:
            try:
                value = next(remaining)
            except StopIteration:
                raise ValueError(f"no argument left for %{spec}") from None
        parts.append(format_conversion(spec, value))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)