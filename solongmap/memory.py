"""Byte-buffer helpers and size-bounded string copying and concatenation."""

from __future__ import annotations

from typing import Optional, TypeVar, Union

BytesLike = Union[bytes, bytearray, memoryview]
S = TypeVar("S", str, bytes)


def _check_span(n: int, available: int, what: str) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > available:
        raise ValueError(f"{what} holds {available} bytes, {n} requested")


def mem_set(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of value."""
    _check_span(n, len(buffer), "buffer")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first n bytes of buffer."""
    mem_set(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_chr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of value in data[:n], or None."""
    _check_span(n, len(data), "data")
    target = value & 0xFF
    return next((i for i, byte in enumerate(data[:n]) if byte == target), None)


def mem_cmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Difference of the first differing bytes within n, or 0 if they match."""
    _check_span(n, min(len(a), len(b)), "input")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def mem_copy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy n bytes from src to the start of dest."""
    _check_span(n, len(src), "source")
    _check_span(n, len(dest), "destination")
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move n bytes inside buffer from src_offset to dest_offset; overlap is safe."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_span(n, len(buffer) - max(dest_offset, src_offset), "buffer")
    buffer[dest_offset : dest_offset + n] = bytes(buffer[src_offset : src_offset + n])
    return buffer


def str_lcpy(src: S, size: int) -> tuple[S, int]:
    """Copy src into a destination of size units, terminator included.

    Returns the copied text (at most size - 1 long) and the full length of src.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size > 0 else src[:0]
    return copied, len(src)


def str_lcat(dst: S, src: S, size: int) -> tuple[S, int]:
    """Append src to dst within a destination of size units, terminator included.

    Returns the resulting text and the length that was tried for: the length
    of dst (capped at size) plus the length of src.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = min(len(dst), size)
    result = dst
    if size > 0 and dst_len < size - 1:
        result = dst + src[: size - 1 - dst_len]
    return result, dst_len + len(src)