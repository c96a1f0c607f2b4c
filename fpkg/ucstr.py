"""Helpers for NUL-terminated byte strings."""

from __future__ import annotations

from typing import Union

StrLike = Union[str, bytes, bytearray, memoryview]


def _as_bytes(s: StrLike) -> bytes:
    if isinstance(s, str):
        return s.encode("utf-8")
    return bytes(s)


def _cstr(s: StrLike) -> bytes:
    """Return the bytes of ``s`` up to, not including, the first NUL."""
    return _as_bytes(s).split(b"\0", 1)[0]


def ucstrcmp(s1: StrLike, s2: StrLike) -> int:
    """Compare two strings byte-wise; return -1, 0 or 1."""
    a, b = _cstr(s1), _cstr(s2)
    return (a > b) - (a < b)


def ucnstrlen(s: StrLike) -> int:
    """Return the length of ``s`` counting its NUL terminator."""
    return len(_cstr(s)) + 1


def ucstrcpy(src: StrLike, dest_len: int) -> bytes:
    """Return what fits of ``src`` in a buffer of ``dest_len`` bytes with its terminator."""
    if dest_len < 1:
        raise ValueError("destination length must be at least 1")
    return _cstr(src)[: dest_len - 1]