"""Bounded string copying, concatenation, searching and comparison."""

from __future__ import annotations

from itertools import zip_longest

_NUL = "\0"


def _as_char(c: str | int) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError("expected a single character")
        return c
    return chr(int(c) % 256)


def str_lcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def str_lcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create: the two
    lengths together when ``size`` exceeds ``dst``, else ``size`` plus the
    length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    room = max(0, size - len(dst) - 1)
    total = len(dst) + len(src) if size > len(dst) else len(src) + size
    return dst + src[:room], total


def str_chr(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``; the terminator is found at ``len(s)``."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def str_rchr(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``; the terminator is found at ``len(s)``."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def str_ncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; the code difference at the first mismatch.

    The end of a string counts as a character of code 0.
    """
    for x, y in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
        if x == _NUL:
            return 0
    return 0


def str_nstr(big: str, small: str, n: int) -> int | None:
    """Index of ``small`` within the first ``n`` characters of ``big``, or None.

    An empty ``small`` is found at 0.
    """
    if not small:
        return 0
    index = big[: max(0, n)].find(small)
    return None if index < 0 else index