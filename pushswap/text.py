"""String building helpers: slicing, joining, trimming, mapping, splitting."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError("expected a single character")
    return c


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``.

    A ``start`` at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(a: str, b: str) -> str:
    """``a`` followed by ``b`` as a new string."""
    if not isinstance(a, str) or not isinstance(b, str):
        raise TypeError("both arguments must be strings")
    return a + b


def strtrim(s: str, charset: str) -> str:
    """``s`` without the characters of ``charset`` at either end.

    An empty ``charset`` leaves ``s`` unchanged.
    """
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("both arguments must be strings")
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for each character of ``s``."""
    return "".join(_single_char(f(index, ch)) for index, ch in enumerate(s))


def striteri(
    s: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``f(index, char)`` on each item of ``s`` in place.

    When ``f`` returns a character it replaces the item; ``None`` leaves it.
    Nothing happens when either argument is None.
    """
    if s is None or f is None:
        return
    for index in range(len(s)):
        replacement = f(index, s[index])
        if replacement is not None:
            s[index] = _single_char(replacement)


def split(s: str, sep: str) -> list[str]:
    """The non-empty runs of ``s`` between occurrences of ``sep``."""
    _single_char(sep)
    return [word for word in s.split(sep) if word]


def itoa(n: int) -> str:
    """Decimal text of ``n``, with a leading minus when negative."""
    return str(int(n))