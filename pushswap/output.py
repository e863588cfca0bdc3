"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _stream(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character; an integer is taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError("expected a single character")
        ch = c
    else:
        ch = chr(int(c) % 256)
    _stream(stream).write(ch)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string as is."""
    _stream(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    target = _stream(stream)
    target.write(s)
    target.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal, with a leading minus when negative."""
    _stream(stream).write(str(int(n)))