"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) % 256)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _signed(value: Any) -> str:
    number = int(value) & _UINT_MASK
    if number >= 2**31:
        number -= 2**32
    return str(number)


def _unsigned(value: Any) -> str:
    return str(int(value) & _UINT_MASK)


def _hex_lower(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "x")


def _hex_upper(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "X")


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value)
    return "0x" + format(address & _POINTER_MASK, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``; unknown conversions produce nothing."""
    pending = iter(args)
    chars = iter(fmt)
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            parts.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            parts.append(convert(_next_arg(pending)))
    return "".join(parts)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the expanded format to ``file`` (stdout by default); return its length."""
    text = format_string(fmt, *args)
    stream = file if file is not None else sys.stdout
    stream.write(text)
    return len(text)