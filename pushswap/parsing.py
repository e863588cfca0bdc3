"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

from typing import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = " \t\n\v\f\r"
_DIGITS = "0123456789"


class InputError(ValueError):
    """The arguments are not a list of distinct integers in range."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_long(text: str) -> int:
    """Read a leading integer: skip blanks, take one sign, then digits.

    Reading stops at the first non-digit; no digits gives 0.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def is_number(text: str) -> bool:
    """True when ``text`` is an optional sign followed by one or more digits."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return bool(body) and all(ch in _DIGITS for ch in body)


def has_duplicates(args: Iterable[str]) -> bool:
    """True when two arguments read as the same integer."""
    seen: set[int] = set()
    for arg in args:
        value = parse_long(arg)
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the arguments into integers, raising InputError on bad input."""
    values = []
    for arg in args:
        if not is_number(arg):
            raise InputError()
        value = parse_long(arg)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError()
        values.append(value)
    if has_duplicates(args):
        raise InputError()
    return values