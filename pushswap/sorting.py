"""Sorting strategies that drive the stack moves: small cases and radix."""

from __future__ import annotations

from bisect import bisect_left
from itertools import pairwise
from typing import Callable, Iterable, Sequence, TextIO

from pushswap.stacks import Stacks


class SortError(ValueError):
    """A small-case sorter was handed a stack it cannot handle."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


_THREE_MOVES: dict[int, tuple[Callable[[Stacks], None], ...]] = {
    1: (Stacks.sa,),
    2: (Stacks.sa, Stacks.rra),
    3: (Stacks.sa, Stacks.ra),
    4: (Stacks.rra,),
    5: (Stacks.ra,),
}


def is_sorted(values: Iterable[int]) -> bool:
    """True when no value is greater than the one after it."""
    return all(left <= right for left, right in pairwise(values))


def min_position(values: Sequence[int]) -> int:
    """Position of the first occurrence of the smallest value."""
    items = list(values)
    if not items:
        raise ValueError("empty stack has no minimum")
    return min(range(len(items)), key=items.__getitem__)


def rank(values: Iterable[int]) -> list[int]:
    """For each value, how many values in the sequence are smaller."""
    items = list(values)
    ordered = sorted(items)
    return [bisect_left(ordered, value) for value in items]


def sort3_case(values: Sequence[int]) -> int:
    """Classify the order of three values into cases 1 to 5.

    Compares the first, second and last values.
    """
    items = list(values)
    if len(items) < 2:
        raise ValueError("need at least two values")
    first, middle, last = items[0], items[1], items[-1]
    if first < last:
        return 1 if middle < last else 3
    if middle > last and middle < first:
        return 2
    if middle > last and middle > first:
        return 4
    return 5


def put_min_on_top(stacks: Stacks) -> None:
    """Bring the smallest value of ``a`` to its top by the shorter rotation."""
    position = min_position(stacks.a)
    up = position
    down = len(stacks.a) - position
    if up <= down:
        for _ in range(up):
            stacks.ra()
    else:
        for _ in range(down):
            stacks.rra()


def sort_two(stacks: Stacks) -> None:
    """Sort an unsorted ``a`` of two values; anything else is an error."""
    if len(stacks.a) == 2 and not is_sorted(stacks.a):
        stacks.sa()
    else:
        raise SortError()


def sort_three(stacks: Stacks) -> None:
    """Sort an unsorted ``a`` of three values; anything else is an error."""
    if len(stacks.a) != 3 or is_sorted(stacks.a):
        raise SortError()
    for move in _THREE_MOVES[sort3_case(stacks.a)]:
        move(stacks)


def sort_four(stacks: Stacks) -> None:
    """Sort an unsorted ``a`` of four values; otherwise do nothing."""
    if len(stacks.a) != 4 or is_sorted(stacks.a):
        return
    put_min_on_top(stacks)
    if is_sorted(stacks.a):
        return
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort an unsorted ``a`` of five values; otherwise do nothing."""
    if len(stacks.a) != 5 or is_sorted(stacks.a):
        return
    put_min_on_top(stacks)
    stacks.pb()
    sort_four(stacks)
    stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Sort ``a`` by the binary digits of each value's rank, using ``b``."""
    if not stacks.a:
        return
    ranks = dict(zip(stacks.a, rank(stacks.a)))
    size = len(stacks.a)
    max_bits = max(ranks.values()).bit_length()
    for bit in range(max_bits):
        for _ in range(size):
            if (ranks[stacks.a[0]] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def solve(values: Iterable[int], out: TextIO | None = None) -> Stacks:
    """Sort ``values`` on a fresh pair of stacks, writing each move to ``out``."""
    stacks = Stacks(values, out)
    if is_sorted(stacks.a):
        return stacks
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)
    return stacks