"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, TextIO


class Stacks:
    """Stacks ``a`` and ``b``, top of each at index 0.

    Every move that takes effect writes its name and a newline to ``out``
    and is recorded in ``moves``.
    """

    def __init__(self, values: Iterable[int] = (), out: TextIO | None = None) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.out = out
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _emit(self, name: str) -> None:
        stream = self.out if self.out is not None else sys.stdout
        stream.write(f"{name}\n")
        self.moves.append(name)

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack.rotate(1)

    def sa(self) -> None:
        """Swap the top two of ``a``; nothing happens when ``a`` is empty."""
        if not self.a:
            return
        self._swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the top two of ``b``; nothing happens when ``b`` is empty."""
        if not self.b:
            return
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the top two of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens when ``b`` is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens when ``a`` is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._emit("rrr")