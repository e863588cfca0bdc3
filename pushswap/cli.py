"""Command-line entry point: read numbers, show the stack, print the moves."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.printf import format_string
from pushswap.sorting import SortError, solve

ERROR_MESSAGE = "\x1b[0;31mError\x1b[0m\n"


def format_stack(values: Iterable[int]) -> str:
    """Render the starting stack, one ``node[0]<value>`` line per value.

    The node label is 0 on every line.
    """
    position = 0
    return "".join(format_string("node[%i]%d\n", position, value) for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on ``argv`` (defaults to the process arguments).

    Returns the exit status: 0 on success or with no arguments, 1 on bad input.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    out = sys.stdout
    try:
        values = parse_arguments(args)
    except InputError:
        out.write(ERROR_MESSAGE)
        return 1
    out.write(format_stack(values))
    try:
        solve(values, out)
    except SortError:
        out.write(ERROR_MESSAGE)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())