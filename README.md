# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a small set of
operations. Every operation used is printed, one per line:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate: the bottom element comes to the top |

Two to five numbers are sorted with fixed move sequences. Six or more use a
binary radix sort on the rank of each value. Input that is already sorted
produces no operations.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
```

The arguments are the starting contents of stack `a`, top first. Each
argument must be a whole number with an optional `+` or `-` sign, within the
32-bit signed range, and no value may appear twice. If any argument breaks
these rules, `Error` (coloured red with terminal escape codes) is written to
standard output and the exit status is 1. With no arguments the command does
nothing and exits with status 0.

Before the operations, the starting stack is listed one value per line in the
form `node[0]<value>`.

The same entry point is available as `pushswap.cli.main(argv)`, which returns
the exit status instead of exiting.

## Library

```python
import io
from pushswap.sorting import solve

out = io.StringIO()
stacks = solve([3, 2, 1], out)
print(out.getvalue())   # "sa\nrra\n"
print(stacks.moves)     # ['sa', 'rra']
```

- `pushswap.stacks.Stacks(values, out)` holds the two stacks (`a` and `b`,
  top at index 0) and has one method per operation. Each method changes the
  stacks, writes the operation name to `out` (standard output when `out` is
  `None`) and appends it to `moves`.
- `pushswap.sorting` has `solve`, the individual strategies (`sort_two`,
  `sort_three`, `sort_four`, `sort_five`, `radix_sort`, `put_min_on_top`)
  and helpers `is_sorted`, `min_position`, `rank` and `sort3_case`.
  `sort_two` and `sort_three` raise `SortError` when handed a stack that is
  not an unsorted stack of their size.
- `pushswap.parsing.parse_arguments` checks and converts command-line
  arguments and raises `InputError` when they are invalid; `parse_long`,
  `is_number` and `has_duplicates` are the checks it is built from.

Smaller helper modules are also included:

- `pushswap.printf`: `format_string` and `printf` for the conversions
  `%c %s %d %i %u %x %X %p` and `%%`.
- `pushswap.chars`: ASCII classification and case conversion
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`).
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` writing
  to a text stream.
- `pushswap.memory`: byte-buffer operations (`mem_set`, `bzero`, `calloc`,
  `mem_copy`, `mem_move`, `mem_chr`, `mem_cmp`).
- `pushswap.cstrings`: bounded string operations (`str_lcpy`, `str_lcat`,
  `str_chr`, `str_rchr`, `str_ncmp`, `str_nstr`).
- `pushswap.text`: `substr`, `strjoin`, `strtrim`, `strmapi`, `striteri`,
  `split`, `itoa`.

## What it does not do

There is no checker: the package prints a sequence of operations but has no
command that reads operations back and verifies that they sort the input.

## Tests

```
pip install ".[test]"
pytest
```