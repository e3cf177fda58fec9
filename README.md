# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of stack operations, and prints the operations it performs, one per line.

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

An operation that cannot change a stack (swapping or rotating fewer than two
elements, pushing from an empty stack) does nothing.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments, or as one argument separated by spaces:

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
```

The first value given is the top of stack `a`. With no arguments, or with input
that is already sorted, nothing is printed. Two and three values get short fixed
sequences; four or five values are sorted by moving the smallest ones to `b`,
sorting the remaining three and pushing them back; larger inputs are sorted with
a binary radix sort on the values' ranks.

If an argument is not an integer (an optional `+` or `-` followed by digits),
lies outside the 32-bit signed range, or a value appears twice, the command
writes `Error` to standard error and exits with status 1.

## Library use

```python
from pushswap.sort import solve
from pushswap.stacks import Operation, Stacks

moves = solve([3, 2, 1])        # [Operation.SA, Operation.RRA]
print(" ".join(map(str, moves)))  # "sa rra"

stacks = Stacks([2, 1, 3])
stacks.sa()
stacks.apply("pb")              # an Operation or its name
print(stacks)                   # Stacks(a=[2, 3], b=[1])
print(stacks.history)           # [Operation.SA, Operation.PB]
```

- `pushswap.sort`: `solve(values)` returns the list of moves and raises
  `ValueError` for repeated values; the strategies `sort_two`, `sort_three`,
  `sort_five`, `radix_sort` and `sort_stack` work on a `Stacks` holding ranks.
- `pushswap.stacks`: the `Operation` enum and the `Stacks` class, with one
  method per operation and `apply(op)`.
- `pushswap.parsing`: `parse_args`, `parse_argv`, `is_number`,
  `has_duplicate`, `is_sorted` and `index_values`. Malformed input raises
  `ParseError`, a subclass of `ValueError`.
- `pushswap.cli`: `main(argv=None)`, the command above; it returns the exit
  status.

The package also carries small general helpers: `pushswap.chars` (ASCII
character classes and case conversion), `pushswap.strings` and
`pushswap.transform` (NUL-terminated string handling, splitting, trimming,
`atoi`/`itoa` on 32-bit integers), `pushswap.memory` (byte-buffer operations on
`bytearray`), `pushswap.linkedlist` (`LinkedList` and `ListNode`) and
`pushswap.output` (writing characters, strings and integers to a stream).

## What it does not do

There is no command that reads a list of moves and checks whether they sort a
given input. `Stacks.apply` accepts operation names, so such a check can be
written with the library, but none is provided.

## Tests

```
pip install ".[test]"
pytest
```