"""Sorting strategies that solve the puzzle with stack moves.

The stacks hold ranks (0 for the smallest value, and so on) rather than
the raw values. Each strategy records its moves in ``stacks.history``.
"""

from __future__ import annotations

from typing import List, Sequence

from pushswap.parsing import has_duplicate, index_values, is_sorted
from pushswap.stacks import Operation, Stacks


def _max_bits(size: int) -> int:
    """Smallest number of bits whose range covers ``size`` ranks."""
    bits = 0
    while (1 << bits) < size:
        bits += 1
    return bits


def sort_two(stacks: Stacks) -> None:
    """Order the two items of ``a`` with at most one swap."""
    first, second = stacks.a[0], stacks.a[1]
    if first > second:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Order the three items of ``a`` with at most two moves."""
    a, b, c = stacks.a[0], stacks.a[1], stacks.a[2]
    if a > b and b < c and a < c:
        stacks.sa()
    elif a > b and b > c:
        stacks.sa()
        stacks.rra()
    elif a > b and b < c and a > c:
        stacks.ra()
    elif a < b and b > c and a < c:
        stacks.rra()
        stacks.sa()
    elif a < b and b > c and a > c:
        stacks.rra()


def _min_position(stacks: Stacks) -> int:
    """Position from the top of the smallest item of ``a``; first one wins."""
    return min(range(len(stacks.a)), key=lambda pos: stacks.a[pos])


def _push_min_to_b(stacks: Stacks, size: int) -> None:
    pos = _min_position(stacks)
    if pos <= size // 2:
        for _ in range(pos):
            stacks.ra()
    else:
        for _ in range(size - pos):
            stacks.rra()
    stacks.pb()


def sort_five(stacks: Stacks, size: int) -> None:
    """Sort four or five items: park the smallest on ``b``, sort three, bring back."""
    for _ in range(size - 3):
        _push_min_to_b(stacks, size)
        size -= 1
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Binary LSD radix sort of the ranks in ``a``, using ``b`` as the zero bucket."""
    size = len(stacks.a)
    for bit in range(_max_bits(size)):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def sort_stack(stacks: Stacks, size: int) -> None:
    """Choose the strategy for ``size`` items and apply it."""
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks, size)
    else:
        radix_sort(stacks)


def solve(values: Sequence[int]) -> List[Operation]:
    """The moves that sort ``values`` into ascending order on stack ``a``."""
    if has_duplicate(values):
        raise ValueError("values must be distinct")
    stacks = Stacks(index_values(values))
    if not is_sorted(list(values)):
        sort_stack(stacks, len(values))
    return stacks.history