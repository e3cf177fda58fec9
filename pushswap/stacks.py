"""The two stacks of the puzzle and the eleven moves defined on them.

The top of each stack is the left end of its deque. Every move is
recorded in ``history``, including moves that leave the stacks
unchanged, such as swapping a stack that holds fewer than two items.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Any, Callable, Deque, Dict, Iterable, List, Optional, Tuple, Union


class Operation(Enum):
    """A move on the stacks, named by the instruction that denotes it."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: Deque[Any]) -> None:
    if len(stack) >= 2:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _rotate(stack: Deque[Any]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: Deque[Any]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


_EFFECTS: Dict[Operation, Tuple[Callable[[Deque[Any]], None], Tuple[str, ...]]] = {
    Operation.SA: (_swap, ("a",)),
    Operation.SB: (_swap, ("b",)),
    Operation.SS: (_swap, ("a", "b")),
    Operation.RA: (_rotate, ("a",)),
    Operation.RB: (_rotate, ("b",)),
    Operation.RR: (_rotate, ("a", "b")),
    Operation.RRA: (_reverse_rotate, ("a",)),
    Operation.RRB: (_reverse_rotate, ("b",)),
    Operation.RRR: (_reverse_rotate, ("a", "b")),
}


class Stacks:
    """Stack ``a`` and stack ``b``, with the moves made on them so far."""

    def __init__(
        self,
        a: Optional[Iterable[Any]] = None,
        b: Optional[Iterable[Any]] = None,
    ) -> None:
        self.a: Deque[Any] = deque(a or ())
        self.b: Deque[Any] = deque(b or ())
        self.history: List[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, op: Union[Operation, str]) -> None:
        """Perform ``op``, given as an Operation or its instruction name."""
        op = Operation(op)
        if op is Operation.PA:
            if self.b:
                self.a.appendleft(self.b.popleft())
        elif op is Operation.PB:
            if self.a:
                self.b.appendleft(self.a.popleft())
        else:
            effect, names = _EFFECTS[op]
            for name in names:
                effect(self.a if name == "a" else self.b)
        self.history.append(op)

    def sa(self) -> None:
        """Swap the top two items of ``a``."""
        self.apply(Operation.SA)

    def sb(self) -> None:
        """Swap the top two items of ``b``."""
        self.apply(Operation.SB)

    def ss(self) -> None:
        """Swap the top two items of both stacks."""
        self.apply(Operation.SS)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self.apply(Operation.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self.apply(Operation.PB)

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self.apply(Operation.RA)

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self.apply(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.apply(Operation.RR)

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self.apply(Operation.RRA)

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self.apply(Operation.RRB)

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.apply(Operation.RRR)