"""Command line entry point: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from pushswap.parsing import ParseError, has_duplicate, parse_args, parse_argv
from pushswap.sort import solve


def _read_values(args: Sequence[str]) -> List[int]:
    if len(args) == 1:
        return parse_args(args[0])
    return parse_argv(args)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the integers in ``argv`` and print one move per line.

    Returns 0 on success and 1 after printing ``Error`` to standard error
    when the input is invalid, empty or holds duplicates.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = _read_values(args)
    except ParseError:
        values = []
    if not values or has_duplicate(values):
        sys.stderr.write("Error\n")
        return 1
    for op in solve(values):
        sys.stdout.write(f"{op}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())