"""Command-line entry point: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import InputError, parse_arguments
from .solver import solve


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorter on ``argv`` (the arguments after the program name).

    Invalid input writes ``Error`` to standard error. The exit status is 0
    in every case.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] == "":
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    moves = solve(values)
    if moves:
        sys.stdout.write("".join(move + "\n" for move in moves))
    return 0