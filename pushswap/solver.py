"""Sorting strategies that drive the stack moves.

Small inputs of up to five values get fixed move sequences. Larger inputs
are sorted by a binary radix pass over the ranks. Every strategy expects
stack ``a`` to hold the ranks 0 to n-1 in some order.
"""

from __future__ import annotations

from typing import Sequence

from .stacks import Stacks


def _shift(stacks: Stacks, delta: int) -> None:
    stacks.a[:] = [value + delta for value in stacks.a]


def brute_three(stacks: Stacks) -> None:
    """Sort the three values 0, 1, 2 that sit at the top of ``a``."""
    top = tuple(stacks.a[:3])
    if top == (1, 0, 2):
        stacks.sa()
    elif top == (0, 2, 1):
        stacks.rra()
        stacks.sa()
    elif top == (2, 0, 1):
        stacks.ra()
    elif top == (1, 2, 0):
        stacks.rra()
    elif top == (2, 1, 0):
        stacks.ra()
        stacks.sa()


def _brute_four_easy(stacks: Stacks) -> bool:
    top = tuple(stacks.a[:4])
    if top == (1, 0, 2, 3):
        stacks.sa()
    elif top == (1, 2, 3, 0):
        stacks.rra()
    elif top == (3, 0, 1, 2):
        stacks.ra()
    else:
        return False
    return True


def brute_four(stacks: Stacks) -> None:
    """Sort the four values 0 to 3 held in ``a``."""
    if _brute_four_easy(stacks):
        return
    a = stacks.a
    if a[1] == 0:
        stacks.ra()
    elif a[2] == 0:
        stacks.ra()
        stacks.ra()
    elif a[3] == 0:
        stacks.rra()
    stacks.pb()
    _shift(stacks, -1)
    brute_three(stacks)
    _shift(stacks, 1)
    stacks.pa()


def brute_five(stacks: Stacks) -> None:
    """Sort the five values 0 to 4 held in ``a``."""
    a = stacks.a
    if a[4] == 0:
        stacks.rra()
    elif a[3] == 0:
        stacks.rra()
        stacks.rra()
    else:
        while stacks.a[0] != 0:
            stacks.ra()
    stacks.pb()
    _shift(stacks, -1)
    brute_four(stacks)
    _shift(stacks, 1)
    stacks.pa()


def brute_sort(stacks: Stacks) -> None:
    """Sort a stack of two to five ranks with fixed move sequences."""
    if stacks.is_sorted():
        return
    size = len(stacks.a)
    if size == 2:
        stacks.ra()
    elif size == 3:
        brute_three(stacks)
    elif size == 4:
        brute_four(stacks)
    else:
        brute_five(stacks)


def radix_sort(stacks: Stacks) -> None:
    """Sort the ranks in ``a`` one bit at a time, lowest bit first."""
    total = len(stacks.a) + len(stacks.b)
    bit = 0
    while not stacks.is_sorted():
        for _ in range(total):
            if not (stacks.a[0] >> bit) & 1:
                stacks.pb()
            elif len(stacks.a) < 2:
                break
            else:
                stacks.ra()
        while stacks.b:
            stacks.pa()
        bit += 1


def solve(values: Sequence[int]) -> list[str]:
    """Return the moves that sort the ranks ``values`` into ascending order."""
    stacks = Stacks(values)
    if len(stacks.a) > 5:
        radix_sort(stacks)
    elif len(stacks.a) > 1:
        brute_sort(stacks)
    return stacks.moves