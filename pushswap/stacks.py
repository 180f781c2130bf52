"""The two stacks of the puzzle and the moves that act on them."""

from __future__ import annotations

from typing import Iterable, Optional, TextIO


class Stacks:
    """Stack ``a`` holding the values and an initially empty stack ``b``.

    Both stacks keep their top element at index 0. Every move that actually
    changes the stacks is appended to ``moves`` and, when a ``stream`` is
    given, written to it followed by a newline. A move that cannot apply
    does nothing and is not recorded.
    """

    def __init__(self, values: Iterable[int], stream: Optional[TextIO] = None) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.moves: list[str] = []
        self._stream = stream

    def _record(self, move: str) -> None:
        self.moves.append(move)
        if self._stream is not None:
            self._stream.write(move + "\n")

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if len(self.a) < 2:
            return
        self.a[0], self.a[1] = self.a[1], self.a[0]
        self._record("sa")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; the last element of ``a`` stays."""
        if len(self.a) < 2:
            return
        self.b.insert(0, self.a.pop(0))
        self._record("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: its top element becomes the bottom one."""
        if len(self.a) < 2:
            return
        self.a.append(self.a.pop(0))
        self._record("ra")

    def rra(self) -> None:
        """Rotate ``a`` down: its bottom element becomes the top one."""
        if len(self.a) < 2:
            return
        self.a.insert(0, self.a.pop())
        self._record("rra")

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` reads 0, 1, 2, ... from the top."""
        return not self.b and self.a == list(range(len(self.a)))

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"