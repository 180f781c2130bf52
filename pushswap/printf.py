"""A small formatted printer supporting %c %s %p %d %i %u %x %X and %%.

Integers follow 32-bit C conventions: ``%d`` and ``%i`` wrap to a signed
32-bit value, ``%u``, ``%x`` and ``%X`` to an unsigned one, and ``%p`` to an
unsigned 64-bit value. Any other character after ``%`` is not a conversion:
the ``%`` is written as it stands and the following character is then read
as ordinary text.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return value


def _signed32(value: Any) -> int:
    n = _as_int(value) & _MASK32
    return n - (1 << 32) if n & 0x80000000 else n


def _conv_c(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _conv_s(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _conv_p(value: Any) -> str:
    return "0x" + format(_as_int(value) & _MASK64, "x")


def _conv_d(value: Any) -> str:
    return str(_signed32(value))


def _conv_u(value: Any) -> str:
    return str(_as_int(value) & _MASK32)


def _conv_x(value: Any) -> str:
    return format(_as_int(value) & _MASK32, "x")


def _conv_upper_x(value: Any) -> str:
    return format(_as_int(value) & _MASK32, "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _conv_c,
    "s": _conv_s,
    "p": _conv_p,
    "d": _conv_d,
    "i": _conv_d,
    "u": _conv_u,
    "x": _conv_x,
    "X": _conv_upper_x,
}


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    i = 0
    length = len(fmt)
    while i < length:
        char = fmt[i]
        spec = fmt[i + 1] if i + 1 < length else ""
        if char == "%" and spec == "%":
            yield "%"
            i += 2
        elif char == "%" and spec in _CONVERSIONS:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for format {fmt!r}") from None
            yield _CONVERSIONS[spec](value)
            i += 2
        else:
            yield char
            i += 1


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)