"""Integer parsing and formatting with 32-bit signed limits."""

from __future__ import annotations

INT_MAX = 2147483647
INT_MIN_MAGNITUDE = 2147483648

_WHITESPACE = " \t\n\r\v\f"


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted; parsing
    stops at the first non-digit. A value outside the 32-bit signed range
    yields 0, as does text without digits.
    """
    i = 0
    length = len(text)
    while i < length and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    limit = INT_MAX if sign == 1 else INT_MIN_MAGNITUDE
    result = 0
    while i < length and "0" <= text[i] <= "9":
        result = result * 10 + (ord(text[i]) - ord("0"))
        if result > limit:
            return 0
        i += 1
    return sign * result


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading '-' when negative."""
    return str(int(n))