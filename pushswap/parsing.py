"""Validation of command-line arguments and conversion to ranked values."""

from __future__ import annotations

from typing import Sequence

from .chars import is_digit
from .numeric import atoi
from .strings import split


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _is_sign(c: str) -> bool:
    return c in "+-"


def check_param(text: str) -> bool:
    """Check a single argument holding numbers separated by one space or tab."""
    length = len(text)
    if length < 1 or (not is_digit(text[0]) and not _is_sign(text[0])):
        return False
    if _is_sign(text[0]) and length < 2:
        return False
    i = 0
    while i < length:
        char = text[i]
        if _is_sign(char) and (i + 1 >= length or not is_digit(text[i + 1])):
            return False
        if not (_is_sign(char) or is_digit(char)):
            return False
        i += 1
        while i < length and is_digit(text[i]):
            i += 1
        if i < length and text[i] not in " \t":
            return False
        i += 1
    return True


def _is_signed_number(arg: str) -> bool:
    body = arg[1:] if arg[:1] in ("+", "-") else arg
    if arg and not body:
        return False
    return all(is_digit(c) for c in body)


def check_params(args: Sequence[str]) -> bool:
    """Check the arguments that follow the program name.

    A single argument may hold several numbers; otherwise each argument
    must be one optionally signed number.
    """
    if len(args) == 1:
        return check_param(args[0])
    return all(_is_signed_number(arg) for arg in args)


def _tokens(args: Sequence[str]) -> list[str]:
    if len(args) == 1:
        return split(args[0], " ")
    return list(args)


def rank(values: Sequence[int]) -> list[int]:
    """Replace each value by its position in sorted order, from 0.

    The first occurrence of the largest value takes the highest rank; the
    rest are ranked by value, earlier occurrences first.
    """
    if not values:
        return []
    top = max(range(len(values)), key=lambda i: (values[i], -i))
    ranks = [0] * len(values)
    ranks[top] = len(values) - 1
    rest = sorted((i for i in range(len(values)) if i != top), key=lambda i: (values[i], i))
    for position, index in enumerate(rest):
        ranks[index] = position
    return ranks


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate the arguments and return their values as ranks 0 to n-1.

    Raises InputError on malformed numbers, values outside the 32-bit
    signed range, repeated arguments, or no numbers at all.
    """
    if not check_params(args):
        raise InputError()
    tokens = _tokens(args)
    values = []
    for token in tokens:
        value = atoi(token)
        if value == 0 and not token.startswith("0"):
            raise InputError()
        values.append(value)
    if len(set(tokens)) != len(tokens):
        raise InputError()
    if not tokens:
        raise InputError()
    return rank(values)