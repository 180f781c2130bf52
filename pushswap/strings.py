"""String helpers: splitting, searching, comparing, trimming and bounded copies.

Character searches treat the end of a string as a terminating NUL, so that
looking for ``"\\0"`` finds the position just past the last character.
The bounded copy functions work on NUL-terminated byte buffers.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

Buffer = Union[bytes, bytearray]

_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _cstrlen(buf: Buffer, start: int = 0, limit: Optional[int] = None) -> int:
    """Number of bytes from ``start`` before the first NUL, at most ``limit``."""
    end = len(buf) if limit is None else min(len(buf), start + limit)
    nul = buf.find(0, start, end)
    return (end if nul == -1 else nul) - start


def split(s: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    _single_char(sep)
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None; ``"\\0"`` gives ``len(s)``."""
    _single_char(c)
    index = (s + _NUL).find(c)
    return None if index == -1 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None; ``"\\0"`` gives ``len(s)``."""
    _single_char(c)
    index = (s + _NUL).rfind(c)
    return None if index == -1 else index


def striteri(s: str, func: Callable[[int, str], object]) -> None:
    """Call ``func(index, char)`` for every character of ``s``, in order."""
    for index, char in enumerate(s):
        func(index, char)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strlcpy(dst: bytearray, src: Buffer, size: int) -> int:
    """Copy the NUL-terminated ``src`` into ``dst``, using at most ``size`` bytes.

    The copy is always NUL-terminated when ``size`` is positive. Returns the
    length of ``src``, so a result of ``size`` or more means truncation.
    """
    _non_negative("size", size)
    if size > len(dst):
        raise ValueError(f"size {size} exceeds destination length {len(dst)}")
    src_len = _cstrlen(src)
    if size > 0:
        count = min(src_len, size - 1)
        dst[:count] = src[:count]
        dst[count] = 0
    return src_len


def strlcat(dst: bytearray, src: Buffer, size: int) -> int:
    """Append the NUL-terminated ``src`` to the string in ``dst``.

    At most ``size`` bytes of ``dst`` are used in total. Returns the length
    the combined string would have had without truncation.
    """
    _non_negative("size", size)
    if size > len(dst):
        raise ValueError(f"size {size} exceeds destination length {len(dst)}")
    dst_len = _cstrlen(dst, 0, size)
    src_len = _cstrlen(src)
    if dst_len == size:
        return size + src_len
    count = min(src_len, size - dst_len - 1)
    dst[dst_len:dst_len + count] = src[:count]
    dst[dst_len + count] = 0
    return dst_len + src_len


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign of the result orders the strings."""
    _non_negative("n", n)
    for index in range(n):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly in the first ``length`` characters, or None.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index == -1 else index


def strtrim(s: str, charset: Optional[str]) -> str:
    """Remove characters in ``charset`` from both ends; None leaves ``s`` as is."""
    if charset is None:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    return s[start:start + length]