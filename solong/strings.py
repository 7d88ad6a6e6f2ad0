"""String helpers with C-string semantics expressed over Python ``str``.

A string ends at its first NUL character, as a C string would. Functions
that locate something return an index, or None when nothing was found.
Character arguments may be a one-character string or an integer code,
of which only the low byte counts.
"""

from __future__ import annotations

import operator
from itertools import zip_longest
from typing import Callable, List, Optional, Tuple, Union

CharLike = Union[str, int]

NUL = "\0"


def _cstr(s: str) -> str:
    """The part of s before its first NUL."""
    return s.partition(NUL)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _non_negative(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(s))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text, truncated to size - 1 characters, and the
    length of src, which is what the copy would need.
    """
    size = _non_negative("size", size)
    text = _cstr(src)
    copied = text[: size - 1] if size else ""
    return copied, len(text)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest inside a buffer of size characters.

    Returns the resulting text and the length the full result would need.
    Nothing is appended when dest already fills the buffer; the returned
    length is then size + len(src).
    """
    size = _non_negative("size", size)
    head = _cstr(dest)
    tail = _cstr(src)
    if size == 0:
        return head, len(tail)
    room = max(0, size - 1 - len(head))
    result = head + tail[:room]
    if size <= len(head):
        return result, size + len(tail)
    return result, len(head) + len(tail)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c, or None.

    Searching for NUL gives the index of the terminator, the string length.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c, or None.

    Searching for NUL gives the index of the terminator, the string length.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first little lying wholly within the first length characters of big.

    An empty little is found at index 0.
    """
    needle = _cstr(little)
    if not needle:
        return 0
    length = _non_negative("length", length)
    index = _cstr(big).find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the difference of the first unequal pair, else 0."""
    n = _non_negative("n", n)
    for a, b in zip_longest(_cstr(s1)[:n], _cstr(s2)[:n], fillvalue=NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strdup(s: str) -> str:
    """A copy of s up to its terminator."""
    return _cstr(s)


def strjoin(s1: str, s2: str) -> str:
    """s1 followed by s2."""
    return _cstr(s1) + _cstr(s2)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start.

    A start at or past the end gives an empty string.
    """
    start = _non_negative("start", start)
    length = _non_negative("length", length)
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(s: str, charset: str) -> str:
    """s without leading and trailing characters that appear in charset."""
    return _cstr(s).strip(_cstr(charset))


def split(s: str, sep: CharLike) -> List[str]:
    """The non-empty pieces of s between occurrences of sep."""
    text = _cstr(s)
    ch = _char(sep)
    if ch == NUL:
        return [text] if text else []
    return [word for word in text.split(ch) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of func(index, char) for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(_cstr(s)))


def striteri(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call func(index, char) on every character in order.

    A character is replaced by what func returns, or kept when func
    returns None; the updated string is returned.
    """
    pieces = []
    for index, ch in enumerate(_cstr(s)):
        replacement = func(index, ch)
        pieces.append(ch if replacement is None else replacement)
    return "".join(pieces)