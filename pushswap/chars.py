"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def isalpha(c: Char) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: Char) -> bool:
    """Return True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def isalnum(c: Char) -> bool:
    """Return True for an ASCII letter or digit."""
    return isdigit(c) or isalpha(c)


def isascii(c: Char) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: Char, low: int, high: int, shift: int) -> Char:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def toupper(c: Char) -> Char:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone.

    A character comes back as a character, a code as a code.
    """
    return _convert(c, ord("a"), ord("z"), -32)


def tolower(c: Char) -> Char:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone.

    A character comes back as a character, a code as a code.
    """
    return _convert(c, ord("A"), ord("Z"), 32)