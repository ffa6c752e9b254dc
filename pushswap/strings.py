"""String helpers: parsing, formatting, searching, slicing and bounded copies."""

from __future__ import annotations

from itertools import chain
from typing import Callable, List, MutableSequence, Optional, Union

Char = Union[int, str]

_INT_BITS = 32
_WHITESPACE = frozenset("\t\n\v\f\r ")


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, two's complement."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _cstr(data: Union[bytes, bytearray]) -> bytes:
    """Return the bytes of ``data`` up to, not including, the first NUL."""
    data = bytes(data)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a signed 32-bit value.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text without digits gives 0. Values outside the
    32-bit range wrap around.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    result = int("".join(digits)) if digits else 0
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    return str(int(n))


def split(text: Optional[str], sep: Char) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if text is None:
        return []
    return [word for word in text.split(_char(sep)) if word]


def strlen(text: str) -> int:
    """Return the length of ``text``."""
    return len(text)


def strchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` in the first ``length`` characters of
    ``haystack``, or None. An empty needle is found at index 0."""
    _non_negative("length", length)
    if not needle:
        return 0
    size = len(needle)
    for start in range(len(haystack)):
        if start + size > length:
            break
        if haystack.startswith(needle, start):
            return start
    return None


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference of the
    first differing pair, or 0. A string's end compares as code 0."""
    _non_negative("n", n)
    pairs = zip(chain(a, "\0"), chain(b, "\0"))
    for count, (x, y) in enumerate(pairs):
        if count >= n:
            break
        if x != y:
            return ord(x) - ord(y)
        if x == "\0":
            break
    return 0


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end gives the empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    buf: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for every item of ``buf`` in place.

    A returned character replaces the item; None leaves it unchanged.
    """
    for index, ch in enumerate(buf):
        replacement = func(index, ch)
        if replacement is not None:
            buf[index] = replacement


def strlcpy(dst: bytearray, src: Union[bytes, bytearray], dstsize: int) -> int:
    """Copy ``src`` into ``dst`` with NUL termination, writing at most
    ``dstsize`` bytes. Return the length of ``src``."""
    _non_negative("dstsize", dstsize)
    source = _cstr(src)
    if dstsize == 0:
        return len(source)
    if dstsize > len(dst):
        raise IndexError(f"dstsize {dstsize} exceeds buffer of size {len(dst)}")
    copied = source[:dstsize - 1]
    dst[:len(copied) + 1] = copied + b"\0"
    return len(source)


def strlcat(dst: bytearray, src: Union[bytes, bytearray], dstsize: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst`` so the result,
    terminator included, fits in ``dstsize`` bytes.

    Return the length the full result would have had.
    """
    _non_negative("dstsize", dstsize)
    if dstsize > len(dst):
        raise IndexError(f"dstsize {dstsize} exceeds buffer of size {len(dst)}")
    source = _cstr(src)
    head = bytes(dst[:dstsize])
    end = head.find(0)
    start = dstsize if end < 0 else end
    if start != dstsize:
        room = max(dstsize - start - 1, 0)
        piece = source[:room]
        dst[start:start + len(piece) + 1] = piece + b"\0"
    return start + len(source)