"""Validation of command-line arguments into a list of distinct integers."""

from __future__ import annotations

from typing import List, Sequence

from .chars import isdigit
from .strings import split

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1


class InputError(ValueError):
    """Raised for arguments that are not distinct 32-bit integers."""


def _tokens(args: Sequence[str]) -> List[str]:
    if len(args) == 1:
        return split(args[0], " ")
    return list(args)


def _is_number(token: str) -> bool:
    digits = token[1:] if token.startswith("-") else token
    return all(isdigit(ch) for ch in digits)


def _value(token: str) -> int:
    negative = token.startswith("-")
    digits = token[1:] if negative else token
    magnitude = int(digits) if digits else 0
    return -magnitude if negative else magnitude


def parse_args(args: Sequence[str]) -> List[int]:
    """Turn arguments into integers.

    A single argument is split on spaces; several arguments are taken one
    number each. Each number is an optional minus sign followed by digits,
    fits in 32 bits, and appears only once.
    """
    values: List[int] = []
    seen = set()
    for token in _tokens(args):
        if not _is_number(token):
            raise InputError(f"not an integer: {token!r}")
        value = _value(token)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"out of range: {token!r}")
        if value in seen:
            raise InputError(f"duplicate value: {token!r}")
        seen.add(value)
        values.append(value)
    return values