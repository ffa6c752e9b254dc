"""Sorting strategies built from stack moves."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .stacks import Stacks


def normalize(values: Iterable[int]) -> List[int]:
    """Replace each value by its rank among all values, starting at 0."""
    items = list(values)
    ranks = {value: rank for rank, value in enumerate(sorted(items))}
    return [ranks[value] for value in items]


def max_bits(stacks: Stacks) -> int:
    """Number of bits needed for the largest value in the array."""
    if not stacks.arr:
        return 0
    largest = max(stacks.arr)
    if largest < 0:
        raise ValueError("values must be normalized to non-negative ranks")
    return largest.bit_length()


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort: per bit, push zeros to ``b`` and rotate ones."""
    for bit in range(max_bits(stacks)):
        for _ in range(stacks.size):
            if (stacks.arr[stacks.down] >> bit) & 1:
                stacks.rotate("a")
            else:
                stacks.push("b")
        while stacks.stack_len("b") > 0:
            stacks.push("a")


def sort_three(stacks: Stacks) -> None:
    """Sort the top three elements of ``a`` in at most two moves."""
    d = stacks.down
    first, second, third = stacks.arr[d], stacks.arr[d + 1], stacks.arr[d + 2]
    if second < first < third:
        stacks.swap("a")
    elif first > second and first > third and second < third:
        stacks.rotate("a")
    elif first > second > third:
        stacks.rotate("a")
        stacks.swap("a")
    elif third < first < second:
        stacks.reverse_rotate("a")
    elif first < second and first < third and second > third:
        stacks.reverse_rotate("a")
        stacks.swap("a")


def _find_min(stacks: Stacks) -> Tuple[int, int]:
    """Smallest value of ``a`` and its index counted from the top."""
    index, value = min(enumerate(stacks.a), key=lambda pair: pair[1])
    return value, index


def _move_min_to_b(stacks: Stacks, min_index: int, size: int) -> None:
    if min_index == 1:
        stacks.swap("a")
    elif min_index == 2:
        stacks.rotate("a")
        stacks.swap("a")
    elif min_index == 3 and size == 4:
        stacks.reverse_rotate("a")
    elif min_index == 3 and size == 5:
        stacks.reverse_rotate("a")
        stacks.reverse_rotate("a")
    elif min_index == 4:
        stacks.reverse_rotate("a")
    if not stacks.is_sorted("a"):
        stacks.push("b")


def sort_four_and_five(stacks: Stacks, size: int) -> None:
    """Sort four or five elements by parking the smallest ones in ``b``."""
    if size == 4:
        _, index = _find_min(stacks)
        _move_min_to_b(stacks, index, 4)
        sort_three(stacks)
        if stacks.stack_len("b"):
            stacks.push("a")
    elif size == 5:
        _, index = _find_min(stacks)
        _move_min_to_b(stacks, index, 5)
        _, index = _find_min(stacks)
        _move_min_to_b(stacks, index, 4)
        sort_three(stacks)
        while stacks.stack_len("b"):
            stacks.push("a")