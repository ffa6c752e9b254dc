"""Two stacks sharing one array, with the move set of the sorting puzzle.

Stack ``b`` occupies ``arr[0..up]`` with its top at ``arr[up]``; stack ``a``
occupies ``arr[down..size-1]`` with its top at ``arr[down]``. Pushing between
the stacks only moves the boundary between them.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, TextIO

from .output import put_endl


class Stacks:
    """Stacks ``a`` and ``b`` with push, swap, rotate and reverse rotate.

    Every move that takes effect is recorded in ``operations`` and, when a
    stream is given, written to it as one line.
    """

    def __init__(self, values: Iterable[int], stream: Optional[TextIO] = None):
        self.arr: List[int] = list(values)
        self.size = len(self.arr)
        self.up = -1
        self.down = 0
        self.stream = stream
        self.operations: List[str] = []

    @property
    def a(self) -> List[int]:
        """Contents of stack ``a``, top first."""
        return self.arr[self.down:]

    @property
    def b(self) -> List[int]:
        """Contents of stack ``b``, top first."""
        return list(reversed(self.arr[:self.up + 1]))

    def _emit(self, name: str) -> bool:
        self.operations.append(name)
        if self.stream is not None:
            put_endl(name, self.stream)
        return True

    def push(self, label: str) -> bool:
        """Move the top of the other stack onto stack ``label``."""
        if label == "a" and self.up + 1 > 0:
            self.up -= 1
            self.down -= 1
            return self._emit("pa")
        if label == "b" and self.down < self.size:
            self.up += 1
            self.down += 1
            return self._emit("pb")
        return False

    def swap(self, label: str) -> bool:
        """Exchange the two top elements of stack ``label``."""
        arr = self.arr
        if label == "b" and self.up > 0:
            arr[self.up], arr[self.up - 1] = arr[self.up - 1], arr[self.up]
            return self._emit("sb")
        if label == "a" and self.down < self.size - 1:
            d = self.down
            arr[d], arr[d + 1] = arr[d + 1], arr[d]
            return self._emit("sa")
        return False

    def rotate(self, label: str) -> bool:
        """Move the top of stack ``label`` to its bottom."""
        arr = self.arr
        if label == "a" and self.down < self.size - 1:
            d = self.down
            arr[d:] = arr[d + 1:] + [arr[d]]
            return self._emit("ra")
        if label == "b" and self.up > 0:
            u = self.up
            arr[:u + 1] = [arr[u]] + arr[:u]
            return self._emit("rb")
        return False

    def reverse_rotate(self, label: str) -> bool:
        """Move the bottom of stack ``label`` to its top."""
        arr = self.arr
        if label == "a" and self.down < self.size - 1:
            d = self.down
            arr[d:] = [arr[-1]] + arr[d:-1]
            return self._emit("rra")
        if label == "b" and self.up > 0:
            u = self.up
            arr[:u + 1] = arr[1:u + 1] + [arr[0]]
            return self._emit("rrb")
        return False

    def stack_len(self, label: str) -> int:
        """Number of elements in stack ``a``; any other label means ``b``."""
        if label == "a":
            return self.size - self.down
        return self.up + 1

    def is_sorted(self, label: str) -> bool:
        """Whether ``a`` ascends from its top or ``b`` descends from its top."""
        if label == "a":
            items = self.a
        elif label == "b":
            items = self.b
            return all(x >= y for x, y in zip(items, items[1:]))
        else:
            return True
        return all(x <= y for x, y in zip(items, items[1:]))

    def is_full_sorted(self) -> bool:
        """Whether the shared array is in ascending order."""
        return all(x <= y for x, y in zip(self.arr, self.arr[1:]))