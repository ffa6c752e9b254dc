"""Command line: print a sequence of stack moves that sorts the arguments."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from .args import InputError, parse_args
from .output import put_str
from .sorts import normalize, radix_sort, sort_four_and_five, sort_three
from .stacks import Stacks


def _sort(stacks: Stacks) -> None:
    if stacks.is_full_sorted() or stacks.size == 1:
        return
    if stacks.size == 2:
        stacks.swap("a")
    elif stacks.size == 3:
        sort_three(stacks)
    elif stacks.size in (4, 5):
        sort_four_and_five(stacks, stacks.size)
    else:
        radix_sort(stacks)


def sort_values(values: Iterable[int]) -> List[str]:
    """Return the moves that sort ``values`` on stack ``a``."""
    stacks = Stacks(normalize(values))
    _sort(stacks)
    return list(stacks.operations)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the arguments and print the sorting moves, one per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return -1
    try:
        values = parse_args(args)
    except InputError:
        put_str("Error\n", sys.stderr)
        return 1
    _sort(Stacks(normalize(values), sys.stdout))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())