import random

import pytest

from pushswap.cli import main, sort_values
from pushswap.stacks import Stacks

_METHODS = {"p": "push", "s": "swap", "r": "rotate", "rr": "reverse_rotate"}


def _replay(values, ops):
    stacks = Stacks(values)
    for op in ops:
        getattr(stacks, _METHODS[op[:-1]])(op[-1])
    return stacks


@pytest.mark.parametrize(
    "values",
    [
        [2, 1],
        [3, -7, 12],
        [5, 4, 3, 2],
        [9, -1, 4, 0, 2],
        [8, 6, 7, 5, 3, 0, 9],
        random.Random(1).sample(range(-500, 500), 20),
        random.Random(2).sample(range(-10000, 10000), 100),
    ],
)
def test_sort_values_sorts(values):
    ops = sort_values(values)
    stacks = _replay(values, ops)
    assert stacks.a == sorted(values)
    assert stacks.b == []


def test_sorted_input_needs_no_moves():
    assert sort_values([-3, 0, 4, 8, 15, 16, 23]) == []
    assert sort_values([5]) == []
    assert sort_values([]) == []


def test_two_values():
    assert sort_values([2, 1]) == ["sa"]


def test_main_prints_moves(capsys):
    assert main(["2", "1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\n"
    assert captured.err == ""


def test_main_single_string(capsys):
    values = [4, -2, 9, 0, 7, 3]
    assert main([" ".join(map(str, values))]) == 0
    ops = capsys.readouterr().out.split()
    assert _replay(values, ops).a == sorted(values)


def test_main_reports_bad_input(capsys):
    assert main(["1 1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_without_arguments(capsys):
    assert main([]) == -1
    assert capsys.readouterr().out == ""