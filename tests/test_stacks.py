import io

import pytest

from pushswap.stacks import Stacks

VALUES = [7, 3, 9, 1, 5]


def test_new_stacks_hold_everything_in_a():
    stacks = Stacks(VALUES)
    assert stacks.a == VALUES
    assert stacks.b == []
    assert stacks.stack_len("a") == len(VALUES)
    assert stacks.stack_len("b") == 0
    assert stacks.operations == []


def test_push_to_b_and_back():
    stacks = Stacks(VALUES)
    assert stacks.push("b") is True
    assert stacks.b == [VALUES[0]]
    assert stacks.a == VALUES[1:]
    assert stacks.push("a") is True
    assert stacks.a == VALUES
    assert stacks.b == []
    assert stacks.operations == ["pb", "pa"]


def test_push_from_empty_stack_does_nothing():
    stacks = Stacks(VALUES)
    assert stacks.push("a") is False
    assert stacks.operations == []
    empty = Stacks([])
    assert empty.push("b") is False
    assert empty.operations == []


def test_swap_a_writes_to_stream():
    out = io.StringIO()
    stacks = Stacks(VALUES, out)
    stacks.swap("a")
    assert stacks.a == [VALUES[1], VALUES[0], *VALUES[2:]]
    assert out.getvalue() == "sa\n"


def test_swap_b():
    stacks = Stacks(VALUES)
    stacks.push("b")
    assert stacks.swap("b") is False
    stacks.push("b")
    assert stacks.b == [VALUES[1], VALUES[0]]
    assert stacks.swap("b") is True
    assert stacks.b == [VALUES[0], VALUES[1]]
    assert stacks.operations == ["pb", "pb", "sb"]


def test_rotate_and_reverse_rotate_a():
    stacks = Stacks(VALUES)
    stacks.rotate("a")
    assert stacks.a == VALUES[1:] + [VALUES[0]]
    stacks.reverse_rotate("a")
    assert stacks.a == VALUES
    stacks.reverse_rotate("a")
    assert stacks.a == [VALUES[-1]] + VALUES[:-1]
    assert stacks.operations == ["ra", "rra", "rra"]


def test_rotate_and_reverse_rotate_b():
    stacks = Stacks(VALUES)
    for _ in range(3):
        stacks.push("b")
    top_first = [VALUES[2], VALUES[1], VALUES[0]]
    assert stacks.b == top_first
    stacks.rotate("b")
    assert stacks.b == top_first[1:] + [top_first[0]]
    stacks.reverse_rotate("b")
    assert stacks.b == top_first
    stacks.reverse_rotate("b")
    assert stacks.b == [top_first[-1]] + top_first[:-1]
    assert stacks.a == VALUES[3:]
    assert stacks.operations[-3:] == ["rb", "rrb", "rrb"]


def test_rotation_needs_two_elements():
    stacks = Stacks([4])
    assert stacks.rotate("a") is False
    assert stacks.reverse_rotate("a") is False
    assert stacks.swap("a") is False
    assert stacks.operations == []


def test_unknown_label_does_nothing():
    stacks = Stacks(VALUES)
    assert stacks.push("c") is False
    assert stacks.rotate("c") is False
    assert stacks.a == VALUES


@pytest.mark.parametrize(
    "values, expected", [([1, 2, 3], True), ([2, 1, 3], False), ([5], True)]
)
def test_is_sorted_a(values, expected):
    assert Stacks(values).is_sorted("a") is expected


def test_is_sorted_b_wants_descending_from_top():
    ascending = Stacks([1, 2, 3])
    descending = Stacks([3, 2, 1])
    for stacks in (ascending, descending):
        for _ in range(3):
            stacks.push("b")
    assert ascending.is_sorted("b") is True
    assert descending.is_sorted("b") is False


def test_is_full_sorted_ignores_partition():
    stacks = Stacks([1, 2, 3, 4])
    stacks.push("b")
    stacks.push("b")
    assert stacks.is_full_sorted() is True
    stacks.swap("a")
    assert stacks.is_full_sorted() is False


def test_stream_receives_every_operation():
    out = io.StringIO()
    stacks = Stacks(VALUES, out)
    stacks.push("b")
    stacks.push("b")
    stacks.swap("b")
    assert out.getvalue() == "pb\npb\nsb\n"
    assert out.getvalue().split() == stacks.operations