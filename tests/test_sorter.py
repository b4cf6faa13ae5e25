import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.sorter import (
    push_back_to_a,
    rotate_min_to_top,
    sort_numbers,
    sort_three,
    turkish_sort,
)
from pushswap.stacks import Stacks


def _replay(numbers, operations):
    """Apply operation names to fresh stacks; return the final (a, b)."""
    a, b = list(numbers), []

    def rot(s):
        if s:
            s.append(s.pop(0))

    def rrot(s):
        if s:
            s.insert(0, s.pop())

    def sw(s):
        if len(s) > 1:
            s[0], s[1] = s[1], s[0]

    table = {
        "sa": lambda: sw(a),
        "sb": lambda: sw(b),
        "ra": lambda: rot(a),
        "rb": lambda: rot(b),
        "rr": lambda: (rot(a), rot(b)),
        "rra": lambda: rrot(a),
        "rrb": lambda: rrot(b),
        "rrr": lambda: (rrot(a), rrot(b)),
        "pa": lambda: b and a.insert(0, b.pop(0)),
        "pb": lambda: a and b.insert(0, a.pop(0)),
    }
    for op in operations:
        table[op]()
    return a, b


def _tester_permutation(size, seed):
    """A random arrangement of 1..size, as the source's own tester makes."""
    rng = random.Random(seed)
    numbers = list(range(1, size + 1))
    rng.shuffle(numbers)
    return numbers


@pytest.mark.parametrize(
    "numbers, expected_ops",
    [
        ([1, 2, 3], []),
        ([3, 1, 2], ["ra"]),
        ([1, 3, 2], ["rra", "sa"]),
        ([2, 1, 3], ["sa"]),
        ([2, 3, 1], ["rra"]),
        ([3, 2, 1], ["ra", "sa"]),
    ],
)
def test_sort_three_all_orders(numbers, expected_ops):
    stacks = Stacks(numbers)
    sort_three(stacks)
    assert stacks.operations == expected_ops
    assert list(stacks.a) == [1, 2, 3]


def test_sort_three_two_elements():
    stacks = Stacks([5, 2])
    sort_three(stacks)
    assert list(stacks.a) == [2, 5]


def test_rotate_min_to_top_reverse_when_in_lower_half():
    stacks = Stacks([3, 4, 1, 2])
    rotate_min_to_top(stacks)
    assert stacks.operations == ["rra", "rra"]
    assert list(stacks.a) == [1, 2, 3, 4]


def test_rotate_min_to_top_forward_when_in_upper_half():
    stacks = Stacks([4, 1, 2, 3, 5])
    rotate_min_to_top(stacks)
    assert stacks.operations == ["ra"]
    assert list(stacks.a) == [1, 2, 3, 5, 4]


def test_rotate_min_to_top_already_on_top():
    stacks = Stacks([1, 2, 3])
    rotate_min_to_top(stacks)
    assert stacks.operations == []


def test_push_back_to_a_inserts_in_place():
    stacks = Stacks([1, 5, 9], [7, 3])
    push_back_to_a(stacks)
    assert stacks.operations == ["rra", "pa", "rra", "pa"]
    assert list(stacks.a) == [3, 5, 7, 9, 1]
    assert list(stacks.b) == []


def test_push_back_to_a_new_extremes_go_above_minimum():
    stacks = Stacks([2, 3, 4], [10, 0])
    push_back_to_a(stacks)
    assert list(stacks.a) == [0, 2, 3, 4, 10]
    assert list(stacks.b) == []


@pytest.mark.parametrize("size", [5, 6, 10, 20, 100])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_tester_permutations_are_sorted(size, seed):
    numbers = _tester_permutation(size, seed)
    stacks = Stacks(numbers)
    turkish_sort(stacks)
    assert list(stacks.a) == sorted(numbers)
    assert list(stacks.b) == []
    a, b = _replay(numbers, stacks.operations)
    assert a == sorted(numbers)
    assert b == []


def test_turkish_sort_push_counts_for_large_input():
    numbers = _tester_permutation(30, 7)
    ops = sort_numbers(numbers)
    assert ops.count("pb") == 27
    assert ops.count("pa") == 27


def test_sort_numbers_empty():
    assert sort_numbers([]) == []


@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(min_value=-1000, max_value=1000), unique=True, max_size=40))
def test_sort_numbers_sorts_any_distinct_numbers(numbers):
    ops = sort_numbers(numbers)
    a, b = _replay(numbers, ops)
    assert a == sorted(numbers)
    assert b == []