"""The turkish sort: push stack a onto b in order, then back onto a.

Elements are moved from a to b one at a time, always choosing the one
that needs the fewest rotations to land in its place in b. b is kept in
descending circular order. Three elements stay in a and are ordered
directly. Everything is then pushed back into its place in ascending a,
and a is rotated so that its smallest element is on top.
"""

from __future__ import annotations

from typing import Iterable, List

from .moves import best_moves, find_max_index, find_min_index, insertion_index_in_a
from .stacks import Stacks

__all__ = [
    "sort_three",
    "rotate_min_to_top",
    "push_back_to_a",
    "turkish_sort",
    "sort_numbers",
]


def _bring_to_top(stacks: Stacks, index: int) -> None:
    """Rotate a the shorter way so that the element at index ends on top."""
    size = len(stacks.a)
    if size == 0 or index == 0:
        return
    if index < size // 2:
        stacks.rotate("a", index)
    else:
        stacks.reverse_rotate("a", size - index)


def sort_three(stacks: Stacks) -> None:
    """Order stack a when it holds at most three elements."""
    if len(stacks.a) < 2:
        return
    max_index = find_max_index(stacks.a)
    if max_index == 0:
        stacks.rotate("a")
    elif max_index == 1:
        stacks.reverse_rotate("a")
    if find_min_index(stacks.a) == 1:
        stacks.swap("a")


def rotate_min_to_top(stacks: Stacks) -> None:
    """Rotate a, the shorter way, until its smallest element is on top."""
    if not stacks.a:
        return
    _bring_to_top(stacks, find_min_index(stacks.a))


def push_back_to_a(stacks: Stacks) -> None:
    """Push every element of b into its place in the ascending circular order of a."""
    for _ in range(len(stacks.b)):
        nbr = stacks.b[0]
        if stacks.a:
            a = list(stacks.a)
            min_index = find_min_index(a)
            max_index = find_max_index(a)
            if nbr < a[min_index] or nbr > a[max_index]:
                index = min_index
            else:
                index = insertion_index_in_a(nbr, a)
            _bring_to_top(stacks, index)
        stacks.push("a")


def turkish_sort(stacks: Stacks) -> None:
    """Sort stack a in place, recording every operation in stacks.operations."""
    stacks.push("b")
    stacks.push("b")
    for _ in range(len(stacks.a) - 3):
        moves_a, moves_b = best_moves(list(stacks.a), list(stacks.b))
        stacks.perform_rotations(moves_a.r, moves_b.r)
        stacks.perform_reverse_rotations(moves_a.rr, moves_b.rr)
        stacks.push("b")
    sort_three(stacks)
    push_back_to_a(stacks)
    rotate_min_to_top(stacks)


def sort_numbers(numbers: Iterable[int]) -> List[str]:
    """The operations that sort numbers, given with the top of stack a first."""
    stacks = Stacks(numbers)
    turkish_sort(stacks)
    return stacks.operations