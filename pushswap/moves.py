"""Cost calculations that choose which element of stack a to push next.

Stacks are sequences of distinct integers with their top at index 0.
Stack b is kept in descending circular order and stack a in ascending
circular order; the functions here find where a number belongs and how
many rotations it takes to get there.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

__all__ = [
    "Moves",
    "combined_cost",
    "find_max_index",
    "find_min_index",
    "is_valid_interval",
    "moves_in_a",
    "insertion_index_in_a",
    "insertion_index_in_b",
    "moves_in_b",
    "best_moves",
]


@dataclass(frozen=True)
class Moves:
    """Rotations (r) and reverse rotations (rr) to apply to one stack."""

    r: int = 0
    rr: int = 0


def combined_cost(a_moves: Moves, b_moves: Moves) -> int:
    """Operations needed when rotations of a and b in the same direction are shared."""
    return max(a_moves.r, b_moves.r) + max(a_moves.rr, b_moves.rr)


def _require_items(stack: Sequence[int]) -> None:
    if len(stack) == 0:
        raise ValueError("the stack is empty")


def find_max_index(stack: Sequence[int]) -> int:
    """Index of the first largest element."""
    _require_items(stack)
    best = 0
    for index, value in enumerate(stack):
        if value > stack[best]:
            best = index
    return best


def find_min_index(stack: Sequence[int]) -> int:
    """Index of the first smallest element."""
    _require_items(stack)
    best = 0
    for index, value in enumerate(stack):
        if value < stack[best]:
            best = index
    return best


def is_valid_interval(stack: Sequence[int], elem: int, first: int, second: int) -> bool:
    """True when no element of stack lies strictly between elem and either bound.

    In other words, first and second are elem's nearest neighbours in value.
    """
    higher, lower = max(first, second), min(first, second)
    return not any(elem < value < higher or lower < value < elem for value in stack)


def moves_in_a(index: int, size: int) -> Moves:
    """Rotations that bring the element at index to the top of a stack of size."""
    if not 0 <= index < size:
        raise ValueError(f"index {index} is outside a stack of size {size}")
    if index < size // 2:
        return Moves(r=index)
    return Moves(rr=size - index)


def _insertion_index(nbr: int, stack: Sequence[int], step_if_next_greater: bool) -> int:
    size = len(stack)
    for position, current in enumerate(stack):
        following = stack[(position + 1) % size]
        if current < nbr < following or current > nbr > following:
            if is_valid_interval(stack, nbr, current, following):
                if (following > nbr) == step_if_next_greater:
                    return position + 1
                return position
    return size


def insertion_index_in_a(nbr: int, stack: Sequence[int]) -> int:
    """Rotations of ascending stack a after which nbr can be pushed on top.

    Gives len(stack) when no pair of neighbours encloses nbr.
    """
    return _insertion_index(nbr, stack, step_if_next_greater=True)


def insertion_index_in_b(nbr: int, stack: Sequence[int]) -> int:
    """Rotations of descending stack b after which nbr can be pushed on top.

    Gives len(stack) when no pair of neighbours encloses nbr.
    """
    return _insertion_index(nbr, stack, step_if_next_greater=False)


def moves_in_b(nbr: int, stack_b: Sequence[int]) -> Moves:
    """Rotations of stack b that prepare it to receive nbr on top."""
    size = len(stack_b)
    min_index = find_min_index(stack_b)
    max_index = find_max_index(stack_b)
    if nbr < stack_b[min_index] or nbr > stack_b[max_index]:
        moves = max_index
    else:
        moves = insertion_index_in_b(nbr, stack_b)
    if moves < size // 2:
        return Moves(r=moves)
    return Moves(rr=size - moves)


def best_moves(stack_a: Sequence[int], stack_b: Sequence[int]) -> Tuple[Moves, Moves]:
    """The cheapest moves of a and b that bring some element of a over its place in b.

    Among equally cheap choices the element nearest the top of a wins.
    """
    _require_items(stack_a)
    size_a = len(stack_a)
    best: Optional[Tuple[Moves, Moves]] = None
    best_cost = 0
    for index, value in enumerate(stack_a):
        candidate = (moves_in_a(index, size_a), moves_in_b(value, stack_b))
        cost = combined_cost(*candidate)
        if best is None or cost < best_cost:
            best, best_cost = candidate, cost
    assert best is not None
    return best