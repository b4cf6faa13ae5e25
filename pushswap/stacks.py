"""The two stacks of the sorting puzzle and the operations on them.

Every operation that the puzzle counts is appended, by name, to
``Stacks.operations``.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Optional

__all__ = ["Stacks"]


def _check_moves(moves: int) -> None:
    if moves < 0:
        raise ValueError(f"move count must not be negative, got {moves}")


class Stacks:
    """Stacks a and b, each with its top at index 0."""

    def __init__(self, a: Iterable[int], b: Optional[Iterable[int]] = None) -> None:
        self.a: Deque[int] = deque(a)
        self.b: Deque[int] = deque(b if b is not None else ())
        self.operations: List[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _stack(self, which: str) -> Deque[int]:
        if which == "a":
            return self.a
        if which == "b":
            return self.b
        raise ValueError(f"no stack named {which!r}")

    def swap(self, which: str) -> None:
        """Swap the two top elements; nothing happens with fewer than two."""
        stack = self._stack(which)
        if len(stack) > 1:
            stack[0], stack[1] = stack[1], stack[0]
            self.operations.append("s" + which)

    def rotate(self, which: str, moves: int = 1) -> None:
        """Move the top element to the bottom, moves times."""
        _check_moves(moves)
        self._stack(which).rotate(-moves)
        self.operations.extend(["r" + which] * moves)

    def reverse_rotate(self, which: str, moves: int = 1) -> None:
        """Move the bottom element to the top, moves times."""
        _check_moves(moves)
        self._stack(which).rotate(moves)
        self.operations.extend(["rr" + which] * moves)

    def push(self, to: str) -> None:
        """Move the top of the other stack onto stack `to`; nothing if it is empty."""
        target = self._stack(to)
        source = self.b if target is self.a else self.a
        if source:
            target.appendleft(source.popleft())
            self.operations.append("p" + to)

    def rotate_both(self, moves: int = 1) -> None:
        """Rotate both stacks together, moves times."""
        _check_moves(moves)
        self.operations.extend(["rr"] * moves)
        self.a.rotate(-moves)
        self.b.rotate(-moves)

    def reverse_rotate_both(self, moves: int = 1) -> None:
        """Reverse-rotate both stacks together, moves times."""
        _check_moves(moves)
        self.operations.extend(["rrr"] * moves)
        self.a.rotate(moves)
        self.b.rotate(moves)

    def perform_rotations(self, a_moves: int, b_moves: int) -> None:
        """Rotate a and b the given numbers of times, sharing moves where both rotate."""
        _check_moves(a_moves)
        _check_moves(b_moves)
        shared = min(a_moves, b_moves)
        self.rotate_both(shared)
        self.rotate("a", a_moves - shared)
        self.rotate("b", b_moves - shared)

    def perform_reverse_rotations(self, a_moves: int, b_moves: int) -> None:
        """Reverse-rotate a and b the given numbers of times, sharing moves where both do."""
        _check_moves(a_moves)
        _check_moves(b_moves)
        shared = min(a_moves, b_moves)
        self.reverse_rotate_both(shared)
        self.reverse_rotate("a", a_moves - shared)
        self.reverse_rotate("b", b_moves - shared)