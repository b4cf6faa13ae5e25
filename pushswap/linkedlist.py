"""A singly linked list whose nodes must carry content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass
class Node:
    """One link of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


def _new_node(content: Any) -> Node:
    if content is None:
        raise ValueError("a list node needs content")
    return Node(content)


class LinkedList:
    """A singly linked list of non-None values, head first."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        if items is not None:
            for item in reversed(list(items)):
                self.add_front(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> Node:
        """Put content at the head; return its node."""
        node = _new_node(content)
        node.next = self.head
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Put content at the tail; return its node."""
        node = _new_node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The tail node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, handing every content to delete first when given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call func on every content, head to tail."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """A new list of func applied to every content.

        When func gives None, the contents made so far are handed to delete
        and ValueError is raised.
        """
        results = []
        for content in self:
            value = func(content)
            if value is None:
                if delete is not None:
                    for made in results:
                        delete(made)
                raise ValueError("mapping produced a node without content")
            results.append(value)
        return LinkedList(results)