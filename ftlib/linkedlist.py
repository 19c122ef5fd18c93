"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional[Node] = None


def delone(node: Node, delete: Callable[[Any], Any]) -> None:
    """Release ``node``: pass its content to ``delete`` and detach it."""
    delete(node.content)
    node.next = None


class LinkedList:
    """A singly linked list reached through its head node."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for content in contents:
            node = Node(content)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    @staticmethod
    def _check(node: Any) -> Node:
        if not isinstance(node, Node):
            raise TypeError(f"expected a Node, got {type(node).__name__}")
        return node

    def add_front(self, node: Node) -> None:
        """Make ``node`` the new head, followed by the current list."""
        self._check(node).next = self.head
        self.head = node

    def add_back(self, node: Node) -> None:
        """Link ``node`` after the last node of the list."""
        self._check(node)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Release every node, passing each content to ``delete``, and empty the list."""
        for node in list(self._nodes()):
            delone(node, delete)
        self.head = None

    def apply(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> LinkedList:
        """Return a new list of ``func(content)`` for each content.

        If ``func`` raises, the contents built so far are passed to ``delete``
        and the error propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content