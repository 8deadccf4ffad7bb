"""A singly linked list of nodes holding arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One element of a linked list."""

    content: Any = None
    next: Optional["Node"] = None


def delete_node(node: Optional[Node], delete: Deleter = None) -> None:
    """Release ``node``: pass its content to ``delete`` if given and detach it."""
    if node is None:
        return
    if delete is not None:
        delete(node.content)
    node.next = None


def _check_node(node: Any) -> None:
    if not isinstance(node, Node):
        raise TypeError(f"expected a Node, got {type(node).__name__}")


class LinkedList:
    """A chain of :class:`Node` objects starting at ``head``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
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

    def add_front(self, node: Optional[Node]) -> None:
        """Put ``node`` at the start of the list; None is ignored."""
        if node is None:
            return
        _check_node(node)
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Link ``node`` after the last node of the list; None is ignored."""
        if node is None:
            return
        _check_node(node)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        last = None
        for last in self._nodes():
            pass
        return last

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Deleter = None) -> None:
        """Delete every node, passing each content to ``delete``, and empty the list."""
        node = self.head
        while node is not None:
            following = node.next
            delete_node(node, delete)
            node = following
        self.head = None

    def iterate(self, f: Optional[Callable[[Any], Any]]) -> None:
        """Call ``f`` on the content of each node in order."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list holding ``f(content)`` for each node.

        If ``f`` raises, the contents built so far are passed to ``delete``
        and the error propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result