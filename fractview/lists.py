"""A singly linked list with front insertion and whole-list mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list whose head is the most recently pushed item."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for content in reversed(list(items or ())):
            self.push_front(content)

    def push_front(self, content: Any) -> None:
        """Insert ``content`` at the head of the list."""
        self._head = _Node(content, self._head)
        self._size += 1

    def pop_front(self, delete: Optional[Callable[[Any], None]] = None) -> Any:
        """Remove the head, pass its content to ``delete`` if given, and return it."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every item; ``delete`` sees the contents from tail to head."""
        contents = list(self)
        self._head = None
        self._size = 0
        if delete is not None:
            for content in reversed(contents):
                delete(content)

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on each item from head to tail."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list of ``func`` applied to each item, in the same order."""
        return LinkedList(func(content) for content in self)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"