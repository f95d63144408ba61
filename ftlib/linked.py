"""A singly linked list with the classic list helpers."""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class _Node:
    content: Any
    next: "Optional[_Node]" = None


class LinkedList:
    """A singly linked list holding arbitrary contents."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.add_back(item)

    def add_front(self, content: Any) -> None:
        """Insert content at the start of the list."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_back(self, content: Any) -> None:
        """Append content at the end of the list."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Content of the last element, or None for an empty list."""
        return None if self._tail is None else self._tail.content

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, handing every content that is not None to delete."""
        if delete is not None:
            for content in self:
                if content is not None:
                    delete(content)
        self._head = None
        self._tail = None
        self._size = 0

    def iterate(self, func: Callable[[Any], None]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """A new list of func applied to every content.

        If func raises, the contents already produced are passed to delete
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"