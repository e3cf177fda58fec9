"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass
class ListNode:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """A singly linked list built from ``ListNode`` links."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[ListNode] = None
        for item in items or ():
            self.add_back(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> ListNode:
        """Insert ``content`` before the first node and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> ListNode:
        """Append ``content`` after the last node and return its node."""
        node = ListNode(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[ListNode]:
        """The last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def remove_first(self, delete: Deleter = None) -> Any:
        """Unlink the first node, pass its content to ``delete`` and return it."""
        if self.head is None:
            raise IndexError("remove from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, passing each content to ``delete`` in order."""
        while self.head is not None:
            self.remove_first(delete)

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list of ``func(content)`` for each content.

        If ``func`` raises, the contents produced so far are passed to
        ``delete`` and the error propagates.
        """
        produced = []
        try:
            for content in self:
                produced.append(func(content))
        except Exception:
            if delete is not None:
                for content in produced:
                    delete(content)
            raise
        return LinkedList(produced)