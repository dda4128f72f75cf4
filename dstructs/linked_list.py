"""A doubly-linked list holding copies of its data items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

LIST_GENERAL_BUG_MESSAGE = (
    "[Error] Probable causes: wrong head_ or tail_ pointer, or some next or "
    "prev pointer not updated, or wrong size_"
)


class LinkedListError(RuntimeError):
    """Raised when the internal structure of a list is inconsistent."""


@dataclass(eq=False)
class Node(Generic[T]):
    """One link of the list; compared by identity."""

    data: T
    next: Optional["Node[T]"] = field(default=None, repr=False)
    prev: Optional["Node[T]"] = field(default=None, repr=False)


class LinkedList(Generic[T]):
    """A doubly-linked list usable as a stack or double-ended queue."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.push_back(item)

    @property
    def head(self) -> Optional[Node[T]]:
        """The first node, or None if the list is empty."""
        return self._head

    @property
    def tail(self) -> Optional[Node[T]]:
        """The last node, or None if the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        if self._size != other._size:
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + "".join(f"({item})" for item in self) + "]"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no items."""
        return self._head is None

    def front(self) -> T:
        """Return the first data item."""
        if self._head is None:
            raise IndexError("front() called on empty LinkedList")
        return self._head.data

    def back(self) -> T:
        """Return the last data item."""
        if self._tail is None:
            raise IndexError("back() called on empty LinkedList")
        return self._tail.data

    def push_front(self, data: T) -> None:
        """Add an item at the front."""
        node = Node(data)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def push_back(self, data: T) -> None:
        """Add an item at the back."""
        node = Node(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop_front(self) -> None:
        """Remove the first item; does nothing on an empty list."""
        if self._head is None:
            return
        if self._head.next is None:
            self._head = self._tail = None
            self._size -= 1
            if self._size != 0:
                raise LinkedListError("Error in popFront: " + LIST_GENERAL_BUG_MESSAGE)
            return
        old = self._head
        self._head = old.next
        self._head.prev = None
        old.next = None
        self._size -= 1

    def pop_back(self) -> None:
        """Remove the last item; does nothing on an empty list."""
        if self._head is None or self._tail is None:
            return
        if self._tail.prev is None:
            self._head = self._tail = None
            self._size -= 1
            if self._size != 0:
                raise LinkedListError("Error in popBack: " + LIST_GENERAL_BUG_MESSAGE)
            return
        old = self._tail
        self._tail = old.prev
        self._tail.next = None
        old.prev = None
        self._size -= 1

    def insert_before(self, node: Optional[Node[T]], data: T) -> Node[T]:
        """Link a new node holding data in front of node, or at the back if node is None.

        Existing nodes keep their identity. Returns the new node.
        """
        if node is None:
            self.push_back(data)
            assert self._tail is not None
            return self._tail
        new = Node(data, next=node, prev=node.prev)
        if node.prev is None:
            self._head = new
        else:
            node.prev.next = new
        node.prev = new
        self._size += 1
        return new

    def clear(self) -> None:
        """Remove every item."""
        while self._head is not None:
            self.pop_back()
        if self._size != 0:
            raise LinkedListError("Error in clear: " + LIST_GENERAL_BUG_MESSAGE)

    def copy(self) -> "LinkedList[T]":
        """Return a new list with the same items in the same order."""
        return LinkedList(self)

    def _nodes_forward(self) -> Iterator[Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _nodes_backward(self) -> Iterator[Node[T]]:
        node = self._tail
        while node is not None:
            yield node
            node = node.prev

    def assert_correct_size(self) -> bool:
        """Check the stored size against a count of the nodes."""
        if sum(1 for _ in self._nodes_forward()) != self._size:
            raise LinkedListError("Error in assertCorrectSize: " + LIST_GENERAL_BUG_MESSAGE)
        return True

    def assert_prev_links(self) -> bool:
        """Check that walking backwards visits the same nodes as walking forwards."""
        forward = list(self._nodes_forward())
        backward = list(self._nodes_backward())
        backward.reverse()
        if len(forward) != len(backward) or any(
            a is not b for a, b in zip(forward, backward)
        ):
            raise LinkedListError("Error in assertPrevLinks: " + LIST_GENERAL_BUG_MESSAGE)
        return True