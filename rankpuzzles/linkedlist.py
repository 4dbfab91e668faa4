"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass(eq=False)
class Node:
    """One node of a singly linked list."""

    data: int
    next: Node | None = None


class SinglyLinkedList:
    """A singly linked list that keeps track of its head and tail."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        for value in values:
            self.insert_node(value)

    def insert_node(self, data: int) -> None:
        """Append a node holding data at the tail."""
        node = Node(data)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node

    def __iter__(self) -> Iterator[int]:
        return iter_values(self.head)


def iter_values(head: Node | None) -> Iterator[int]:
    """Yield the values of the list starting at head."""
    node = head
    while node is not None:
        yield node.data
        node = node.next


def format_list(head: Node | None, sep: str) -> str:
    """Return the list's values joined by sep."""
    return sep.join(str(value) for value in iter_values(head))


def print_linked_list(head: Node | None, file: TextIO | None = None) -> None:
    """Write each value of the list on its own line."""
    out = sys.stdout if file is None else file
    for value in iter_values(head):
        print(value, file=out)


def compare_lists(head1: Node | None, head2: Node | None) -> bool:
    """Tell whether two lists hold the same values in the same order."""
    first, second = head1, head2
    while first is not None and second is not None:
        if first.data != second.data:
            return False
        first, second = first.next, second.next
    return first is None and second is None


def delete_node(head: Node | None, pos: int) -> Node | None:
    """Remove the node at pos and return the new head.

    A position past the end of the list leaves it unchanged.
    """
    if pos < 0:
        raise ValueError("position must not be negative")
    if head is None:
        raise IndexError("delete from an empty list")
    if pos == 0:
        return head.next
    previous = head
    for _ in range(pos - 1):
        if previous.next is None:
            return head
        previous = previous.next
    if previous.next is not None:
        previous.next = previous.next.next
    return head


def reverse_list(head: Node | None) -> Node | None:
    """Reverse the list in place and return its new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def get_node_from_tail(head: Node | None, pos: int) -> int:
    """Return the value pos places before the tail; pos 0 is the tail itself."""
    values = list(iter_values(head))
    if not 0 <= pos < len(values):
        raise IndexError("position out of range")
    return values[len(values) - 1 - pos]


def insert_at_head(head: Node | None, value: int) -> Node:
    """Put a node holding value in front of the list and return it."""
    return Node(value, head)


def insert_at_position(head: Node | None, value: int, pos: int) -> Node:
    """Insert value so that it lands at pos and return the head.

    An empty list simply gets the new node; positions 0 and 1 both insert
    right after the head of a non-empty list.
    """
    if head is None:
        return Node(value)
    previous = head
    for _ in range(pos - 1):
        if previous.next is None:
            raise IndexError("position out of range")
        previous = previous.next
    previous.next = Node(value, previous.next)
    return head


def insert_at_tail(head: Node | None, value: int) -> Node:
    """Append a node holding value and return the head."""
    node = Node(value)
    if head is None:
        return node
    last = head
    while last.next is not None:
        last = last.next
    last.next = node
    return head