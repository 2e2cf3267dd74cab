"""Singly linked list nodes and basic helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[ListNode]:
        """Yield this node and every node after it."""
        node: ListNode | None = self
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    if head is None:
        return []
    return [node.val for node in head]


def decimal_value(head: ListNode | None) -> int:
    """Read the list as binary digits, most significant first."""
    number = 0
    for value in to_values(head):
        number = number * 2 + value
    return number


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; the second of the two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow