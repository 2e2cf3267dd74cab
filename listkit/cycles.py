"""Cycle and intersection detection in linked lists."""

from __future__ import annotations

from listkit.nodes import ListNode


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` from ``head`` loops forever."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where the cycle begins, or None if there is none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            # The meeting point and the head are equally far from the cycle start.
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def _length(head: ListNode) -> int:
    return sum(1 for _ in head)


def intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by two acyclic lists, or None."""
    if head_a is None or head_b is None:
        return None
    if head_a is head_b:
        return head_a
    len_a = _length(head_a)
    len_b = _length(head_b)
    a: ListNode | None = head_a
    b: ListNode | None = head_b
    for _ in range(len_a - len_b):
        a = a.next
    for _ in range(len_b - len_a):
        b = b.next
    while a is not None:
        if a is b:
            return a
        a, b = a.next, b.next
    return None