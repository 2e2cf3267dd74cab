"""Operations that rearrange the nodes of linked lists."""

from __future__ import annotations

from listkit.nodes import ListNode, to_values


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def reorder_list(head: ListNode | None) -> None:
    """Reorder L0, L1, ..., Ln in place to L0, Ln, L1, Ln-1, ..."""
    if head is None or head.next is None:
        return
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse_list(slow.next)
    slow.next = None
    first: ListNode | None = head
    while second is not None:
        first_next, second_next = first.next, second.next
        first.next = second
        second.next = first_next
        first, second = first_next, second_next


def insertion_sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list by value with a stable insertion sort; return the new head."""
    dummy = ListNode()
    node = head
    while node is not None:
        following = node.next
        position = dummy
        while position.next is not None and position.next.val <= node.val:
            position = position.next
        node.next = position.next
        position.next = node
        node = following
    return dummy.next


def merge_two_lists(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Merge two sorted lists by relinking their nodes; ties take from ``list1``."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    previous = dummy
    while previous.next is not None and previous.next.next is not None:
        first = previous.next
        second = first.next
        first.next = second.next
        second.next = first
        previous.next = second
        previous = first
    return dummy.next


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right and return the new head."""
    if head is None:
        return None
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    nodes = list(head)
    k %= len(nodes)
    if k == 0:
        return head
    new_head = nodes[-k]
    nodes[-k - 1].next = None
    nodes[-1].next = head
    return new_head


def partition(head: ListNode | None, x: int) -> ListNode | None:
    """Move nodes below ``x`` before the others, keeping relative order."""
    below_dummy = ListNode()
    rest_dummy = ListNode()
    below, rest = below_dummy, rest_dummy
    node = head
    while node is not None:
        if node.val < x:
            below.next = node
            below = node
        else:
            rest.next = node
            rest = node
        node = node.next
    rest.next = None
    below.next = rest_dummy.next
    return below_dummy.next


def reverse_between(
    head: ListNode | None, left: int, right: int
) -> ListNode | None:
    """Reverse the nodes at 1-based positions ``left`` through ``right``.

    The list is left unchanged when ``left`` is not before ``right`` or when
    ``left`` is at or past the last node.
    """
    if left < 1:
        raise ValueError(f"left must be at least 1, got {left}")
    if head is None or left >= right:
        return head
    nodes = list(head)
    if left >= len(nodes):
        return head
    if right > len(nodes):
        raise ValueError(f"right must be at most {len(nodes)}, got {right}")
    dummy = ListNode(0, head)
    before = dummy if left == 1 else nodes[left - 2]
    previous = nodes[right - 1].next
    node = nodes[left - 1]
    for _ in range(right - left + 1):
        node.next, previous, node = previous, node, node.next
    before.next = previous
    return dummy.next


def is_palindrome(head: ListNode | None) -> bool:
    """Return True if the values read the same both ways; an empty list is not."""
    values = to_values(head)
    return bool(values) and values == values[::-1]