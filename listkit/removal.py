"""Operations that remove nodes from linked lists."""

from __future__ import annotations

from listkit.nodes import ListNode


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Remove the ``n``-th node counted from the end (1 is the last node)."""
    if head is None or (head.next is None and n > 0):
        return None
    nodes = list(head)
    if not 1 <= n <= len(nodes):
        raise ValueError(f"n must be between 1 and {len(nodes)}, got {n}")
    index = len(nodes) - n
    if index == 0:
        return head.next
    nodes[index - 1].next = nodes[index].next
    return head


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Remove every node whose value equals ``val``."""
    dummy = ListNode(0, head)
    node = dummy
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def delete_middle(head: ListNode | None) -> ListNode | None:
    """Remove the middle node (the second middle for even lengths)."""
    if head is None or head.next is None:
        return None
    previous = head
    slow = fast = head
    while fast is not None and fast.next is not None:
        previous = slow
        slow = slow.next
        fast = fast.next.next
    previous.next = slow.next
    return head


def delete_all_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop every run of equal adjacent values longer than one node."""
    dummy = ListNode(0)
    tail = dummy
    node = head
    while node is not None:
        run_end = node
        while run_end.next is not None and run_end.next.val == node.val:
            run_end = run_end.next
        if run_end is node:
            tail.next = node
            tail = node
        node = run_end.next
    tail.next = None
    return dummy.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Collapse each run of equal adjacent values to a single node."""
    node = head
    while node is not None and node.next is not None:
        if node.next.val == node.val:
            node.next = node.next.next
        else:
            node = node.next
    return head