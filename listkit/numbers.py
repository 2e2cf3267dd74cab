"""Number puzzles over integers, digit lists and digit linked lists."""

from __future__ import annotations

from itertools import zip_longest

from listkit.nodes import ListNode, from_values, to_values


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def plus_one(digits: list[int]) -> list[int]:
    """Add one to a number given as decimal digits, most significant first."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] == 9:
            result[index] = 0
        else:
            result[index] += 1
            return result
    if not result:
        return result
    return [1, *result]


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as digit lists, least significant digit first.

    If either list is empty the other one is returned unchanged.
    """
    if l1 is None:
        return l2
    if l2 is None:
        return l1
    digits: list[int] = []
    carry = 0
    for a, b in zip_longest(to_values(l1), to_values(l2), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return from_values(digits)