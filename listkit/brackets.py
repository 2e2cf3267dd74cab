"""Bracket matching and balanced parenthesis generation."""

from __future__ import annotations

from collections.abc import Iterator

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def is_valid(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed in the right order.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack[-1] != _PAIRS[char]:
                return False
            stack.pop()
    return not stack


def _balanced(n: int, opened: int, closed: int, prefix: str) -> Iterator[str]:
    if opened == n and closed == n:
        yield prefix
        return
    if opened < n:
        yield from _balanced(n, opened + 1, closed, prefix + "(")
    if closed < opened:
        yield from _balanced(n, opened, closed + 1, prefix + ")")


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` bracket pairs, in sorted order."""
    if n <= 0:
        return []
    return list(_balanced(n, 0, 0, ""))