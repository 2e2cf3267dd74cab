"""Deep copying of linked lists whose nodes carry a random pointer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class RandomNode:
    """A list node with an extra pointer to any node of the list, or None."""

    val: int = 0
    next: RandomNode | None = None
    random: RandomNode | None = None

    def __iter__(self) -> Iterator[RandomNode]:
        """Yield this node and every node after it."""
        node: RandomNode | None = self
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"RandomNode(val={self.val!r})"


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Return a deep copy of the list, with random pointers mapped to the copies."""
    if head is None:
        return None
    originals = list(head)
    copies = {id(node): RandomNode(node.val) for node in originals}
    for node in originals:
        copy = copies[id(node)]
        if node.next is not None:
            copy.next = copies[id(node.next)]
        if node.random is not None:
            copy.random = copies[id(node.random)]
    return copies[id(head)]