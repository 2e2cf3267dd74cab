# listkit

Algorithms on singly linked lists, plus a few small helpers for digit arrays,
powers of two and bracket strings. It is a library only; there is no command
to run.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Building and reading lists

```python
from listkit.nodes import ListNode, from_values, to_values, decimal_value, middle_node

head = from_values([1, 0, 1])
to_values(head)          # [1, 0, 1]
decimal_value(head)      # 5
middle_node(from_values([1, 2, 3, 4])).val   # 3
```

`ListNode` has `val` and `next`, compares by identity, and iterating over a
node yields it and every node after it. `from_values` returns `None` for an
empty sequence, and the list functions accept `None` as the empty list.

## Modules

- `listkit.nodes`: `ListNode`, `from_values`, `to_values`, `decimal_value`
  (the list read as binary digits, most significant first), `middle_node`
  (the second middle for even lengths).
- `listkit.cycles`: `has_cycle`, `detect_cycle` (the node where a cycle
  starts, or `None`), `intersection_node` (the first node shared by two
  acyclic lists, or `None`).
- `listkit.removal`: `remove_nth_from_end`, `remove_elements`,
  `delete_middle`, `delete_duplicates` (collapse each run of equal adjacent
  values to one node), `delete_all_duplicates` (drop every run of equal
  adjacent values longer than one node).
- `listkit.reshape`: `reorder_list` (L0, Ln, L1, Ln-1, ... in place),
  `insertion_sort_list` (stable), `reverse_list`, `merge_two_lists` (ties
  taken from the first list), `swap_pairs`, `rotate_right`, `partition`
  (values below `x` first, relative order kept), `reverse_between` (1-based
  positions), `is_palindrome` (an empty list is not a palindrome).
- `listkit.random_list`: `RandomNode` (with `val`, `next` and `random`) and
  `copy_random_list`, a deep copy whose `random` pointers point into the copy.
- `listkit.numbers`: `is_power_of_two`, `plus_one` (returns a new digit list,
  most significant digit first), `add_two_numbers` on numbers stored as digit
  lists with the least significant digit first; if either list is empty the
  other is returned as is.
- `listkit.brackets`: `is_valid` for balanced `()[]{}` strings (other
  characters are ignored) and `generate_parenthesis` for every well-formed
  string of `n` pairs, in sorted order.

## Example

```python
from listkit.nodes import from_values, to_values
from listkit.reshape import reverse_between, rotate_right
from listkit.numbers import add_two_numbers
from listkit.brackets import is_valid, generate_parenthesis

to_values(reverse_between(from_values([1, 2, 3, 4, 5]), 2, 4))  # [1, 4, 3, 2, 5]
to_values(rotate_right(from_values([1, 2, 3, 4, 5]), 2))        # [4, 5, 1, 2, 3]
to_values(add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4])))  # [7, 0, 8]
is_valid("([]{})")           # True
generate_parenthesis(2)      # ['(())', '()()']
```

Functions that rearrange or remove nodes work in place: they relink the nodes
they are given and return the new head (`reorder_list` returns `None`).

## Errors

- `remove_nth_from_end` raises `ValueError` when `n` is outside 1 to the
  list's length (a one-node list simply becomes empty for any positive `n`).
- `rotate_right` raises `ValueError` for a negative `k`.
- `reverse_between` raises `ValueError` when `left` is below 1, or when
  `right` is past the end while `left` is before the last node. It leaves the
  list unchanged when `left >= right` or `left` is at or past the last node.