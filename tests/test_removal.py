from itertools import groupby

import pytest

from listkit.nodes import from_values, to_values
from listkit.removal import (
    delete_all_duplicates,
    delete_duplicates,
    delete_middle,
    remove_elements,
    remove_nth_from_end,
)


def test_remove_nth_from_end_middle():
    head = from_values([1, 2, 3, 4, 5])
    assert to_values(remove_nth_from_end(head, 2)) == [1, 2, 3, 5]


def test_remove_nth_from_end_first_node():
    head = from_values([1, 2])
    assert to_values(remove_nth_from_end(head, 2)) == [2]


def test_remove_nth_from_end_last_node():
    head = from_values([1, 2])
    assert to_values(remove_nth_from_end(head, 1)) == [1]


def test_remove_nth_from_end_single_node():
    assert remove_nth_from_end(from_values([1]), 1) is None


def test_remove_nth_from_end_empty():
    assert remove_nth_from_end(None, 1) is None


@pytest.mark.parametrize("n", [0, -1, 4])
def test_remove_nth_from_end_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(from_values([1, 2, 3]), n)


@pytest.mark.parametrize(
    "values,val",
    [([1, 2, 6, 3, 4, 5, 6], 6), ([7, 7, 7, 7], 7), ([], 1), ([1, 2, 2, 1], 2), ([2, 1], 1)],
)
def test_remove_elements(values, val):
    result = to_values(remove_elements(from_values(values), val))
    assert result == [v for v in values if v != val]


def test_remove_elements_empty_result():
    assert remove_elements(from_values([7, 7]), 7) is None


@pytest.mark.parametrize("values", [[1, 3, 4, 7, 1, 2, 6], [1, 2, 3, 4], [2, 1], [1, 2, 3]])
def test_delete_middle_removes_middle_index(values):
    result = to_values(delete_middle(from_values(values)))
    middle = len(values) // 2
    assert result == values[:middle] + values[middle + 1:]


def test_delete_middle_single_node():
    assert delete_middle(from_values([1])) is None
    assert delete_middle(None) is None


def test_delete_all_duplicates_example():
    head = from_values([1, 2, 3, 3, 4, 4, 5])
    assert to_values(delete_all_duplicates(head)) == [1, 2, 5]


@pytest.mark.parametrize(
    "values",
    [[1, 1, 1, 2, 3], [1, 1, 2, 2], [1, 2, 2, 3], [1, 2, 2, 3, 4, 4], [], [5], [1, 1, 2, 3, 3]],
)
def test_delete_all_duplicates_keeps_only_unique_runs(values):
    result = to_values(delete_all_duplicates(from_values(values)))
    assert result == [k for k, group in groupby(values) if len(list(group)) == 1]


@pytest.mark.parametrize("values", [[1, 1, 2], [1, 1, 2, 3, 3], [], [4], [-99999, -99999, 1], [1, 2, 1]])
def test_delete_duplicates_collapses_runs(values):
    result = to_values(delete_duplicates(from_values(values)))
    assert result == [k for k, _ in groupby(values)]


def test_delete_duplicates_keeps_head_node():
    head = from_values([2, 2, 3])
    assert delete_duplicates(head) is head