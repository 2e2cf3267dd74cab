import pytest

from listkit.nodes import from_values, to_values
from listkit.numbers import add_two_numbers, is_power_of_two, plus_one


@pytest.mark.parametrize("exponent", range(0, 31))
def test_is_power_of_two_true(exponent):
    assert is_power_of_two(2**exponent) is True


@pytest.mark.parametrize("n", [0, -1, -2, -16, 3, 6, 12, 1023])
def test_is_power_of_two_false(n):
    assert is_power_of_two(n) is False


def _digits(number):
    return [int(ch) for ch in str(number)]


@pytest.mark.parametrize("number", [0, 1, 9, 123, 129, 4321, 999, 99999])
def test_plus_one_matches_integer_increment(number):
    assert plus_one(_digits(number)) == _digits(number + 1)


def test_plus_one_all_nines():
    assert plus_one([9, 9]) == [1, 0, 0]


def test_plus_one_empty():
    assert plus_one([]) == []


def test_plus_one_does_not_mutate_input():
    digits = [1, 9]
    plus_one(digits)
    assert digits == [1, 9]


def _as_list(number):
    return from_values(int(ch) for ch in reversed(str(number)))


def _as_int(head):
    return int("".join(str(d) for d in reversed(to_values(head))))


@pytest.mark.parametrize("a,b", [(342, 465), (0, 0), (9999999, 9999), (5, 5), (1, 99), (81, 0)])
def test_add_two_numbers_matches_integer_sum(a, b):
    assert _as_int(add_two_numbers(_as_list(a), _as_list(b))) == a + b


def test_add_two_numbers_example():
    result = add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4]))
    assert to_values(result) == [7, 0, 8]


def test_add_two_numbers_with_empty_returns_other():
    other = from_values([1, 2])
    assert add_two_numbers(None, other) is other
    assert add_two_numbers(other, None) is other
    assert add_two_numbers(None, None) is None