import pytest

from algodrills.numbers import count_operations, reverse_integer, smallest_number


@pytest.mark.parametrize("value", [123, 45, 1200])
def test_reverse_integer_keeps_sign(value):
    assert reverse_integer(-value) == -reverse_integer(value)


def test_reverse_integer_drops_trailing_zeros():
    assert reverse_integer(120) == reverse_integer(12)
    assert reverse_integer(0) == 0


@pytest.mark.parametrize(
    "value", [1534236469, 2**31 - 1, -(2**31), -1563847412]
)
def test_reverse_integer_overflow_gives_zero(value):
    assert reverse_integer(value) == 0


def test_reverse_integer_example():
    assert reverse_integer(123) == 321


@pytest.mark.parametrize("value", [310, 7605, 1000, 9, 2020, 54321])
def test_smallest_number_positive_invariants(value):
    result = smallest_number(value)
    assert sorted(str(result)) == sorted(str(value))
    assert not str(result).startswith("0")
    assert result <= value


@pytest.mark.parametrize("value", [-310, -7605, -1000, -12345])
def test_smallest_number_negative_invariants(value):
    result = smallest_number(value)
    assert result < 0
    assert sorted(str(-result)) == sorted(str(-value))
    assert result <= value
    assert list(str(-result)) == sorted(str(-value), reverse=True)


def test_smallest_number_examples():
    assert smallest_number(310) == 103
    assert smallest_number(-7605) == -7650
    assert smallest_number(0) == 0


def test_count_operations_examples():
    assert count_operations(2, 3) == 3
    assert count_operations(10, 10) == 1


@pytest.mark.parametrize("value", [0, 1, 17])
def test_count_operations_with_zero(value):
    assert count_operations(0, value) == 0
    assert count_operations(value, 0) == 0


@pytest.mark.parametrize("value", [1, 5, 1000])
def test_count_operations_with_one(value):
    assert count_operations(value, 1) == value


@pytest.mark.parametrize("pair", [(2, 3), (7, 45), (100, 9)])
def test_count_operations_symmetric(pair):
    a, b = pair
    assert count_operations(a, b) == count_operations(b, a)


def test_count_operations_rejects_negative():
    with pytest.raises(ValueError):
        count_operations(-1, 1)
    with pytest.raises(ValueError):
        count_operations(3, -2)