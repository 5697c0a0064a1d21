"""Classic problems on integers."""

from __future__ import annotations

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the result does not fit in a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= reversed_value <= _INT32_MAX:
        return 0
    return reversed_value


def smallest_number(num: int) -> int:
    """Rearrange the digits of ``num`` into the smallest value without a leading zero.

    The sign is kept, so a negative number gets its digits in descending order.
    """
    negative = num < 0
    digits = sorted(str(abs(num)), reverse=negative)
    first_nonzero = next((i for i, d in enumerate(digits) if d != "0"), None)
    if first_nonzero is not None:
        digits[0], digits[first_nonzero] = digits[first_nonzero], digits[0]
    value = int("".join(digits))
    return -value if negative else value


def count_operations(num1: int, num2: int) -> int:
    """Count the subtractions of the smaller from the larger until one reaches zero.

    Raises ValueError for negative arguments, for which the process never ends.
    """
    if num1 < 0 or num2 < 0:
        raise ValueError("both numbers must be non-negative")
    count = 0
    while num1 and num2:
        if num1 >= num2:
            steps, num1 = divmod(num1, num2)
        else:
            steps, num2 = divmod(num2, num1)
        count += steps
    return count