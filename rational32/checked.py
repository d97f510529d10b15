# SPDX-FileCopyrightText: 2025 rational32 contributors
# SPDX-License-Identifier: Apache-2.0

"""
Signed 32-bit integer arithmetic that refuses to wrap around.

Python integers are unbounded, so every helper computes the exact result and
validates it against the 32-bit range before handing it back. A result that
does not fit raises :class:`IntegerOverflow` instead.
"""

from public import public
from .errors import IntegerOverflow

public(INT32_MIN = -2**31)
public(INT32_MAX = 2**31 - 1)

@public
def check_int32(value: int) -> int:
    """Returns value unchanged if it is an int within the signed 32-bit range."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{value!r} is not an integer.")
    if not (INT32_MIN <= value <= INT32_MAX):
        raise IntegerOverflow(f"{value} is out of 32-bit range")
    return value

def _result(value, a, op, b):
    if not (INT32_MIN <= value <= INT32_MAX):
        raise IntegerOverflow(f"{a} {op} {b} overflows 32-bit range")
    return value

@public
def checked_add(a: int, b: int) -> int:
    return _result(a + b, a, '+', b)

@public
def checked_sub(a: int, b: int) -> int:
    return _result(a - b, a, '-', b)

@public
def checked_mul(a: int, b: int) -> int:
    return _result(a * b, a, '*', b)

@public
def checked_neg(a: int) -> int:
    # Only INT32_MIN has no negative counterpart.
    if a == INT32_MIN:
        raise IntegerOverflow(f"-({a}) overflows 32-bit range")
    return -a

@public
def gcd(a: int, b: int) -> int:
    """Greatest common divisor via Euclid's algorithm, always non-negative."""
    while b != 0:
        a, b = b, a % b
    return abs(a)

@public
def lcm(a: int, b: int) -> int:
    """
    Least common multiple of two nonzero integers, |a*b| / gcd(a, b).

    The division is applied before the multiplication, so this only raises
    :class:`IntegerOverflow` if the LCM itself exceeds the 32-bit range.
    """
    return checked_mul(abs(a) // gcd(a, b), abs(b))
