# SPDX-FileCopyrightText: 2025 rational32 contributors
# SPDX-License-Identifier: Apache-2.0

import math
from public import public
from .checked import check_int32, checked_add, checked_sub, checked_mul, checked_neg, gcd, lcm
from .errors import DomainError, DivisionByZero
from . import textio

public(FLOAT_SCALE = 1000)

@public
class Rational:
    """
    A fraction of two signed 32-bit integers, always kept in canonical form:
    the denominator is positive and shares no common factor with the
    numerator. Zero is stored as 0/1.

    Construction:

    - Rational() is 0/1, Rational(n) is n/1 and Rational(n, d) reduces n/d.
    - Rational(x) with a float x is a lossy, fixed-precision conversion:
      x is scaled by :data:`FLOAT_SCALE` and truncated toward zero,
      e.g. Rational(0.3333) == Rational(333, 1000).
    - Rational(other) with a Rational copies other.
    - Rational("n/d") parses text, see :func:`rational32.textio.parse`.

    Arithmetic never wraps around: intermediate results leaving the 32-bit
    range raise :class:`IntegerOverflow`. Binary operations return new
    values. Only the numerator/denominator setters and the increment and
    decrement methods change a value in place. Rational objects are
    therefore not hashable.

    The named methods :meth:`add`, :meth:`subtract`, :meth:`multiply`,
    :meth:`divide` and :meth:`compare` carry the arithmetic; the operators
    are bound to them. Each accepts another Rational, an int or a float.
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator=0, denominator=None):
        if denominator is None:
            if isinstance(numerator, Rational):
                numerator, denominator = numerator._numerator, numerator._denominator
            elif isinstance(numerator, float):
                numerator, denominator = scale_float(numerator), FLOAT_SCALE
            elif isinstance(numerator, str):
                numerator, denominator = textio.parse_components(numerator)
            else:
                denominator = 1
        self._assign(numerator, denominator)

    def _assign(self, numerator, denominator):
        check_int32(numerator)
        check_int32(denominator)
        if denominator == 0:
            raise DomainError()
        if denominator < 0:
            numerator = checked_neg(numerator)
            denominator = checked_neg(denominator)
        g = gcd(numerator, denominator)
        self._numerator = numerator // g
        self._denominator = denominator // g

    @classmethod
    def convert(cls, value) -> 'Rational':
        """Returns value as Rational; int and float operands are converted."""
        if isinstance(value, Rational):
            return value
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls(value)
        else:
            raise TypeError(f"Cannot convert {value!r} to {cls.__name__}.")

    @property
    def numerator(self) -> int:
        """Numerator, carries the sign. Assignment re-reduces the value."""
        return self._numerator

    @numerator.setter
    def numerator(self, value: int):
        self._assign(value, self._denominator)

    @property
    def denominator(self) -> int:
        """Denominator, always positive. Assigning zero raises :class:`DomainError`."""
        return self._denominator

    @denominator.setter
    def denominator(self, value: int):
        self._assign(self._numerator, value)

    def copy(self) -> 'Rational':
        return type(self)(self)

    def add(self, other) -> 'Rational':
        other = self.convert(other)
        den = lcm(self._denominator, other._denominator)
        num = checked_add(
            checked_mul(self._numerator, den // self._denominator),
            checked_mul(other._numerator, den // other._denominator),
        )
        return type(self)(num, den)

    def subtract(self, other) -> 'Rational':
        other = self.convert(other)
        den = lcm(self._denominator, other._denominator)
        num = checked_sub(
            checked_mul(self._numerator, den // self._denominator),
            checked_mul(other._numerator, den // other._denominator),
        )
        return type(self)(num, den)

    def multiply(self, other) -> 'Rational':
        other = self.convert(other)
        return type(self)(
            checked_mul(self._numerator, other._numerator),
            checked_mul(self._denominator, other._denominator),
        )

    def divide(self, other) -> 'Rational':
        """Raises :class:`DivisionByZero` if other is zero."""
        other = self.convert(other)
        if other._numerator == 0:
            raise DivisionByZero()
        return type(self)(
            checked_mul(self._numerator, other._denominator),
            checked_mul(self._denominator, other._numerator),
        )

    def negate(self) -> 'Rational':
        return type(self)(checked_neg(self._numerator), self._denominator)

    def compare(self, other) -> int:
        """Returns -1, 0 or 1 if self is less than, equal to or greater than other."""
        other = self.convert(other)
        # Both denominators are positive, so cross-multiplying keeps the order.
        lhs = self._numerator * other._denominator
        rhs = other._numerator * self._denominator
        return (lhs > rhs) - (lhs < rhs)

    def to_float(self) -> float:
        return self._numerator / self._denominator

    def increment(self) -> 'Rational':
        """Adds 1 in place and returns self."""
        self._assign(checked_add(self._numerator, self._denominator), self._denominator)
        return self

    def decrement(self) -> 'Rational':
        """Subtracts 1 in place and returns self."""
        self._assign(checked_sub(self._numerator, self._denominator), self._denominator)
        return self

    def post_increment(self) -> 'Rational':
        """Adds 1 in place and returns a copy of the value before."""
        prior = self.copy()
        self.increment()
        return prior

    def post_decrement(self) -> 'Rational':
        """Subtracts 1 in place and returns a copy of the value before."""
        prior = self.copy()
        self.decrement()
        return prior

    def _operand(self, other):
        # None marks an unsupported operand type, operators then return NotImplemented.
        try:
            return self.convert(other)
        except TypeError:
            return None

    def __add__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __neg__(self):
        return self.negate()

    def __eq__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return self._numerator == other._numerator and self._denominator == other._denominator

    # Mutable through setters and increment/decrement.
    __hash__ = None

    def __gt__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __lt__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __float__(self):
        return self.to_float()

    def __bool__(self):
        return self._numerator != 0

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __str__(self):
        return textio.render(self)

    def __repr__(self):
        return f"R('{self}')"

@public
def scale_float(value: float) -> int:
    """
    Returns value * FLOAT_SCALE truncated toward zero, the numerator of the
    lossy float conversion.
    """
    if not math.isfinite(value):
        raise DomainError(f"cannot convert {value!r} to a fraction")
    return check_int32(int(value * FLOAT_SCALE))

public(R = Rational) # alias
