"""

Class for rational numbers.

A rational number is the ratio of two integers. Examples of rational numbers
include...

- 3/2
- 1/1
- -2/3

Rational numbers are always kept normalized: reduced, with the sign carried by
the numerator and a positive denominator. `4/6` is stored as `2/3` and `40/-60`
as `-2/3`.

"""

import functools
import logging
import math

from .errors import warn_invalid_denominator

logger = logging.getLogger(__name__)


@functools.total_ordering
class Rational:
    """A normalized fraction `numerator/denominator`"""

    def __init__(self, numerator=1, denominator=1, log=None):
        """Constructor

        The numerator is stored as given and the denominator goes through the
        `denominator` setter, which normalizes the pair.

        >>> self = Rational.__new__(Rational)
        >>> numerator = 40
        >>> denominator = -60

        """
        self.log = log or logger
        self._numerator = numerator
        self._denominator = 1
        self.denominator = denominator

    @staticmethod
    def gcd(a, b):
        """Return the greatest common divisor of `a` and `b`

        Signs are ignored. If either operand is 0 the result is 1, so a zero
        numerator leaves the denominator alone during normalization.

        >>> Rational.gcd(40, 60)
        20
        >>> Rational.gcd(0, 5)
        1

        """
        a, b = abs(a), abs(b)
        if a == 0 or b == 0:
            return 1
        return math.gcd(a, b)

    def _simplify(self):
        """Reduce the fraction and move the sign onto the numerator"""
        common = Rational.gcd(self._numerator, self._denominator)
        if common != 0:
            self._numerator //= common
            self._denominator //= common
        if self._denominator < 0:
            self._numerator = -self._numerator
            self._denominator = -self._denominator

    def _coerce(self, other):
        if isinstance(other, Rational):
            return other
        if isinstance(other, int):
            return Rational(other, 1, log=self.log)
        return None

    def _operand(self, other, verb):
        coerced = self._coerce(other)
        if coerced is None:
            raise TypeError(f'cannot {verb} Rational and {type(other).__name__}')
        return coerced

    @property
    def numerator(self):
        return self._numerator

    @numerator.setter
    def numerator(self, value):
        self._numerator = value
        self._simplify()

    @property
    def denominator(self):
        return self._denominator

    @denominator.setter
    def denominator(self, value):
        """Set the denominator

        A zero is replaced with 1 and reported through `self.log`. Nothing is
        raised and the numerator is left untouched.

        """
        if value == 0:
            warn_invalid_denominator(self.log, self._numerator)
            self._denominator = 1
        else:
            self._denominator = value
            self._simplify()

    def copy(self):
        """Return a field-by-field copy

        The source is already normalized so the copy is not normalized again.

        """
        other = Rational.__new__(Rational)
        other.log = self.log
        other._numerator = self._numerator
        other._denominator = self._denominator
        return other

    __copy__ = copy

    @classmethod
    def from_string(cls, text, log=None):
        """Parse `num/den` (or a bare integer) into a Rational"""
        from .parser import parse
        return parse(text, log=log)

    def to_string(self):
        return f'{self._numerator}/{self._denominator}'

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f'Rational({self._numerator}, {self._denominator})'

    def __format__(self, format_spec):
        return format(self.to_string(), format_spec)

    def add(self, other):
        """Return `self + other` as a new Rational

        Args:
            other (Rational or int): the addend; an int `n` counts as `n/1`

        Returns:
            r (Rational): `(a*d + c*b) / (b*d)`, normalized by the constructor

        >>> self = Rational(3, 4)
        >>> other = Rational(1, 2)

        """
        other = self._operand(other, 'add')
        n = self._numerator * other._denominator + other._numerator * self._denominator
        d = self._denominator * other._denominator
        return Rational(n, d, log=self.log)

    def subtract(self, other):
        """Return `self - other` as a new Rational

        >>> self = Rational(3, 4)
        >>> other = Rational(1, 2)

        """
        other = self._operand(other, 'subtract')
        n = self._numerator * other._denominator - other._numerator * self._denominator
        d = self._denominator * other._denominator
        return Rational(n, d, log=self.log)

    def __add__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        # int + Rational
        if not isinstance(other, int):
            return NotImplemented
        return Rational(other * self._denominator + self._numerator, self._denominator, log=self.log)

    def __sub__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Rational(other * self._denominator - self._numerator, self._denominator, log=self.log)

    def __iadd__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        self._numerator = self._numerator * other._denominator + other._numerator * self._denominator
        self._denominator *= other._denominator
        self._simplify()
        return self

    def __isub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        self._numerator = self._numerator * other._denominator - other._numerator * self._denominator
        self._denominator *= other._denominator
        self._simplify()
        return self

    def increment(self):
        """Add one in place and return `self` (prefix `++`)

        >>> self = Rational(1, 2)

        """
        self._numerator += self._denominator
        self._simplify()
        return self

    def decrement(self):
        """Subtract one in place and return `self` (prefix `--`)"""
        self._numerator -= self._denominator
        self._simplify()
        return self

    def post_increment(self):
        """Add one in place and return the value from before (postfix `++`)

        >>> self = Rational(1, 2)

        """
        before = self.copy()
        self.increment()
        return before

    def post_decrement(self):
        before = self.copy()
        self.decrement()
        return before

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        # denominators are positive so cross-multiplying keeps the order
        return self._numerator * other._denominator < other._numerator * self._denominator

    def __eq__(self, other):
        """Compare field by field

        Both sides are normalized, so equal values have equal fields.

        """
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._numerator == other._numerator and self._denominator == other._denominator

    __hash__ = None
