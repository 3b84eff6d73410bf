"""A normalized rational number type"""

from .errors import ErrorKind
from .parser import parse
from .rational import Rational

gcd = Rational.gcd

__all__ = ['ErrorKind', 'Rational', 'gcd', 'parse']
