"""Walk through the Rational API

Script for showing off what a Rational can do. Every line printed is of the
form `<label>: <value>` so the output can be compared against the comments in
the source.

"""

import logging

import plac

from rational.parser import parse
from rational.rational import Rational


@plac.annotations(
        loglevel=('logging level for the zero denominator warning', 'option', None, str),
        a=('first operand as num/den', 'option', None, str),
        b=('second operand as num/den', 'option', None, str),
)
def main(loglevel='INFO', a='3/4', b='1/2'):
    """Print the walkthrough for the operands `a` and `b`

    Args:
        loglevel (str): name of a `logging` level
        a (str): first operand, e.g. `3/4`
        b (str): second operand, e.g. `1/2`

    Returns:
        None

    With the defaults the output matches the comments below.

    """
    level = logging.getLevelName(loglevel.upper())
    if not isinstance(level, int):
        raise ValueError(f'unknown logging level: {loglevel!r}')
    logging.basicConfig(level=level)

    r1 = parse(a)
    r2 = Rational()
    print(f'r1: {r1}')                      # r1: 3/4
    print(f'r2: {r2}')                      # r2: 1/1

    other = parse(b)
    r2.numerator = other.numerator
    r2.denominator = other.denominator
    print(f'r2: {r2}')                      # r2: 1/2

    print(f'sum: {r1.add(r2)}')             # sum: 5/4
    print(f'diff: {r1.subtract(r2)}')       # diff: 1/4

    r3 = Rational(-2, 3)
    print(f'r3: {r3}')                      # r3: -2/3
    r4 = Rational(40, -60)
    print(f'r4: {r4}')                      # r4: -2/3
    r5 = r4.copy()
    print(f'r5: {r5}')                      # r5: -2/3

    print(f'gcd(40, 60): {Rational.gcd(40, 60)}')   # gcd(40, 60): 20

    r5.denominator = 0                      # logs InvalidDenominator
    print(f'r5: {r5}')                      # r5: -2/1
    r4.denominator = -10
    print(f'r4: {r4}')                      # r4: 1/5

    print(f'r6: {r1 + r2}')                 # r6: 5/4
    print(f'r7: {r1 - r2}')                 # r7: 1/4
    print(f'r8: {5 + r1}')                  # r8: 23/4
    print(f'r9: {r1 + 5}')                  # r9: 23/4

    r10 = r2.copy()
    print(f'r10++: {r10.post_increment()}')  # r10++: 1/2
    print(f'r10: {r10}')                    # r10: 3/2
    print(f'++r10: {r10.increment()}')      # ++r10: 5/2
    print(f'--r10: {r10.decrement()}')      # --r10: 3/2
    print(f'r10--: {r10.post_decrement()}')  # r10--: 3/2
    print(f'r10: {r10}')                    # r10: 1/2

    r11 = r1.copy()
    r11 += r2
    print(f'r11: {r11}')                    # r11: 5/4

    print(f'r1 < r2: {r1 < r2}')            # r1 < r2: False
    print(f'r2 == 2/4: {r2 == Rational(2, 4)}')     # r2 == 2/4: True


if __name__ == '__main__':
    plac.call(main)
