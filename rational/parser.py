"""Parse the `num/den` text form back into a Rational"""

import re

from .rational import Rational

P = r'\s*(?P<num>[+-]?\d+)\s*(?:/\s*(?P<den>[+-]?\d+))?\s*'


def parse(text, log=None):
    """Parse `text` into a normalized Rational

    Args:
        text (str): `"<int>/<int>"` or a bare `"<int>"`
        log (logging.Logger): diagnostic sink handed to the new Rational

    Returns:
        r (Rational): the parsed value; a zero denominator is replaced with 1
        and reported through `log`

    Raises:
        ValueError: if `text` is not of that form

    >>> text = '40/-60'

    """
    m = re.fullmatch(P, text)
    if not m:
        raise ValueError(f'invalid literal for Rational: {text!r}')
    num, den = m.group('num'), m.group('den')
    return Rational(int(num), int(den) if den is not None else 1, log=log)
