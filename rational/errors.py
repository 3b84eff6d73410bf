"""Error conditions for rational numbers

There is exactly one: a zero denominator. It is never raised. The offending
value is replaced with 1 and a warning is logged so callers (and tests) can
observe it.

"""


class ErrorKind:
    """Names of the conditions reported through the log"""

    INVALID_DENOMINATOR = 'InvalidDenominator'


def warn_invalid_denominator(log, numerator):
    """Report that a zero denominator was replaced with 1

    Args:
        log (logging.Logger): where to report
        numerator (int): the numerator which is kept as-is

    The record carries `error_kind` so handlers can filter on it.

    >>> import logging
    >>> log = logging.getLogger('rational.rational')
    >>> numerator = -2

    """
    log.warning(
        'Denominator cannot be zero. Setting to 1. (numerator=%s)',
        numerator,
        extra={'error_kind': ErrorKind.INVALID_DENOMINATOR},
    )
