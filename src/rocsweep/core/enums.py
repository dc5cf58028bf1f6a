"""Core enumerations for rocsweep."""
from enum import StrEnum


class UndefinedRatePolicy(StrEnum):
    """What to do with a rate whose denominator is zero.

    A dataset without negatives leaves FPR undefined; one without
    positives leaves TPR undefined.
    """

    RAISE = "raise"
    ZERO = "zero"
    ONE = "one"
