"""
Errors
Every failure the scheme can report, as a small exception hierarchy.

All of them derive from ValueError, so callers that only care about
"bad input" can keep catching that.
"""


class ShamirError(ValueError):
    """Base class for all shamir256 errors."""


class InvalidThreshold(ShamirError):
    """Threshold or share count is outside the range the field supports."""


class InvalidShareId(ShamirError):
    """Share id is 0 (reserved for the secret itself) or not a byte."""


class InvalidShare(ShamirError):
    """Share data cannot be read as bytes, e.g. an int list with values above 255."""


class DivisionByZero(ShamirError, ZeroDivisionError):
    """
    A nonzero field element was divided by zero.

    During recovery this means two samples had the same x-coordinate,
    which duplicate-id validation should already have caught.
    """


class RecoveryError(ShamirError):
    """Base class for shares that cannot be combined."""


class InsufficientShares(RecoveryError):
    """Fewer shares than the threshold were supplied."""


class DuplicateShareId(RecoveryError):
    """Two or more shares carry the same id."""


class MismatchedShareLength(RecoveryError):
    """Shares differ in length, or a share has no id byte at all."""
