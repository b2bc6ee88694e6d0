"""
corrstat Exceptions
===================
Centralized exception hierarchy for the corrstat package.

Only caller contract violations raise.  Numerically undefined results
(empty samples, zero variance, zero MAD, NaN inputs) are returned as NaN.
"""


class CorrStatError(Exception):
    """Base class for all corrstat exceptions."""
    pass


class LengthMismatchError(CorrStatError, ValueError):
    """Raised when paired or weighted inputs do not have the same length."""

    def __init__(self, *lengths: int, what: str = "inputs"):
        self.lengths = lengths
        joined = ", ".join(str(n) for n in lengths)
        super().__init__(f"{what} lengths differ: {joined}.")


class InvalidArgumentError(CorrStatError, ValueError):
    """Raised when a function receives an argument of an invalid type or value."""
    pass
