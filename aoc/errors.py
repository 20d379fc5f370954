from __future__ import annotations


class AocError(Exception):
    """Base class for errors reported back to whoever ran a day."""


class ParseError(AocError, ValueError):
    """The puzzle input could not be parsed."""


class EvaluationError(AocError, ArithmeticError):
    """A parsed structure could not be evaluated."""


class EncodeError(AocError, ValueError):
    """A value does not fit the wire format it is being encoded into."""


class UnknownDayError(AocError, LookupError):
    """No solver is registered for the requested day."""


__all__ = (
    "AocError",
    "ParseError",
    "EvaluationError",
    "EncodeError",
    "UnknownDayError",
)
