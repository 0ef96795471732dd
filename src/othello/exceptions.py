"""
Error types raised by the Othello rules engine.
"""


class OthelloError(Exception):
    """Base class for all errors raised by this package."""


class InvalidInputError(OthelloError, ValueError):
    """A submitted move was rejected. The turn is re-requested, nothing changes."""


class MalformedInputError(InvalidInputError):
    """The input line does not decode to a coordinate pair."""


class IllegalMoveError(InvalidInputError):
    """The coordinate decodes but is not a legal move for the current player."""


class InputExhaustedError(OthelloError, RuntimeError):
    """No more input can be read; there is no fallback move so the run must stop."""


class BoardFormatError(OthelloError, ValueError):
    """Text could not be parsed back into a board."""
