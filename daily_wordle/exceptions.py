"""
Puzzle Exceptions

Typed failures raised by the puzzle core and the session service.
"""


class PuzzleError(Exception):
    """Base class for every puzzle failure."""


class ConfigurationError(PuzzleError):
    """Word list, epoch or storage backend is unusable. Fatal at startup."""


class GameNotFound(PuzzleError):
    """No session exists for the requested game id."""


class GuessError(PuzzleError):
    """A guess was rejected. Nothing was recorded."""


class InvalidGuessLength(GuessError):
    pass


class InvalidCharacter(GuessError):
    pass


class GameAlreadyOver(GuessError):
    pass
