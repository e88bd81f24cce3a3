"""Custom exception hierarchy for puzzle grid generation."""


class PuzzleGridError(Exception):
    """Base exception for generator failures."""


class PlacementFailure(PuzzleGridError):
    """Raised when the crossword placer cannot place a single word."""


class ContentParseError(PuzzleGridError):
    """Raised when generator output is not a usable word payload."""


class ContentExhaustedError(PuzzleGridError):
    """Raised when every content attempt failed to yield a playable puzzle."""
