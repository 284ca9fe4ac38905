"""Custom exception hierarchy for puzzle generation."""


class PuzzleError(Exception):
    """Base exception for generator failures."""


class WordSourceError(PuzzleError):
    """Raised when a word source cannot be read or fetched."""


class PlacementError(PuzzleError):
    """Raised when a word cannot be committed without breaking the grid."""


class ValidationError(PuzzleError):
    """Raised when the grid integrity checks fail."""
