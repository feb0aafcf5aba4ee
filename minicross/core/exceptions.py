"""Custom exception hierarchy for crossword layout generation."""


class CrosswordError(Exception):
    """Base exception for generator failures."""


class WordPoolError(CrosswordError):
    """Raised when a word pool cannot be loaded or fetched."""


class PlacementExhausted(CrosswordError):
    """Raised when a search round places no remaining word."""


class DisconnectedLayout(CrosswordError):
    """Raised when every word was placed but the layout splits into groups."""


class GridFrozenError(CrosswordError):
    """Raised when a frozen grid is mutated."""


class ValidationError(CrosswordError):
    """Raised when the layout integrity checks fail."""
