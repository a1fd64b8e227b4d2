"""Custom exception hierarchy for crossword generation."""


class CrosswordError(Exception):
    """Base exception for crossword maker failures."""


class ConfigurationError(CrosswordError):
    """Raised when the input words can never be placed on the requested grid."""


class InvalidGridOperation(CrosswordError):
    """Raised when a grid is used outside its contract (wrong kind, bad coordinates)."""


class SearchLimitReached(CrosswordError):
    """Raised inside the solver when the time or node limit is spent."""


class ValidationError(CrosswordError):
    """Raised when the crossword integrity checks fail."""
