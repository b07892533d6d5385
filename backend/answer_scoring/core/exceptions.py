"""Scoring-specific exceptions for typed answer scoring."""


class ScoringError(Exception):
    """Base exception for scoring operations."""

    pass


class InvalidArgumentError(ScoringError, ValueError):
    """Raised when a scoring call receives arguments it cannot work with."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
