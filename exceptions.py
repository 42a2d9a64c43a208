"""
exceptions.py
-------------
Exception hierarchy for the Lunchly data-access layer.

Every error carries an HTTP-style ``status`` so route handlers can turn it
into a response without inspecting the message.
"""


class LunchlyError(Exception):
    """Base exception for all Lunchly errors."""

    status: int = 500

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class NotFoundError(LunchlyError):
    """Raised when a requested record does not exist."""

    status = 404


class ValidationError(LunchlyError):
    """Raised when caller-supplied input is unusable."""

    status = 400


class InvalidSearchError(ValidationError):
    """Raised when a customer name search term cannot be interpreted."""


class RowMappingError(LunchlyError):
    """Raised when a database row lacks a column a model requires."""
