"""Custom exceptions for diff highlighting."""

from typing import Any


class DiffHighlightError(Exception):
    """Base exception for diff highlighting operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class DiffHighlightConfigError(DiffHighlightError):
    """Raised when a highlight configuration cannot be loaded."""


class DiffReadError(DiffHighlightError):
    """Raised when a diff file cannot be read."""
