"""Errors raised by the workout core."""

from __future__ import annotations


class TrackerError(Exception):
    """Base class for recoverable fitness tracker errors."""


class ValidationError(TrackerError, ValueError):
    """Raised when user input is blank, unparsable or out of range."""

    def __init__(self, message: str, *, field: str, value: object = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class WorkoutNotFoundError(TrackerError, LookupError):
    """Raised when no logged workout matches a name."""

    def __init__(self, name: str | None) -> None:
        super().__init__(f"Workout not found: '{name}'")
        self.name = name


class ExportError(TrackerError, OSError):
    """Raised when workout data cannot be written."""
