"""Exception classes for the Berlin Clock converter.

All custom exceptions inherit from ApplicationError to keep a consistent
hierarchy. Classes support two patterns:
1. No-argument raise: raise ValidationError()
2. Contextual attributes: err = InvalidTimeFormatError(value="25:00:00"); raise err
"""

from typing import Any

INVALID_TIME_FORMAT_MESSAGE = "Time must be a string between 0:00:00 (or 00:00:00) and 24:59:59."


class ApplicationError(Exception):
    """Base exception for all application errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ValidationError(ApplicationError):
    """Data validation failed."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Data validation failed"
        super().__init__(message, **kwargs)


class InvalidTimeFormatError(ValidationError):
    """Time string does not match the supported H:MM:SS / HH:MM:SS grammar."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = INVALID_TIME_FORMAT_MESSAGE
        kwargs.setdefault("value", None)
        super().__init__(message, **kwargs)


class TimeFormatInvariantError(ApplicationError):
    """A validated time string could not be parsed."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Validated time string could not be parsed"
        super().__init__(message, **kwargs)


__all__ = [
    "INVALID_TIME_FORMAT_MESSAGE",
    "ApplicationError",
    "InvalidTimeFormatError",
    "TimeFormatInvariantError",
    "ValidationError",
]
