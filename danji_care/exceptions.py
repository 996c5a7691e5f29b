"""Custom exception hierarchy for danji-care."""


class DanjiCareError(Exception):
    """Base exception for all danji-care errors."""


class EntityNotFoundError(DanjiCareError):
    """Raised when a referenced entity does not exist."""


class InvalidEntityStateError(DanjiCareError):
    """Raised when an entity is in an invalid state for the operation."""


class ValidationError(DanjiCareError):
    """Raised when user-supplied input is rejected."""


class InvalidMonthDayError(ValidationError, ValueError):
    """Raised when a ``MM-DD`` renewal date cannot be parsed."""


class ConfigurationError(DanjiCareError):
    """Raised when configuration is invalid or missing."""


class StorageError(DanjiCareError):
    """Raised when a storage backend cannot complete a write."""


class PhotoReadError(DanjiCareError):
    """Raised when any photo in a submission batch cannot be read."""


class GeolocationError(DanjiCareError):
    """Raised by position sources when a position cannot be obtained."""
