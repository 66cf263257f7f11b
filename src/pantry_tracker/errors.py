"""Application error types."""


class PantryTrackerError(Exception):
    """Base error for the pantry tracker."""


class InvalidInputError(PantryTrackerError, ValueError):
    """Raised when input data violates a precondition."""


class NotFoundError(PantryTrackerError):
    """Raised when a requested entity does not exist."""


class PermissionDeniedError(PantryTrackerError):
    """Raised when a user acts on an entity they do not own."""


class ConflictError(PantryTrackerError):
    """Raised when an entity would duplicate an existing one."""


class SuggestionsUnavailableError(PantryTrackerError):
    """Raised when AI recipe suggestions are not configured."""
