"""Custom exception classes for the Campus Portal backend.

This module defines application-specific exceptions following Google Python
Style Guide. Every exception carries the HTTP status code it maps to; the
application-level exception handler turns them into ``{"message": ...}``
responses.
"""


class CampusError(Exception):
    """Base exception for all Campus Portal errors."""

    status_code = 500

    def __init__(self, message: str = "Server error"):
        """Initialize the exception.

        Args:
            message: Short, client-safe description of the failure.
        """
        self.message = message
        super().__init__(message)


class NotFoundError(CampusError):
    """Raised when a requested document cannot be found."""

    status_code = 404

    def __init__(self, resource: str, resource_id: str = None):
        """Initialize the exception.

        Args:
            resource: Display name of the resource, e.g. "Course".
            resource_id: The ID that did not resolve.
        """
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found")


class ForbiddenError(CampusError):
    """Raised when an authenticated actor is not authorized for an action."""

    status_code = 403

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)


class UnauthorizedError(CampusError):
    """Raised when the request identity is missing or invalid."""

    status_code = 401


class ValidationError(CampusError):
    """Raised when request data validation fails."""

    status_code = 400


class InvalidStateError(CampusError):
    """Raised when an action is not allowed in the document's current state."""

    status_code = 400


class ConflictError(CampusError):
    """Raised when an actor already has an entry in a membership list."""

    status_code = 409


class CapacityError(ConflictError):
    """Raised when a capacity-limited list is full."""

    pass
