"""Shared exceptions for the application.

This module contains the domain error taxonomy raised by the channel store
and channel service. The HTTP layer (app.main) maps each kind to a status
code; nothing below the routes knows about HTTP.

Error Kinds:
    ConflictError: (title, username) pair already held by another channel (409)
    NotFoundError: No channel with the given id (404)
    ForbiddenError: Delete blocked by dependent publications (403)
    InvalidInputError: Missing or empty required fields (400)
    ConstraintViolationError: Database constraint rejected a write (store level)

Persistence failures other than constraint violations are not wrapped:
they propagate as sqlalchemy.exc.SQLAlchemyError.
"""


class ChannelRegistryError(Exception):
    """Base class for all domain errors raised by the channel registry.

    Attributes:
        message: Human-readable error message, returned as the response detail.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConflictError(ChannelRegistryError):
    """Raised when a channel with the same (title, username) already exists."""

    pass


class NotFoundError(ChannelRegistryError):
    """Raised when no channel matches the requested id.

    Attributes:
        channel_id: The id that was looked up.
    """

    def __init__(self, channel_id: int, message: str | None = None):
        self.channel_id = channel_id
        super().__init__(message or f"Channel {channel_id} not found")


class ForbiddenError(ChannelRegistryError):
    """Raised when a channel cannot be deleted because publications reference it."""

    pass


class InvalidInputError(ChannelRegistryError):
    """Raised when required channel fields are missing or empty.

    Attributes:
        errors: Per-field validation errors (pydantic error dicts).
    """

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class ConstraintViolationError(ChannelRegistryError):
    """Raised by the store when the database rejects a write on a constraint.

    This covers the composite (title, username) uniqueness constraint and the
    publications foreign key. The service translates it into ConflictError or
    ForbiddenError depending on the operation.

    Attributes:
        constraint: Constraint name reported by the driver, when available.
    """

    def __init__(self, message: str, constraint: str | None = None):
        self.constraint = constraint
        super().__init__(message)

    def __str__(self) -> str:
        base_message = super().__str__()
        if self.constraint:
            return f"{base_message} (constraint={self.constraint})"
        return base_message
