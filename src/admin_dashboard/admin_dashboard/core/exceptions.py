from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a record addressed by id does not exist."""


class DataAccessError(Exception):
    """Base exception for failures of the data-access layer."""


class ConfigurationError(DataAccessError):
    """A required store setting is missing. Fatal at startup."""


class ConnectionUnavailableError(DataAccessError):
    """The store handle is still absent after the retry policy was exhausted."""


class SchemaError(DataAccessError):
    """Creating the tables failed."""


class OperationFailedError(DataAccessError):
    """A store interaction failed; carries the entity and verb it was doing."""

    def __init__(self, *, entity: str, verb: str, cause: Optional[str] = None):
        self.entity = entity
        self.verb = verb
        self.cause = cause
        message = f"could not {verb} {entity}"
        if cause:
            message = f"{message}: {cause}"
        super().__init__(message)


class ConflictError(OperationFailedError):
    """The write collided with a uniqueness constraint."""
