"""Domain error taxonomy shared by services and the API layer.

Every failure raised by a service carries an :class:`ErrorKind`. The API layer
turns the kind into an HTTP status once, so callers never need to inspect
message text to decide how to react.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure categories."""

    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    DOMAIN_STATE = "domain_state"
    DEPENDENCY = "dependency"


class ShareAByteError(RuntimeError):
    """Base exception for all service-level failures."""

    kind: ErrorKind = ErrorKind.DEPENDENCY

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ShareAByteError):
    """Raised when input is missing, malformed or refers to nothing."""

    kind = ErrorKind.VALIDATION


class RecordNotFoundError(ValidationError):
    """Raised when an identifier does not resolve to a visible record."""

    def __init__(self, model_name: str, record_id: str) -> None:
        super().__init__(f"{model_name} not found")
        self.model_name = model_name
        self.record_id = record_id


class AuthorizationError(ShareAByteError):
    """Raised when the acting user may not touch the record."""

    kind = ErrorKind.AUTHORIZATION


class DomainStateError(ShareAByteError):
    """Raised when the record's current state forbids the operation."""

    kind = ErrorKind.DOMAIN_STATE


class DependencyError(ShareAByteError):
    """Raised when persistence or another collaborator fails."""

    kind = ErrorKind.DEPENDENCY


__all__ = [
    "AuthorizationError",
    "DependencyError",
    "DomainStateError",
    "ErrorKind",
    "RecordNotFoundError",
    "ShareAByteError",
    "ValidationError",
]
