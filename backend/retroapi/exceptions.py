"""
Retro Board Backend — Custom Exception Hierarchy
=================================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the standard failure envelope with the matching HTTP status.
Who:   Raised by services and the auth dependency; caught by global handlers.

Exception Hierarchy:
    RetroAppError (base)
    ├── ValidationError      → 400 Bad Request
    ├── AuthenticationError  → 401 Unauthorized
    ├── NotFoundError        → 404 Not Found
    ├── ConflictError        → 409 Conflict
    └── DatabaseError        → 500 Internal Server Error

The `message` of every exception is safe to return to clients. The
`context` dict is logged server-side only.
"""

from typing import Any, Dict, Optional


class RetroAppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RetroAppError):
    """
    Raised when client input fails a business rule.

    When:    Password too short, empty username, malformed identifier,
             unknown or unparsable list filter.
    HTTP:    400 Bad Request
    """

    status_code = 400
    error_code = "invalid_input"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(RetroAppError):
    """
    Raised when the Authorization header does not match any access token.

    HTTP:    401 Unauthorized
    """

    status_code = 401
    error_code = "unauthorized"

    def __init__(
        self,
        message: str = "Please, log in",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(RetroAppError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PATCH/DELETE by an id that is not stored, or a reference
             (admin, parent retro) that cannot be resolved.
    HTTP:    404 Not Found

    A custom `message` replaces the generated one; signin uses this so
    that unknown users and wrong passwords are indistinguishable.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource


class ConflictError(RetroAppError):
    """
    Raised when a write would violate a uniqueness constraint.

    When:    Signup with a username that is already taken.
    HTTP:    409 Conflict
    """

    status_code = 409
    error_code = "conflict"

    def __init__(
        self,
        message: str = "The resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(RetroAppError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Driver errors,
    statements and constraint names are logged server-side only.
    """

    status_code = 500
    error_code = "internal_error"

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
