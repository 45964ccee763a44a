"""Error Hierarchy — typed, categorized exceptions for every Makesta failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() always carries a top-level "message" string
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with MakestaError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    resource: str | None = None
    debug_info: dict[str, Any] | None = None


class MakestaError(Exception):
    """Base exception for all Makesta errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "message": self.message,
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InputValidationError(MakestaError):
    """Missing or malformed input the schema layer could not catch."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class DuplicateUsernameError(MakestaError):
    """Username already taken."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        super().__init__(
            "Username is already in use",
            "DUPLICATE_USERNAME", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 400,
        )
        self.username = username


class DuplicateEmailError(MakestaError):
    """Email already registered."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Email is already registered",
            "DUPLICATE_EMAIL", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 400,
        )


class InvalidCredentialsError(MakestaError):
    """Login failed. Message never says which field was wrong."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Username or password is incorrect",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 400,
        )


class SessionClosedError(MakestaError):
    """Attendance recorded against a closed session while the policy forbids it."""
    def __init__(self, session_id: int, context: ErrorContext | None = None):
        super().__init__(
            f"Attendance session {session_id} is closed",
            "SESSION_CLOSED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.session_id = session_id


class AlreadyInstructorError(MakestaError):
    """User already owns an instructor profile."""
    def __init__(self, user_id: int, context: ErrorContext | None = None):
        super().__init__(
            f"User {user_id} already has an instructor profile",
            "ALREADY_INSTRUCTOR", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 400,
        )
        self.user_id = user_id


class RoleChangeNotAllowedError(MakestaError):
    """Organizer accounts cannot be converted into instructors."""
    def __init__(self, user_id: int, context: ErrorContext | None = None):
        super().__init__(
            f"User {user_id} is an organizer and cannot become an instructor",
            "ROLE_CHANGE_NOT_ALLOWED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.user_id = user_id


class FileTooLargeError(MakestaError):
    """Uploaded material exceeds the configured size limit."""
    def __init__(self, limit_bytes: int, context: ErrorContext | None = None):
        super().__init__(
            f"File exceeds the {limit_bytes // (1024 * 1024)}MB upload limit",
            "FILE_TOO_LARGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.limit_bytes = limit_bytes


class UnauthenticatedError(MakestaError):
    """No bearer token on the request."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Authentication token not provided",
            "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidTokenError(MakestaError):
    """Bearer token is malformed, tampered with, or expired."""
    def __init__(self, reason: str = "Invalid token", context: ErrorContext | None = None):
        super().__init__(
            reason, "INVALID_TOKEN", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(MakestaError):
    """Caller's role is not allowed to perform the operation."""
    def __init__(self, role: str, context: ErrorContext | None = None):
        super().__init__(
            "Access denied",
            "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.role = role


class ResourceNotFoundError(MakestaError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int | str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(MakestaError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
