"""Error Hierarchy: typed, categorized exceptions for every Postboard failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) carry a descriptive message; storage errors (500)
      never expose driver detail in to_response()
    - to_response() produces the exact wire body the HTTP surface sends

Design Decisions:
    - Single hierarchy with PostboardError base: one global handler catches all
    - Pagination errors render {"message": ...}, everything else {"error": ...}
      (wire compatibility with the existing browser client)
"""

from enum import Enum


INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    INTERNAL = "internal"


class PostboardError(Exception):
    """Base exception for all Postboard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidInputError(PostboardError):
    """Request input missing, mistyped or blank."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class InvalidPaginationError(PostboardError):
    """pageNumber/pageSize outside the accepted range."""
    def __init__(self, message: str = "Invalid page number or page size"):
        super().__init__(
            message, "INVALID_PAGINATION", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )

    def to_response(self) -> dict:
        return {"message": self.message}


class ResourceNotFoundError(PostboardError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(PostboardError):
    """Storage operation failed. Detail stays server-side."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        return {"error": INTERNAL_ERROR_MESSAGE}


class PostCreationError(StorageError):
    """Post could not be created.

    reason is one of:
        identity_generation: id/timestamp could not be generated
        not_persisted: the insert affected zero rows
        write_failed: the driver rejected the insert
    """
    IDENTITY_GENERATION = "identity_generation"
    NOT_PERSISTED = "not_persisted"
    WRITE_FAILED = "write_failed"

    def __init__(self, message: str, reason: str):
        super().__init__(message, "create post")
        self.code = "POST_CREATION_FAILED"
        self.reason = reason
