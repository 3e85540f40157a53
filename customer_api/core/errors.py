"""Error Hierarchy — typed exceptions for every Customer API failure mode.

Invariants:
    - Every error carries an HTTP status (http_status), a category (logged by the
      global handler) and an optional description
    - to_response() always produces the same envelope: {"error": {code, reason, description}}
    - reason is derived from the status code only, never from the description
    - No driver internals leaked in descriptions except StorageError on the list path

Design Decisions:
    - Single hierarchy with CustomerApiError base: FastAPI global handler catches all
      (ADR: one envelope for 400, 401 and 500 alike, no message-only bodies)
    - NotFound and StorageError stay distinct types even though get/update/delete
      render them identically; the server log tells them apart
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handler routing."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    AUTHENTICATION = "authentication"
    INTERNAL = "internal"


_REASONS = {
    400: "Bad Request",
    401: "Unauthorized",
}


def reason_for(code: int) -> str:
    """Short fixed reason phrase for a status code."""
    return _REASONS.get(code, "Error")


def build_envelope(code: int, description: str | None = None) -> dict:
    """Build the client-facing error body for a status code."""
    return {
        "error": {
            "code": code,
            "reason": reason_for(code),
            "description": description,
        },
    }


class CustomerApiError(Exception):
    """Base exception for all Customer API errors."""

    def __init__(
        self,
        description: str | None,
        category: ErrorCategory,
        http_status: int = 400,
    ):
        super().__init__(description)
        self.description = description
        self.category = category
        self.http_status = http_status

    @property
    def code(self) -> str:
        return type(self).__name__

    def to_response(self) -> dict:
        """Convert to the standardized REST error envelope."""
        return build_envelope(self.http_status, self.description)


# ─── Client Errors (400) ────────────────────────────────────────

class InvalidIdentifierError(CustomerApiError):
    """Identifier is not the storage engine's canonical string form."""
    def __init__(self, raw: object, field: str = "_id"):
        super().__init__(
            f"Invalid {field} format.", ErrorCategory.VALIDATION, 400,
        )
        self.raw = raw
        self.field = field


class ValidationError(CustomerApiError):
    """Request input failed validation."""
    def __init__(self, description: str):
        super().__init__(description, ErrorCategory.VALIDATION, 400)


class PaginationError(ValidationError):
    """limit/page combination the store cannot accept."""
    def __init__(self, limit: int, page: int, problem: str):
        super().__init__(
            f"Invalid pagination: page={page}, limit={limit} {problem}.",
        )
        self.limit = limit
        self.page = page


class CustomerNotFoundError(CustomerApiError):
    """No customer matched, or the lookup failed in storage."""
    def __init__(self, customer_id: str):
        super().__init__(
            f"Customer not found with _id {customer_id}",
            ErrorCategory.RESOURCE_NOT_FOUND, 400,
        )
        self.customer_id = customer_id


class InvalidInputError(CustomerApiError):
    """Create was rejected by storage."""
    def __init__(self):
        super().__init__("Invalid input", ErrorCategory.VALIDATION, 400)


class StorageError(CustomerApiError):
    """Driver or transport failure, distinct from "not found"."""
    def __init__(self, message: str, operation: str):
        super().__init__(message, ErrorCategory.DATABASE, 400)
        self.operation = operation


# ─── Authentication Errors (401) ────────────────────────────────

class AuthMissingError(CustomerApiError):
    """x-api-key header absent."""
    def __init__(self):
        super().__init__(
            "Missing x-api-key header.", ErrorCategory.AUTHENTICATION, 401,
        )


class AuthInvalidError(CustomerApiError):
    """x-api-key header present but wrong."""
    def __init__(self):
        super().__init__(
            "Invalid x-api-key.", ErrorCategory.AUTHENTICATION, 401,
        )
