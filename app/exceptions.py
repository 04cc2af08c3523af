# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Every error the console can show, as one hierarchy.
# Errors carry a human-readable message, a machine-readable code and, where
# it helps, a suggestion telling the operator how to fix the problem.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class BoothBuzzException(Exception):
    """
    Base exception for the Booth Buzz API.

    Form flows catch it and show the message in the form banner; anything
    escaping to a route becomes JSON through boothbuzz_exception_handler.
    """

    def __init__(
        self,
        message: str,
        code: str = "BOOTHBUZZ_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Record Exceptions
# =============================================================================

class EntityNotFoundError(BoothBuzzException):
    """Raised when a record ID doesn't exist."""

    def __init__(self, entity: str, record_id: str, message: str | None = None):
        super().__init__(
            message=message or f"{entity.capitalize()} not found: {record_id}",
            code="NOT_FOUND",
            status_code=404,
            suggestion=f"Check that the {entity} ID is correct and the record hasn't been deleted",
            details={"entity": entity, "id": record_id}
        )


class NothingDeletedError(BoothBuzzException):
    """Raised when a delete matched zero rows."""

    def __init__(self, entity: str, record_id: str):
        super().__init__(
            message=f"No {entity} was deleted",
            code="NOTHING_DELETED",
            status_code=404,
            suggestion="This may be due to row-level security or a missing ID",
            details={"entity": entity, "id": record_id}
        )


class DuplicateRecordError(BoothBuzzException):
    """Raised when a record clashes with an existing one."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="DUPLICATE_RECORD",
            status_code=409,
            details=details,
        )


# =============================================================================
# Remote Store Exceptions
# =============================================================================

class RemoteStoreError(BoothBuzzException):
    """Raised when the hosted database rejects an operation."""

    def __init__(self, message: str, operation: str | None = None, table: str | None = None):
        details = {}
        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table
        super().__init__(
            message=message,
            code="REMOTE_STORE_ERROR",
            status_code=502,
            suggestion="Try again; if the problem persists check the table's row-level security policies",
            details=details,
        )


class StorageUploadError(BoothBuzzException):
    """Raised when a file upload to storage fails."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Image upload failed: {error}",
            code="STORAGE_UPLOAD_ERROR",
            status_code=502,
            suggestion="Check that the storage bucket exists and accepts uploads",
            details={"storage_error": error},
        )


class PartialWriteError(BoothBuzzException):
    """
    Raised when the second step of a two-step write fails.

    The first step has already been compensated (or the compensation failure
    has been logged) by the time this is raised.
    """

    def __init__(self, message: str, compensated: bool):
        super().__init__(
            message=message,
            code="PARTIAL_WRITE",
            status_code=502,
            suggestion=None if compensated else "An operator needs to remove the orphaned first step manually",
            details={"compensated": compensated}
        )


# =============================================================================
# Auth Exceptions
# =============================================================================

class AuthenticationError(BoothBuzzException):
    """Raised when credentials or a session token are rejected."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(
            message=message,
            code="AUTHENTICATION_FAILED",
            status_code=401,
        )


class AccessDeniedError(BoothBuzzException):
    """
    Raised when the session role is not allowed on a page.

    The console shows a fixed "Access Denied" view rather than redirecting,
    so the payload is the same for every gated route.
    """

    def __init__(self, action: str = "view this page"):
        super().__init__(
            message="Access Denied",
            code="ACCESS_DENIED",
            status_code=403,
            suggestion=f"You don't have permission to {action}.",
        )


class NotAllowedError(BoothBuzzException):
    """Raised when a signed-in user tries to change a record that isn't theirs."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="NOT_ALLOWED",
            status_code=403,
        )


# =============================================================================
# Form Exceptions
# =============================================================================

class FormSubmissionError(BoothBuzzException):
    """Raised when a form submission ends in the failed state."""

    def __init__(self, errors: dict[str, str]):
        super().__init__(
            message=errors.get("submit") or "Please correct the highlighted fields",
            code="FORM_INVALID",
            status_code=422,
            details={"errors": errors},
        )


class FormAlreadySubmittedError(BoothBuzzException):
    """Raised when a form flow that already succeeded is submitted again."""

    def __init__(self, entity: str):
        super().__init__(
            message=f"This {entity} form has already been submitted",
            code="FORM_ALREADY_SUBMITTED",
            status_code=409,
            suggestion="Start a new form to add another record",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def boothbuzz_exception_handler(
    request: Request,
    exc: BoothBuzzException
) -> JSONResponse:
    """
    Render a BoothBuzzException with its own status code.

    Body: {"detail", "code", "suggestion"?, "details"?}. A failed form
    submission puts its field error map under details.errors.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Request bodies that don't fit the schema at all (wrong types, bad
    multipart JSON). Field-level form rules never get here; they come back
    as FormSubmissionError.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )
