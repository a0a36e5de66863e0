"""
Centralized HTTP exceptions for consistent error handling.

Usage:
    from shared.utils.exceptions import NotFoundError, ValidationError

    raise NotFoundError("Product", product_id)
    raise ValidationError("Invalid product data", errors=result.errors)

Every AppException is rendered by the application's exception handler as
``{"error": detail}`` plus ``"details"`` when the exception carries any.
"""

from typing import Any

from fastapi import HTTPException, status

from shared.config.logging import get_logger

logger = get_logger(__name__)


class AppException(HTTPException):
    """
    Base exception with automatic logging.

    All custom exceptions should inherit from this class
    to ensure consistent logging and response format.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        log_level: str = "warning",
        headers: dict[str, str] | None = None,
        details: list[dict[str, Any]] | None = None,
        **log_context: Any,
    ):
        log_fn = getattr(logger, log_level, logger.warning)
        log_fn(detail, status_code=status_code, **log_context)

        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.details = details

    def to_response(self) -> dict[str, Any]:
        """JSON body for this error."""
        body: dict[str, Any] = {"error": self.detail}
        if self.details is not None:
            body["details"] = self.details
        return body


# =============================================================================
# 404 Not Found Errors
# =============================================================================


class NotFoundError(AppException):
    """
    Entity not found error (404).

    Usage:
        raise NotFoundError("Product", 123)
    """

    def __init__(self, entity: str, entity_id: int | str | None = None, **log_context: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{entity} not found",
            log_level="warning",
            entity=entity,
            entity_id=entity_id,
            **log_context,
        )


# =============================================================================
# 400 Bad Request Errors
# =============================================================================


class ValidationError(AppException):
    """
    Input validation error (400).

    Carries the complete list of field errors produced by the
    Pydantic write models.

    Usage:
        raise ValidationError("Invalid product data", errors=result.errors)
        raise ValidationError("Invalid product ID")
    """

    def __init__(self, detail: str, errors: list[Any] | None = None, **log_context: Any):
        self.errors = list(errors or [])
        details = [_error_dict(e) for e in self.errors] if errors is not None else None
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            log_level="warning",
            details=details,
            fields=[d["field"] for d in details] if details else None,
            **log_context,
        )


class SpreadsheetError(AppException):
    """Uploaded workbook could not be parsed (400). Fatal for the request."""

    def __init__(self, reason: str, **log_context: Any):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unable to read spreadsheet: {reason}",
            log_level="warning",
            **log_context,
        )


# =============================================================================
# 413 / 415 Upload Errors
# =============================================================================


class UnsupportedMediaError(AppException):
    """
    Rejected upload: wrong file type (415) or too large (413).

    Usage:
        raise UnsupportedMediaError("Not an image! Please upload only images.")
        raise UnsupportedMediaError("Image exceeds 5 MB", too_large=True)
    """

    def __init__(self, detail: str, too_large: bool = False, **log_context: Any):
        status_code = (
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
            if too_large
            else status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
        )
        super().__init__(
            status_code=status_code,
            detail=detail,
            log_level="warning",
            **log_context,
        )


# =============================================================================
# 500 Internal Server Errors
# =============================================================================


class UpstreamError(AppException):
    """
    Remote database or storage call failed (500).

    The underlying message is passed through to the caller; nothing is retried.

    Usage:
        raise UpstreamError("database", str(exc), operation="insert products")
    """

    def __init__(self, service: str, message: str, **log_context: Any):
        self.service = service
        self.message = message
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
            log_level="error",
            service=service,
            **log_context,
        )


def _error_dict(error: Any) -> dict[str, Any]:
    if isinstance(error, dict):
        return error
    return error.to_dict()
