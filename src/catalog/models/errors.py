"""Custom exception classes for the catalog service."""

from typing import Any

from catalog.utils.constants import (
    ERROR_CODE_CATALOG_LOAD_FAILED,
    ERROR_CODE_INVALID_FILTER,
    ERROR_CODE_INVALID_PAGE,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_VALIDATION_FAILED,
)


class CatalogServiceError(Exception):
    """
    Base exception for all catalog service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(CatalogServiceError):
    """Raised when configuration or request validation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NotFoundError(CatalogServiceError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class CatalogLoadError(CatalogServiceError):
    """Raised when the item collection cannot be loaded or parsed."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CATALOG_LOAD_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FilterError(CatalogServiceError):
    """Raised when a facet selection refers to an unknown facet type."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_FILTER,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PaginationError(CatalogServiceError):
    """Raised when a page outside the current page range is requested."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_PAGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
