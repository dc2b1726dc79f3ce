"""Custom exception classes for the Projects SDK."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_CONFIGURATION_INVALID,
    ERROR_CODE_LINK_PARSE_FAILED,
    ERROR_CODE_PAGER_CONFIGURATION_INVALID,
    ERROR_CODE_PAGER_EXHAUSTED,
    ERROR_CODE_RESPONSE_PARSE_FAILED,
    ERROR_CODE_TRANSPORT,
    ERROR_CODE_VALIDATION_FAILED,
)


class ProjectSdkError(Exception):
    """
    Base exception for everything the SDK raises on its own behalf.

    Catch this to handle any client-side failure in one place; use
    `error_code` to tell them apart. `details` carries structured context
    (operation id, offending field, raw error body) for logging.
    """

    message: str
    error_code: str
    details: dict[str, Any]
    # Set by Pager.get_all to the items fetched before the failure.
    partial_items: list[Any]

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
        self.partial_items = []

        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for structured logging."""
        payload: dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(ProjectSdkError):
    """Raised when operation options or arguments fail validation."""

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


class ConfigurationError(ProjectSdkError):
    """Raised when service or authentication configuration is invalid."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONFIGURATION_INVALID,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class LinkParseError(ProjectSdkError):
    """Raised when a pagination link's href is not a valid URL."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_LINK_PARSE_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class TransportError(ProjectSdkError):
    """Raised when a request fails on the network or with an HTTP error status.

    `status_code` is None when no response was received.
    """

    status_code: int | None

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_TRANSPORT,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.status_code is not None:
            payload["status_code"] = self.status_code
        return payload


class ResponseParseError(ProjectSdkError):
    """Raised when a response body does not match the expected model."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESPONSE_PARSE_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PagerExhaustedError(ProjectSdkError):
    """Raised when a page is requested from a pager that has no more results."""

    def __init__(
        self,
        *,
        message: str = "No more results available",
        error_code: str = ERROR_CODE_PAGER_EXHAUSTED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PagerConfigurationError(ProjectSdkError):
    """Raised when a pager is created with options it cannot own."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PAGER_CONFIGURATION_INVALID,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
