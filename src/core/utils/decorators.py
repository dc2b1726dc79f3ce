"""
Common decorators for service operations.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import requests
from aws_lambda_powertools import Logger

from core.models.errors import TransportError
from core.utils.constants import (
    ERROR_CODE_CONNECTION_FAILED,
    ERROR_CODE_REQUEST_TIMEOUT,
    ERROR_CODE_TRANSPORT,
)

logger = Logger(service="project-sdk", utc=True)

F = TypeVar("F", bound=Callable[..., Any])


def _log_error(
    message: str,
    *,
    operation_id: str | None,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        operation_id: Name of the API operation, when known
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra = {
        "operation_id": operation_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if level == "exception":
        logger.exception(message, extra=log_extra)
    else:
        logger.warning(message, extra=log_extra)


def translate_transport_errors(func: F) -> F:
    """
    Decorator translating `requests` failures into `TransportError`.

    Provides:
    - Distinct error codes for timeouts and connection failures
    - Structured logging keyed by the `operation_id` keyword argument
    - Exception chaining so the original failure stays inspectable

    SDK errors raised by the wrapped function pass through untouched.

    Example:
        @translate_transport_errors
        def request(self, method, path, *, operation_id, ...):
            ...
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        operation_id = kwargs.get("operation_id")

        try:
            return func(*args, **kwargs)

        except requests.Timeout as exc:
            _log_error("Request timed out", operation_id=operation_id, exc=exc)
            raise TransportError(
                message="The request timed out",
                error_code=ERROR_CODE_REQUEST_TIMEOUT,
                details={"operation_id": operation_id},
            ) from exc

        except requests.ConnectionError as exc:
            _log_error(
                "Connection error",
                operation_id=operation_id,
                exc=exc,
                level="exception",
            )
            raise TransportError(
                message="Unable to connect to the service",
                error_code=ERROR_CODE_CONNECTION_FAILED,
                details={"operation_id": operation_id},
            ) from exc

        except requests.RequestException as exc:
            _log_error(
                "Request failed",
                operation_id=operation_id,
                exc=exc,
                level="exception",
            )
            raise TransportError(
                message="The request could not be completed",
                error_code=ERROR_CODE_TRANSPORT,
                details={"operation_id": operation_id},
            ) from exc

    return wrapper  # type: ignore[return-value]
