"""SDK request headers."""

import platform

from core.utils.constants import (
    HEADER_SDK_ANALYTICS,
    HEADER_USER_AGENT,
    SDK_NAME,
    SDK_VERSION,
    SENSITIVE_HEADERS,
)


def get_user_agent() -> str:
    """User-Agent value identifying the SDK, Python version and OS."""
    return (
        f"{SDK_NAME}/{SDK_VERSION} "
        f"(lang=python; pyVersion={platform.python_version()}; os={platform.system()})"
    )


def get_sdk_headers(service_name: str, service_version: str, operation_id: str) -> dict[str, str]:
    """Headers sent with every request of an operation.

    Example:
        get_sdk_headers("project", "V1", "ListProjects")
        → {"User-Agent": "...",
           "X-IBMCloud-SDK-Analytics":
               "service_name=project;service_version=V1;operation_id=ListProjects"}
    """
    return {
        HEADER_USER_AGENT: get_user_agent(),
        HEADER_SDK_ANALYTICS: (
            f"service_name={service_name};"
            f"service_version={service_version};"
            f"operation_id={operation_id}"
        ),
    }


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Copy of headers safe for logging."""
    return {
        name: "[REDACTED]" if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }
