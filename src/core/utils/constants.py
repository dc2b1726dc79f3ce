"""Global constants used throughout the SDK.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_MISSING_PATH_PARAM = "MISSING_PATH_PARAM"

# Configuration Errors
ERROR_CODE_CONFIGURATION_INVALID = "CONFIGURATION_INVALID"
ERROR_CODE_AUTH_CONFIGURATION_INVALID = "AUTH_CONFIGURATION_INVALID"
ERROR_CODE_REGIONAL_URL_UNSUPPORTED = "REGIONAL_URL_UNSUPPORTED"

# Pagination Errors
ERROR_CODE_LINK_PARSE_FAILED = "LINK_PARSE_FAILED"
ERROR_CODE_PAGER_EXHAUSTED = "PAGER_EXHAUSTED"
ERROR_CODE_PAGER_CONFIGURATION_INVALID = "PAGER_CONFIGURATION_INVALID"

# Transport Errors
ERROR_CODE_TRANSPORT = "TRANSPORT_ERROR"
ERROR_CODE_CONNECTION_FAILED = "CONNECTION_FAILED"
ERROR_CODE_REQUEST_TIMEOUT = "REQUEST_TIMEOUT"
ERROR_CODE_HTTP_ERROR = "HTTP_ERROR"
ERROR_CODE_RESPONSE_PARSE_FAILED = "RESPONSE_PARSE_FAILED"


# ============================================================================
# Service Defaults
# ============================================================================

DEFAULT_SERVICE_URL: Final[str] = "https://projects.api.cloud.ibm.com"
DEFAULT_SERVICE_NAME: Final[str] = "project"
SERVICE_VERSION: Final[str] = "V1"
SDK_NAME: Final[str] = "project-python-sdk"
SDK_VERSION: Final[str] = "1.0.0"

DEFAULT_TIMEOUT_SECONDS: Final[float] = 60.0
DEFAULT_MAX_RETRIES: Final[int] = 0
DEFAULT_MAX_RETRY_INTERVAL_SECONDS: Final[float] = 30.0
ENABLED_RETRIES_DEFAULT_COUNT: Final[int] = 4
RETRY_BACKOFF_FACTOR: Final[float] = 1.0

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})


# ============================================================================
# Pagination Constraints
# ============================================================================

PAGE_TOKEN_QUERY_PARAM: Final[str] = "token"
DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 100


# ============================================================================
# HTTP
# ============================================================================

DEFAULT_CONTENT_TYPE = "application/json"
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_AGENT = "User-Agent"
HEADER_SDK_ANALYTICS = "X-IBMCloud-SDK-Analytics"

SENSITIVE_HEADERS: Final[frozenset[str]] = frozenset(
    {HEADER_AUTHORIZATION.lower(), "x-auth-refresh-token"}
)


# ============================================================================
# Authentication
# ============================================================================

AUTH_TYPE_NOAUTH = "noauth"
AUTH_TYPE_BEARER_TOKEN = "bearertoken"

SUPPORTED_AUTH_TYPES: Final[frozenset[str]] = frozenset(
    {AUTH_TYPE_NOAUTH, AUTH_TYPE_BEARER_TOKEN}
)


# ============================================================================
# Environment Variable Suffixes
# ============================================================================
# Full names are "<SERVICE_NAME>_<SUFFIX>", e.g. PROJECT_URL.

ENV_SUFFIX_URL = "URL"
ENV_SUFFIX_DISABLE_SSL = "DISABLE_SSL"
ENV_SUFFIX_ENABLE_RETRIES = "ENABLE_RETRIES"
ENV_SUFFIX_MAX_RETRIES = "MAX_RETRIES"
ENV_SUFFIX_RETRY_INTERVAL = "RETRY_INTERVAL"
ENV_SUFFIX_TIMEOUT = "TIMEOUT"
ENV_SUFFIX_AUTH_TYPE = "AUTH_TYPE"
ENV_SUFFIX_BEARER_TOKEN = "BEARER_TOKEN"

TRUTHY_ENV_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
FALSY_ENV_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off", ""})


# ============================================================================
# Helper Functions
# ============================================================================


def env_var_name(service_name: str, suffix: str) -> str:
    """Build an external-configuration variable name for a service.

    Args:
        service_name: Service name, e.g. "project"
        suffix: Variable suffix, e.g. ENV_SUFFIX_URL

    Returns:
        Upper-cased variable name with dashes replaced, e.g. "PROJECT_URL"
    """
    prefix = service_name.upper().replace("-", "_")
    return f"{prefix}_{suffix}"
