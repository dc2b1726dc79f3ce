"""Service configuration."""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import ConfigurationError
from core.utils.constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_MAX_RETRY_INTERVAL_SECONDS,
    DEFAULT_SERVICE_NAME,
    DEFAULT_SERVICE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ENABLED_RETRIES_DEFAULT_COUNT,
    ENV_SUFFIX_DISABLE_SSL,
    ENV_SUFFIX_ENABLE_RETRIES,
    ENV_SUFFIX_MAX_RETRIES,
    ENV_SUFFIX_RETRY_INTERVAL,
    ENV_SUFFIX_TIMEOUT,
    ENV_SUFFIX_URL,
    ERROR_CODE_REGIONAL_URL_UNSUPPORTED,
    FALSY_ENV_VALUES,
    TRUTHY_ENV_VALUES,
    env_var_name,
)
from core.utils.validators import sanitize_validation_errors


class ServiceConfig(BaseModel):
    """Connection settings for a service client."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    service_name: str = Field(default=DEFAULT_SERVICE_NAME, min_length=1)
    url: str = Field(default=DEFAULT_SERVICE_URL, min_length=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    max_retry_interval: float = Field(default=DEFAULT_MAX_RETRY_INTERVAL_SECONDS, gt=0)
    disable_ssl_verification: bool = False
    default_headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("url")
    @classmethod
    def normalize_url(cls, value: str) -> str:
        """Require an http(s) URL and drop the trailing slash.

        Input:  "https://projects.api.cloud.ibm.com/"
        Output: "https://projects.api.cloud.ibm.com"
        """
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"Service URL must start with http:// or https://, got '{value}'")
        return value.rstrip("/")

    @classmethod
    def from_environment(cls, service_name: str = DEFAULT_SERVICE_NAME) -> "ServiceConfig":
        """Load configuration from `<SERVICE>_*` environment variables.

        Unset variables keep their defaults.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        data: dict[str, object] = {"service_name": service_name}

        url = os.getenv(env_var_name(service_name, ENV_SUFFIX_URL))
        if url:
            data["url"] = url

        disable_ssl = _read_bool(service_name, ENV_SUFFIX_DISABLE_SSL)
        if disable_ssl is not None:
            data["disable_ssl_verification"] = disable_ssl

        timeout = os.getenv(env_var_name(service_name, ENV_SUFFIX_TIMEOUT))
        if timeout:
            data["timeout"] = timeout

        if _read_bool(service_name, ENV_SUFFIX_ENABLE_RETRIES):
            data["max_retries"] = (
                os.getenv(env_var_name(service_name, ENV_SUFFIX_MAX_RETRIES))
                or ENABLED_RETRIES_DEFAULT_COUNT
            )
            interval = os.getenv(env_var_name(service_name, ENV_SUFFIX_RETRY_INTERVAL))
            if interval:
                data["max_retry_interval"] = interval

        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            raise ConfigurationError(
                message="Invalid service configuration in environment",
                details={
                    "service_name": service_name,
                    "errors": sanitize_validation_errors(exc.errors()),
                },
            ) from exc


def _read_bool(service_name: str, suffix: str) -> bool | None:
    name = env_var_name(service_name, suffix)
    raw = os.getenv(name)
    if raw is None:
        return None

    value = raw.strip().lower()
    if value in TRUTHY_ENV_VALUES:
        return True
    if value in FALSY_ENV_VALUES:
        return False

    raise ConfigurationError(
        message=f"{name} must be a boolean, got '{raw}'",
        details={"variable": name},
    )


def get_service_url_for_region(region: str) -> str:
    """Return the service URL for a region.

    The Projects service has a single global endpoint.
    """
    raise ConfigurationError(
        message="Service does not support regional URLs",
        error_code=ERROR_CODE_REGIONAL_URL_UNSUPPORTED,
        details={"region": region},
    )
