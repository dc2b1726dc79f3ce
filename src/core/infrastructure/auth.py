"""Request authenticators."""

import os
from typing import Protocol

from aws_lambda_powertools import Logger

from core.models.errors import ConfigurationError
from core.utils.constants import (
    AUTH_TYPE_BEARER_TOKEN,
    AUTH_TYPE_NOAUTH,
    ENV_SUFFIX_AUTH_TYPE,
    ENV_SUFFIX_BEARER_TOKEN,
    ERROR_CODE_AUTH_CONFIGURATION_INVALID,
    HEADER_AUTHORIZATION,
    SUPPORTED_AUTH_TYPES,
    env_var_name,
)

logger = Logger(utc=True)


class Authenticator(Protocol):
    """Adds credentials to the headers of an outgoing request."""

    def authenticate(self, headers: dict[str, str]) -> None: ...


class NoAuthAuthenticator:
    """Sends requests without credentials."""

    def authenticate(self, headers: dict[str, str]) -> None:
        return None


class BearerTokenAuthenticator:
    """Sends a caller-supplied bearer token with every request."""

    def __init__(self, bearer_token: str) -> None:
        if not bearer_token or not bearer_token.strip():
            raise ConfigurationError(
                message="Bearer token must not be empty",
                error_code=ERROR_CODE_AUTH_CONFIGURATION_INVALID,
            )
        self._bearer_token = bearer_token.strip()

    @property
    def bearer_token(self) -> str:
        return self._bearer_token

    def set_bearer_token(self, bearer_token: str) -> None:
        """Replace the token, e.g. after the caller refreshed it."""
        if not bearer_token or not bearer_token.strip():
            raise ConfigurationError(
                message="Bearer token must not be empty",
                error_code=ERROR_CODE_AUTH_CONFIGURATION_INVALID,
            )
        self._bearer_token = bearer_token.strip()

    def authenticate(self, headers: dict[str, str]) -> None:
        headers[HEADER_AUTHORIZATION] = f"Bearer {self._bearer_token}"


def get_authenticator_from_environment(service_name: str) -> Authenticator:
    """Build an authenticator from `<SERVICE>_AUTH_TYPE` and related variables.

    Defaults to bearer-token authentication when a token is configured
    and no auth type is given, otherwise to no authentication.

    Raises:
        ConfigurationError: For unsupported auth types or a missing token
    """
    auth_type_var = env_var_name(service_name, ENV_SUFFIX_AUTH_TYPE)
    token_var = env_var_name(service_name, ENV_SUFFIX_BEARER_TOKEN)

    bearer_token = os.getenv(token_var)
    auth_type = (os.getenv(auth_type_var) or "").strip().lower()
    if not auth_type:
        auth_type = AUTH_TYPE_BEARER_TOKEN if bearer_token else AUTH_TYPE_NOAUTH

    if auth_type not in SUPPORTED_AUTH_TYPES:
        raise ConfigurationError(
            message=f"Unsupported authentication type '{auth_type}'",
            error_code=ERROR_CODE_AUTH_CONFIGURATION_INVALID,
            details={"variable": auth_type_var, "supported": sorted(SUPPORTED_AUTH_TYPES)},
        )

    logger.debug(
        "Authenticator resolved from environment",
        extra={"service_name": service_name, "auth_type": auth_type},
    )

    if auth_type == AUTH_TYPE_NOAUTH:
        return NoAuthAuthenticator()

    if not bearer_token:
        raise ConfigurationError(
            message=f"{token_var} environment variable is not set",
            error_code=ERROR_CODE_AUTH_CONFIGURATION_INVALID,
            details={"variable": token_var},
        )

    return BearerTokenAuthenticator(bearer_token)
