"""Request building, sending and response parsing shared by all resources."""

from collections.abc import Mapping
from typing import Any, TypeVar
from urllib.parse import quote

from aws_lambda_powertools import Logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.infrastructure.adapters.http_adapter import HttpAdapter, HttpAdapterProtocol
from core.infrastructure.auth import Authenticator, NoAuthAuthenticator
from core.models.errors import ConfigurationError, ResponseParseError, TransportError
from core.utils.config import ServiceConfig
from core.utils.constants import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_MAX_RETRY_INTERVAL_SECONDS,
    ENABLED_RETRIES_DEFAULT_COUNT,
    ERROR_CODE_HTTP_ERROR,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    SERVICE_VERSION,
)
from core.utils.decorators import translate_transport_errors
from core.utils.headers import get_sdk_headers, redact_headers
from core.utils.response import DetailedResponse, error_body, extract_error_message
from core.utils.validators import require_path_params, sanitize_validation_errors

logger = Logger(utc=True)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseService:
    """Shared plumbing for service operations.

    This class:
    - Resolves the request URL from the service URL and path parameters
    - Merges default, SDK and per-call headers and applies authentication
    - Sends through the HTTP adapter (transport retries live there)
    - Maps HTTP error statuses to TransportError
    - Parses JSON bodies into pydantic models
    """

    def __init__(
        self,
        config: ServiceConfig | None = None,
        *,
        authenticator: Authenticator | None = None,
        adapter: HttpAdapterProtocol | None = None,
    ) -> None:
        self.config = config or ServiceConfig()
        self.authenticator: Authenticator = authenticator or NoAuthAuthenticator()
        self._adapter: HttpAdapterProtocol = adapter or HttpAdapter(
            timeout=self.config.timeout,
            max_retries=self.config.max_retries,
            max_retry_interval=self.config.max_retry_interval,
            verify_ssl=not self.config.disable_ssl_verification,
        )

    @property
    def service_url(self) -> str:
        return self.config.url

    @service_url.setter
    def service_url(self, url: str) -> None:
        self.update_config(url=url)

    @property
    def adapter(self) -> HttpAdapterProtocol:
        return self._adapter

    def update_config(self, **changes: Any) -> ServiceConfig:
        """Replace configuration fields, re-running validation.

        Timeout, SSL verification and retry changes are pushed to the HTTP
        adapter so they apply to the next request.

        Raises:
            ConfigurationError: If a new value is invalid
        """
        previous = self.config
        try:
            config = ServiceConfig.model_validate({**previous.model_dump(), **changes})
        except PydanticValidationError as exc:
            raise ConfigurationError(
                message="Invalid service configuration",
                details={"errors": sanitize_validation_errors(exc.errors())},
            ) from exc

        if (config.timeout, config.disable_ssl_verification) != (
            previous.timeout,
            previous.disable_ssl_verification,
        ):
            self._adapter.configure_transport(
                timeout=config.timeout,
                verify_ssl=not config.disable_ssl_verification,
            )
        if (config.max_retries, config.max_retry_interval) != (
            previous.max_retries,
            previous.max_retry_interval,
        ):
            self._adapter.configure_retries(
                max_retries=config.max_retries,
                max_retry_interval=config.max_retry_interval,
            )

        self.config = config
        return config

    def set_default_headers(self, headers: Mapping[str, str]) -> None:
        """Replace the headers sent with every request."""
        self.update_config(default_headers=dict(headers))

    def enable_retries(
        self,
        max_retries: int = ENABLED_RETRIES_DEFAULT_COUNT,
        max_retry_interval: float = DEFAULT_MAX_RETRY_INTERVAL_SECONDS,
    ) -> None:
        """Enable transport retries; zero or negative values fall back to defaults."""
        self.update_config(
            max_retries=max_retries if max_retries > 0 else ENABLED_RETRIES_DEFAULT_COUNT,
            max_retry_interval=(
                max_retry_interval if max_retry_interval > 0 else DEFAULT_MAX_RETRY_INTERVAL_SECONDS
            ),
        )

    def disable_retries(self) -> None:
        self.update_config(max_retries=0)

    def resolve_url(self, path: str, path_params: Mapping[str, str | None] | None = None) -> str:
        """Join the service URL with a path template.

        Example:
            resolve_url("/v1/projects/{id}", {"id": "a b"})
            → "https://projects.api.cloud.ibm.com/v1/projects/a%20b"
        """
        if path_params:
            resolved = require_path_params(path_params)
            path = path.format(**{name: quote(value, safe="") for name, value in resolved.items()})
        return f"{self.config.url}{path}"

    def build_headers(
        self,
        *,
        operation_id: str,
        headers: Mapping[str, str] | None = None,
        has_body: bool = False,
    ) -> dict[str, str]:
        """Default headers < SDK headers < content negotiation < per-call headers."""
        merged: dict[str, str] = dict(self.config.default_headers)
        merged.update(get_sdk_headers(self.config.service_name, SERVICE_VERSION, operation_id))
        merged[HEADER_ACCEPT] = DEFAULT_CONTENT_TYPE
        if has_body:
            merged[HEADER_CONTENT_TYPE] = DEFAULT_CONTENT_TYPE
        if headers:
            merged.update(headers)

        self.authenticator.authenticate(merged)
        return merged

    @translate_transport_errors
    def request(
        self,
        method: str,
        path: str,
        *,
        operation_id: str,
        response_model: type[ModelT] | None = None,
        path_params: Mapping[str, str | None] | None = None,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse[ModelT]:
        """Send a request and parse its response.

        Args:
            method: HTTP verb
            path: Path template relative to the service URL
            operation_id: API operation name, used in SDK headers and logs
            response_model: Model to parse the JSON body into; None to ignore the body
            path_params: Values for the `{name}` placeholders of `path`
            params: Query parameters; None values are dropped
            body: JSON-serializable request body
            headers: Per-call headers

        Raises:
            ValidationError: If a path parameter is empty
            TransportError: On network failure or HTTP status >= 400
            ResponseParseError: If the body does not match `response_model`
        """
        url = self.resolve_url(path, path_params)
        query = {name: value for name, value in (params or {}).items() if value is not None}
        request_headers = self.build_headers(
            operation_id=operation_id,
            headers=headers,
            has_body=body is not None,
        )

        logger.debug(
            "Sending request",
            extra={
                "operation_id": operation_id,
                "method": method,
                "url": url,
                "params": query,
                "headers": redact_headers(request_headers),
            },
        )

        response = self._adapter.send(
            method=method,
            url=url,
            params=query or None,
            headers=request_headers,
            json=body,
        )

        if response.status_code >= 400:
            message = extract_error_message(response)
            logger.error(
                "Service returned an error status",
                extra={
                    "operation_id": operation_id,
                    "status_code": response.status_code,
                    "error": message,
                },
            )
            raise TransportError(
                message=message,
                error_code=ERROR_CODE_HTTP_ERROR,
                status_code=response.status_code,
                details={"operation_id": operation_id, "body": error_body(response)},
            )

        result = self._parse(response.content, response_model, operation_id=operation_id)

        logger.info(
            "Operation completed",
            extra={"operation_id": operation_id, "status_code": response.status_code},
        )

        return DetailedResponse[Any](
            status_code=response.status_code,
            headers=dict(response.headers),
            result=result,
        )

    @staticmethod
    def _parse(
        content: bytes,
        response_model: type[ModelT] | None,
        *,
        operation_id: str,
    ) -> ModelT | None:
        if response_model is None:
            return None

        if not content:
            raise ResponseParseError(
                message=f"Expected {response_model.__name__} but the response body is empty",
                details={"operation_id": operation_id},
            )

        try:
            return response_model.model_validate_json(content)
        except PydanticValidationError as exc:
            logger.error(
                "Response body did not match the expected model",
                extra={"operation_id": operation_id, "model": response_model.__name__},
            )
            raise ResponseParseError(
                message=f"Unable to parse {response_model.__name__} from response",
                details={
                    "operation_id": operation_id,
                    "errors": sanitize_validation_errors(exc.errors()),
                },
            ) from exc
