"""Thin adapter for sending HTTP requests with `requests`."""

from collections.abc import Mapping
from typing import Any, Protocol

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from core.utils.constants import (
    DEFAULT_MAX_RETRY_INTERVAL_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    RETRY_BACKOFF_FACTOR,
    RETRY_STATUS_CODES,
)


class HttpAdapterProtocol(Protocol):
    """Minimal HTTP adapter protocol (service-facing)."""

    def send(
        self,
        *,
        method: str,
        url: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        json: Any = None,
    ) -> requests.Response: ...

    def configure_transport(self, *, timeout: float, verify_ssl: bool) -> None: ...

    def configure_retries(self, *, max_retries: int, max_retry_interval: float) -> None: ...


class HttpAdapter:
    """Low-level HTTP operations (mechanical, no error handling).

    This adapter:
    - Wraps a requests Session
    - Mounts urllib3 retries when `max_retries` is positive
    - Does NOT handle errors (lets them bubble up)
    - BaseService catches and translates errors
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_retries: int = 0,
        max_retry_interval: float = DEFAULT_MAX_RETRY_INTERVAL_SECONDS,
        verify_ssl: bool = True,
        session: requests.Session | None = None,
    ) -> None:
        """Create the adapter around a new or provided session."""
        self._timeout = timeout
        self._verify = verify_ssl
        self._session = session or requests.Session()
        self.configure_retries(max_retries=max_retries, max_retry_interval=max_retry_interval)

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def verify_ssl(self) -> bool:
        return self._verify

    def configure_transport(self, *, timeout: float, verify_ssl: bool) -> None:
        """Change the per-request timeout and TLS verification."""
        self._timeout = timeout
        self._verify = verify_ssl

    def configure_retries(self, *, max_retries: int, max_retry_interval: float) -> None:
        """Mount (or clear) the retry policy on both URL schemes.

        Backoff is exponential and bounded by `max_retry_interval`.
        """
        if max_retries > 0:
            retry: Retry | int = Retry(
                total=max_retries,
                backoff_factor=RETRY_BACKOFF_FACTOR,
                backoff_max=max_retry_interval,
                status_forcelist=sorted(RETRY_STATUS_CODES),
                allowed_methods=["HEAD", "GET", "PUT", "PATCH", "DELETE", "OPTIONS", "POST"],
                respect_retry_after_header=True,
                raise_on_status=False,
            )
        else:
            retry = 0

        adapter = HTTPAdapter(max_retries=retry)
        self._session.mount("http://", adapter)
        self._session.mount("https://", adapter)

    def send(
        self,
        *,
        method: str,
        url: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        json: Any = None,
    ) -> requests.Response:
        """Send a request and return the raw response.
        Raises requests exceptions - caught by BaseService.
        """
        return self._session.request(
            method,
            url,
            params=params,
            headers=dict(headers or {}),
            json=json,
            timeout=self._timeout,
            verify=self._verify,
        )

    def close(self) -> None:
        self._session.close()
