"""
Pytest configuration and fixtures for SDK tests.
Provides a client pointed at a fake service URL, HTTP mocking via
`responses` and a clean environment for `<SERVICE>_*` variables.
"""

from collections.abc import Callable, Iterator
from typing import Any

import pytest
import responses

from core.infrastructure.auth import BearerTokenAuthenticator
from core.infrastructure.http.base_service import BaseService
from core.utils.config import ServiceConfig
from projectv1.service import ProjectV1

SERVICE_URL = "https://projects.test.cloud"
BEARER_TOKEN = "test-token"

_SERVICE_ENV_SUFFIXES = (
    "URL",
    "DISABLE_SSL",
    "ENABLE_RETRIES",
    "MAX_RETRIES",
    "RETRY_INTERVAL",
    "TIMEOUT",
    "AUTH_TYPE",
    "BEARER_TOKEN",
)


@pytest.fixture(autouse=True)
def clean_service_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any PROJECT_* variables leaking from the developer's shell."""
    for suffix in _SERVICE_ENV_SUFFIXES:
        monkeypatch.delenv(f"PROJECT_{suffix}", raising=False)


@pytest.fixture
def mocked_responses() -> Iterator[responses.RequestsMock]:
    """Activate `responses` for the duration of a test."""
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service_config() -> ServiceConfig:
    return ServiceConfig(url=SERVICE_URL)


@pytest.fixture
def base_service(service_config: ServiceConfig) -> BaseService:
    return BaseService(service_config, authenticator=BearerTokenAuthenticator(BEARER_TOKEN))


@pytest.fixture
def project_service(service_config: ServiceConfig) -> ProjectV1:
    return ProjectV1(service_config, BearerTokenAuthenticator(BEARER_TOKEN))


@pytest.fixture
def project_payload() -> Callable[..., dict[str, Any]]:
    """
    Factory for Project JSON bodies.

    Usage:
        body = project_payload("p1", name="demo")
    """

    def _build(project_id: str = "p1", **definition: Any) -> dict[str, Any]:
        return {
            "id": project_id,
            "crn": f"crn:v1:bluemix:public:project:us-south:a/123::project:{project_id}",
            "href": f"{SERVICE_URL}/v1/projects/{project_id}",
            "created_at": "2024-01-02T03:04:05Z",
            "location": "us-south",
            "resource_group": "Default",
            "state": "ready",
            "definition": {
                "name": "acme-project",
                "description": "",
                "destroy_on_delete": True,
                **definition,
            },
        }

    return _build
