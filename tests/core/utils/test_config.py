"""
Unit tests for core.utils.config
"""

import pytest

from core.models.errors import ConfigurationError
from core.utils.config import ServiceConfig, get_service_url_for_region
from core.utils.constants import DEFAULT_SERVICE_URL


class TestServiceConfig:
    def test_defaults(self) -> None:
        config = ServiceConfig()

        assert config.service_name == "project"
        assert config.url == DEFAULT_SERVICE_URL
        assert config.max_retries == 0
        assert config.disable_ssl_verification is False

    def test_strips_trailing_slash(self) -> None:
        config = ServiceConfig(url="https://example.com/api/")

        assert config.url == "https://example.com/api"

    def test_rejects_non_http_url(self) -> None:
        with pytest.raises(ValueError):
            ServiceConfig(url="ftp://example.com")


class TestFromEnvironment:
    def test_unset_environment_keeps_defaults(self) -> None:
        config = ServiceConfig.from_environment("project")

        assert config == ServiceConfig()

    def test_reads_url_ssl_and_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROJECT_URL", "https://private.example.com/")
        monkeypatch.setenv("PROJECT_DISABLE_SSL", "true")
        monkeypatch.setenv("PROJECT_TIMEOUT", "5")

        config = ServiceConfig.from_environment("project")

        assert config.url == "https://private.example.com"
        assert config.disable_ssl_verification is True
        assert config.timeout == 5.0

    def test_enable_retries_uses_default_count(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROJECT_ENABLE_RETRIES", "true")

        config = ServiceConfig.from_environment("project")

        assert config.max_retries == 4

    def test_enable_retries_reads_limits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROJECT_ENABLE_RETRIES", "1")
        monkeypatch.setenv("PROJECT_MAX_RETRIES", "2")
        monkeypatch.setenv("PROJECT_RETRY_INTERVAL", "10")

        config = ServiceConfig.from_environment("project")

        assert config.max_retries == 2
        assert config.max_retry_interval == 10.0

    def test_retry_limits_ignored_when_retries_disabled(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PROJECT_MAX_RETRIES", "2")

        assert ServiceConfig.from_environment("project").max_retries == 0

    def test_service_name_maps_to_variable_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MY_PROJECTS_URL", "https://other.example.com")

        config = ServiceConfig.from_environment("my-projects")

        assert config.service_name == "my-projects"
        assert config.url == "https://other.example.com"

    def test_invalid_bool_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROJECT_DISABLE_SSL", "maybe")

        with pytest.raises(ConfigurationError) as exc_info:
            ServiceConfig.from_environment("project")

        assert exc_info.value.details == {"variable": "PROJECT_DISABLE_SSL"}

    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROJECT_TIMEOUT", "-1")

        with pytest.raises(ConfigurationError) as exc_info:
            ServiceConfig.from_environment("project")

        assert exc_info.value.error_code == "CONFIGURATION_INVALID"
        assert exc_info.value.details["errors"][0]["field"] == "timeout"


class TestGetServiceUrlForRegion:
    def test_regional_urls_are_unsupported(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            get_service_url_for_region("us-south")

        assert exc_info.value.error_code == "REGIONAL_URL_UNSUPPORTED"
