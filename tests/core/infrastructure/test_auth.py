"""
Unit tests for core.infrastructure.auth
"""

import pytest

from core.infrastructure.auth import (
    BearerTokenAuthenticator,
    NoAuthAuthenticator,
    get_authenticator_from_environment,
)
from core.models.errors import ConfigurationError


class TestNoAuthAuthenticator:
    def test_leaves_headers_untouched(self) -> None:
        headers = {"Accept": "application/json"}

        NoAuthAuthenticator().authenticate(headers)

        assert headers == {"Accept": "application/json"}


class TestBearerTokenAuthenticator:
    def test_sets_authorization_header(self) -> None:
        headers: dict[str, str] = {}

        BearerTokenAuthenticator("abc").authenticate(headers)

        assert headers == {"Authorization": "Bearer abc"}

    @pytest.mark.parametrize("token", ["", "   "])
    def test_rejects_empty_token(self, token: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            BearerTokenAuthenticator(token)

        assert exc_info.value.error_code == "AUTH_CONFIGURATION_INVALID"

    def test_set_bearer_token(self) -> None:
        authenticator = BearerTokenAuthenticator("old")

        authenticator.set_bearer_token("new")

        assert authenticator.bearer_token == "new"

    def test_set_bearer_token_rejects_empty(self) -> None:
        authenticator = BearerTokenAuthenticator("old")

        with pytest.raises(ConfigurationError):
            authenticator.set_bearer_token("")

        assert authenticator.bearer_token == "old"


class TestGetAuthenticatorFromEnvironment:
    def test_defaults_to_no_auth(self) -> None:
        assert isinstance(get_authenticator_from_environment("project"), NoAuthAuthenticator)

    def test_token_implies_bearer_auth(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROJECT_BEARER_TOKEN", "abc")

        authenticator = get_authenticator_from_environment("project")

        assert isinstance(authenticator, BearerTokenAuthenticator)
        assert authenticator.bearer_token == "abc"

    def test_explicit_noauth_ignores_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROJECT_AUTH_TYPE", "NOAUTH")
        monkeypatch.setenv("PROJECT_BEARER_TOKEN", "abc")

        assert isinstance(get_authenticator_from_environment("project"), NoAuthAuthenticator)

    def test_bearer_without_token_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROJECT_AUTH_TYPE", "bearerToken")

        with pytest.raises(ConfigurationError) as exc_info:
            get_authenticator_from_environment("project")

        assert exc_info.value.details == {"variable": "PROJECT_BEARER_TOKEN"}

    def test_unsupported_type_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROJECT_AUTH_TYPE", "iam")

        with pytest.raises(ConfigurationError) as exc_info:
            get_authenticator_from_environment("project")

        assert "iam" in exc_info.value.message
