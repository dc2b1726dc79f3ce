"""Unit tests for options validation utilities."""

import pytest
from pydantic import BaseModel

from core.models.errors import ValidationError
from core.utils.validators import (
    require_path_params,
    sanitize_validation_errors,
    validate_options,
)


class SampleOptions(BaseModel):
    """Sample model for validation tests."""

    id: str
    limit: int


class TestSanitizeValidationErrors:
    """Tests for sanitize_validation_errors."""

    def test_sanitizes_required_field(self) -> None:
        errors = [{"loc": ("id",), "msg": "Field required"}]

        assert sanitize_validation_errors(errors) == [
            {"field": "id", "message": "This field is required"}
        ]

    def test_defaults_field_to_options(self) -> None:
        errors = [{"msg": "Invalid value"}]

        assert sanitize_validation_errors(errors) == [
            {"field": "options", "message": "Invalid value"}
        ]

    def test_removes_value_error_prefix(self) -> None:
        errors = [{"loc": ("limit",), "msg": "Value error, must be positive"}]

        assert sanitize_validation_errors(errors) == [
            {"field": "limit", "message": "must be positive"}
        ]

    def test_joins_nested_location(self) -> None:
        errors = [{"loc": ("definition", "name"), "msg": "Input should be a valid string"}]

        assert sanitize_validation_errors(errors) == [
            {"field": "definition.name", "message": "Invalid value type"}
        ]


class TestValidateOptions:
    def test_returns_model(self) -> None:
        options = validate_options(SampleOptions, {"id": "p1", "limit": 5})

        assert options == SampleOptions(id="p1", limit=5)

    def test_raises_sdk_validation_error(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_options(SampleOptions, {"id": "p1"})

        assert exc_info.value.message == "Invalid SampleOptions"
        assert exc_info.value.details == {
            "errors": [{"field": "limit", "message": "This field is required"}]
        }


class TestRequirePathParams:
    def test_returns_values(self) -> None:
        assert require_path_params({"project_id": "p1", "id": "c1"}) == {
            "project_id": "p1",
            "id": "c1",
        }

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_rejects_empty_value(self, value: str | None) -> None:
        with pytest.raises(ValidationError) as exc_info:
            require_path_params({"id": value})

        assert exc_info.value.error_code == "MISSING_PATH_PARAM"
        assert exc_info.value.details == {"param": "id"}
