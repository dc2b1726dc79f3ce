"""Options validation utilities."""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import ValidationError
from core.utils.constants import ERROR_CODE_MISSING_PATH_PARAM

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: list[Any]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for error details.

    Removes sensitive/internal fields like:
    - url
    - ctx
    - input
    - internal exception details
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "options"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        # Friendly rewrites for common cases
        msg_lower = msg.lower()
        if "field required" in msg_lower:
            msg = "This field is required"
        elif "valid string" in msg_lower or "valid integer" in msg_lower:
            msg = "Invalid value type"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def validate_options(model: type[ModelT], data: Mapping[str, Any]) -> ModelT:
    """Build operation options from keyword data.

    Args:
        model: Pydantic options model class
        data: Input data to validate

    Returns:
        The validated options instance

    Raises:
        ValidationError: With sanitized field errors in `details`
    """
    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise ValidationError(
            message=f"Invalid {model.__name__}",
            details={"errors": sanitize_validation_errors(exc.errors())},
        ) from exc


def require_path_params(path_params: Mapping[str, str | None]) -> dict[str, str]:
    """Ensure every path parameter is a non-empty string.

    Raises:
        ValidationError: Naming the first missing parameter
    """
    resolved: dict[str, str] = {}

    for name, value in path_params.items():
        if value is None or not str(value).strip():
            raise ValidationError(
                message=f"Path parameter '{name}' must not be empty",
                error_code=ERROR_CODE_MISSING_PATH_PARAM,
                details={"param": name},
            )
        resolved[name] = str(value)

    return resolved
