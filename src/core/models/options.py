"""Base model for operation options."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from core.utils.validators import validate_options

OptionsT = TypeVar("OptionsT", bound="OperationOptions")


class OperationOptions(BaseModel):
    """Immutable options of a single API operation.

    Instances are never changed after creation; derive a modified value with
    `model_copy(update={...})`.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid")

    headers: dict[str, str] | None = Field(
        None,
        description="Extra HTTP headers sent with the request",
    )

    @classmethod
    def create(cls: type[OptionsT], **data: Any) -> OptionsT:
        """Validate keyword data into options.

        Raises:
            ValidationError: SDK validation error with sanitized field details
        """
        return validate_options(cls, data)
