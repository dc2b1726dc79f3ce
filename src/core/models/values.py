"""Models carrying free-form JSON values."""

from pydantic import BaseModel, ConfigDict, Field, JsonValue, StrictStr


class InputVariable(BaseModel):
    """A named input whose value can be any JSON value."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(..., description="The variable name")
    value: JsonValue = Field(None, description="String, number, boolean, null, list or object")


class OutputValue(BaseModel):
    """A named output produced by a deployed configuration."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(..., description="The variable name")
    description: StrictStr | None = Field(None, description="A short explanation of the output value")
    value: JsonValue = Field(None, description="String, number, boolean, null, list or object")


JsonObject = dict[str, JsonValue]
