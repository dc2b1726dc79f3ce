"""
Pydantic models for project environment operations.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from core.models.options import OperationOptions
from core.models.pagination import ListOptions, PaginatedCollection
from core.models.values import JsonObject


class EnvironmentDefinition(BaseModel):
    """Shared settings applied to configurations deployed into an environment."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(..., min_length=1, max_length=64, description="The name of the environment")
    description: StrictStr = Field(default="", max_length=1024)
    inputs: JsonObject = Field(
        default_factory=dict,
        description="Input values shared by configurations; values can be any JSON value",
    )


class Environment(BaseModel):
    """An environment returned by the service."""

    model_config = ConfigDict(extra="ignore")

    id: StrictStr
    project_id: StrictStr | None = None
    created_at: datetime | None = None
    modified_at: datetime | None = None
    href: StrictStr | None = None
    target_account: StrictStr | None = None
    definition: EnvironmentDefinition | None = None


class EnvironmentCollection(PaginatedCollection):
    """A page of project environments."""

    ITEMS_FIELD: ClassVar[str] = "environments"

    environments: list[Environment] | None = None


class EnvironmentDeleteResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: StrictStr


class CreateProjectEnvironmentOptions(OperationOptions):
    project_id: StrictStr = Field(..., min_length=1)
    definition: EnvironmentDefinition


class ListProjectEnvironmentsOptions(ListOptions):
    """Options for listing a project's environments."""

    project_id: StrictStr = Field(..., min_length=1)


class GetProjectEnvironmentOptions(OperationOptions):
    project_id: StrictStr = Field(..., min_length=1)
    id: StrictStr = Field(..., min_length=1)


class DeleteProjectEnvironmentOptions(OperationOptions):
    project_id: StrictStr = Field(..., min_length=1)
    id: StrictStr = Field(..., min_length=1)
