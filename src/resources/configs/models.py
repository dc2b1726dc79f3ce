"""
Pydantic models for project configuration operations.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from core.models.options import OperationOptions
from core.models.pagination import ListOptions, PaginatedCollection
from core.models.values import InputVariable, OutputValue


class ProjectConfigDefinition(BaseModel):
    """Definition of a deployable configuration inside a project."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(..., min_length=1, max_length=64, description="The name of the configuration")
    description: StrictStr | None = Field(None, max_length=1024)
    locator_id: StrictStr = Field(..., min_length=1, description="A dotted value of catalogID.versionID")
    labels: list[StrictStr] = Field(default_factory=list, max_length=10)
    input: list[InputVariable] = Field(
        default_factory=list,
        description="Inputs of the Schematics template; values can be any JSON value",
    )
    setting: dict[str, StrictStr] = Field(
        default_factory=dict,
        description="Schematics environment variables used during deployment",
    )


class ProjectConfigDefinitionSummary(BaseModel):
    """Definition fields returned in collection listings."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr | None = None
    description: StrictStr | None = None
    locator_id: StrictStr | None = None


class ProjectConfigSummary(BaseModel):
    """A configuration as listed in a project's configuration collection."""

    model_config = ConfigDict(extra="ignore")

    id: StrictStr
    project_id: StrictStr | None = None
    version: StrictInt | None = None
    is_draft: StrictBool | None = None
    state: StrictStr | None = Field(None, description="e.g. draft, validated, approved, installed")
    pipeline_state: StrictStr | None = None
    update_available: StrictBool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    href: StrictStr | None = None
    definition: ProjectConfigDefinitionSummary | None = None


class ProjectConfig(ProjectConfigSummary):
    """A configuration with its full definition and deployment outputs."""

    definition: ProjectConfigDefinition | None = None  # type: ignore[assignment]
    outputs: list[OutputValue] = Field(default_factory=list)


class ProjectConfigCollection(PaginatedCollection):
    """A page of project configurations."""

    ITEMS_FIELD: ClassVar[str] = "configs"

    configs: list[ProjectConfigSummary] | None = None


class ProjectConfigDelete(BaseModel):
    """Response of a configuration deletion."""

    model_config = ConfigDict(extra="ignore")

    id: StrictStr


class CreateConfigOptions(OperationOptions):
    """Options for adding a configuration to a project."""

    project_id: StrictStr = Field(..., min_length=1)
    definition: ProjectConfigDefinition


class ListConfigsOptions(ListOptions):
    """Options for listing a project's configurations."""

    project_id: StrictStr = Field(..., min_length=1)


class GetConfigOptions(OperationOptions):
    """Options for fetching a configuration."""

    project_id: StrictStr = Field(..., min_length=1)
    id: StrictStr = Field(..., min_length=1)


class DeleteConfigOptions(OperationOptions):
    """Options for deleting a configuration."""

    project_id: StrictStr = Field(..., min_length=1)
    id: StrictStr = Field(..., min_length=1)
    draft_only: StrictBool | None = Field(
        None,
        description="Delete only the draft version of the configuration",
    )
