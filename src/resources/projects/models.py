"""
Pydantic models for project operations.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, model_validator

from core.models.options import OperationOptions
from core.models.pagination import ListOptions, PaginatedCollection

# Project states
PROJECT_STATE_READY = "ready"
PROJECT_STATE_DELETING = "deleting"
PROJECT_STATE_DELETING_FAILED = "deleting_failed"


class ProjectDefinition(BaseModel):
    """User-supplied definition of a project."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(..., min_length=1, max_length=64, description="The name of the project")
    description: StrictStr = Field(
        default="",
        max_length=1024,
        description="A brief explanation of the project's use",
    )
    destroy_on_delete: StrictBool = Field(
        default=True,
        description="Whether resources are destroyed when the project is deleted",
    )


class ProjectDefinitionPatch(BaseModel):
    """Partial project definition; unset fields are left unchanged."""

    model_config = ConfigDict(extra="forbid")

    name: StrictStr | None = Field(None, min_length=1, max_length=64)
    description: StrictStr | None = Field(None, max_length=1024)
    destroy_on_delete: StrictBool | None = None


class CumulativeNeedsAttention(BaseModel):
    """A needs-attention item raised by one of the project's configurations."""

    model_config = ConfigDict(extra="ignore")

    event: StrictStr | None = None
    event_id: StrictStr | None = None
    config_id: StrictStr | None = None
    config_version: StrictInt | None = None


class Project(BaseModel):
    """A project returned by the service."""

    model_config = ConfigDict(extra="ignore")

    id: StrictStr = Field(..., description="The unique ID of the project")
    crn: StrictStr | None = Field(None, description="Cloud resource name of the project")
    href: StrictStr | None = Field(None, description="Relative URL of the project")
    created_at: datetime | None = Field(None, description="RFC 3339 creation timestamp")
    location: StrictStr | None = Field(None, description="Location where the project is deployed")
    resource_group: StrictStr | None = Field(None, description="Resource group of the project")
    state: StrictStr | None = Field(None, description="ready, deleting or deleting_failed")
    event_notifications_crn: StrictStr | None = None
    cumulative_needs_attention_view: list[CumulativeNeedsAttention] = Field(default_factory=list)
    cumulative_needs_attention_view_error: StrictBool | None = None
    definition: ProjectDefinition | None = None


class ProjectCollection(PaginatedCollection):
    """A page of projects."""

    ITEMS_FIELD: ClassVar[str] = "projects"

    projects: list[Project] | None = Field(None, description="Projects on this page")


class CreateProjectOptions(OperationOptions):
    """Options for creating a project."""

    resource_group: StrictStr = Field(..., min_length=1)
    location: StrictStr = Field(..., min_length=1)
    definition: ProjectDefinition


class ListProjectsOptions(ListOptions):
    """Options for listing projects."""


class GetProjectOptions(OperationOptions):
    """Options for fetching a project."""

    id: StrictStr = Field(..., min_length=1)


class UpdateProjectOptions(OperationOptions):
    """Options for updating a project's definition."""

    id: StrictStr = Field(..., min_length=1)
    definition: ProjectDefinitionPatch

    @model_validator(mode="after")
    def validate_has_changes(self) -> "UpdateProjectOptions":
        """Ensure at least one definition field is being changed."""
        if not self.definition.model_dump(exclude_none=True):
            raise ValueError("definition must change at least one field")
        return self


class DeleteProjectOptions(OperationOptions):
    """Options for deleting a project."""

    id: StrictStr = Field(..., min_length=1)
