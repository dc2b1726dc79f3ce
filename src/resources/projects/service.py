"""
Project operations.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.http.base_service import BaseService
from core.utils.response import DetailedResponse

from .models import (
    CreateProjectOptions,
    DeleteProjectOptions,
    GetProjectOptions,
    ListProjectsOptions,
    Project,
    ProjectCollection,
    UpdateProjectOptions,
)

logger = Logger(utc=True)

PROJECTS_PATH = "/v1/projects"
PROJECT_PATH = "/v1/projects/{id}"


class ProjectsService:
    """Create, list, read, update and delete projects."""

    def __init__(self, base: BaseService) -> None:
        self._base = base

    def create_project(self, options: CreateProjectOptions) -> DetailedResponse[Project]:
        """Create a project in a resource group and location."""
        logger.debug(
            "Creating project",
            extra={"name": options.definition.name, "location": options.location},
        )
        return self._base.request(
            "POST",
            PROJECTS_PATH,
            operation_id="CreateProject",
            response_model=Project,
            params={"resource_group": options.resource_group, "location": options.location},
            body={"definition": options.definition.model_dump(mode="json")},
            headers=options.headers,
        )

    def list_projects(
        self,
        options: ListProjectsOptions | None = None,
    ) -> DetailedResponse[ProjectCollection]:
        """List one page of projects, sorted by ID."""
        options = options or ListProjectsOptions()
        return self._base.request(
            "GET",
            PROJECTS_PATH,
            operation_id="ListProjects",
            response_model=ProjectCollection,
            params=options.query_params(),
            headers=options.headers,
        )

    def list_projects_page(self, options: ListProjectsOptions) -> ProjectCollection:
        """Bound list operation used by ProjectsPager."""
        return self.list_projects(options).result  # type: ignore[return-value]

    def get_project(self, options: GetProjectOptions) -> DetailedResponse[Project]:
        return self._base.request(
            "GET",
            PROJECT_PATH,
            operation_id="GetProject",
            response_model=Project,
            path_params={"id": options.id},
            headers=options.headers,
        )

    def update_project(self, options: UpdateProjectOptions) -> DetailedResponse[Project]:
        """Change the project's definition; only fields that are set are sent."""
        return self._base.request(
            "PATCH",
            PROJECT_PATH,
            operation_id="UpdateProject",
            response_model=Project,
            path_params={"id": options.id},
            body={"definition": options.definition.model_dump(mode="json", exclude_none=True)},
            headers=options.headers,
        )

    def delete_project(self, options: DeleteProjectOptions) -> DetailedResponse[None]:
        response = self._base.request(
            "DELETE",
            PROJECT_PATH,
            operation_id="DeleteProject",
            path_params={"id": options.id},
            headers=options.headers,
        )
        logger.info("Project deleted", extra={"project_id": options.id})
        return response
