"""
Project environment operations.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.http.base_service import BaseService
from core.utils.response import DetailedResponse

from .models import (
    CreateProjectEnvironmentOptions,
    DeleteProjectEnvironmentOptions,
    Environment,
    EnvironmentCollection,
    EnvironmentDeleteResponse,
    GetProjectEnvironmentOptions,
    ListProjectEnvironmentsOptions,
)

logger = Logger(utc=True)

ENVIRONMENTS_PATH = "/v1/projects/{project_id}/environments"
ENVIRONMENT_PATH = "/v1/projects/{project_id}/environments/{id}"


class EnvironmentsService:
    """Manage the environments of a project."""

    def __init__(self, base: BaseService) -> None:
        self._base = base

    def create_project_environment(
        self,
        options: CreateProjectEnvironmentOptions,
    ) -> DetailedResponse[Environment]:
        return self._base.request(
            "POST",
            ENVIRONMENTS_PATH,
            operation_id="CreateProjectEnvironment",
            response_model=Environment,
            path_params={"project_id": options.project_id},
            body={"definition": options.definition.model_dump(mode="json")},
            headers=options.headers,
        )

    def list_project_environments(
        self,
        options: ListProjectEnvironmentsOptions,
    ) -> DetailedResponse[EnvironmentCollection]:
        """List one page of environments of a project."""
        return self._base.request(
            "GET",
            ENVIRONMENTS_PATH,
            operation_id="ListProjectEnvironments",
            response_model=EnvironmentCollection,
            path_params={"project_id": options.project_id},
            params=options.query_params(),
            headers=options.headers,
        )

    def list_project_environments_page(
        self,
        options: ListProjectEnvironmentsOptions,
    ) -> EnvironmentCollection:
        """Bound list operation used by ProjectEnvironmentsPager."""
        return self.list_project_environments(options).result  # type: ignore[return-value]

    def get_project_environment(
        self,
        options: GetProjectEnvironmentOptions,
    ) -> DetailedResponse[Environment]:
        return self._base.request(
            "GET",
            ENVIRONMENT_PATH,
            operation_id="GetProjectEnvironment",
            response_model=Environment,
            path_params={"project_id": options.project_id, "id": options.id},
            headers=options.headers,
        )

    def delete_project_environment(
        self,
        options: DeleteProjectEnvironmentOptions,
    ) -> DetailedResponse[EnvironmentDeleteResponse]:
        response = self._base.request(
            "DELETE",
            ENVIRONMENT_PATH,
            operation_id="DeleteProjectEnvironment",
            response_model=EnvironmentDeleteResponse,
            path_params={"project_id": options.project_id, "id": options.id},
            headers=options.headers,
        )
        logger.info(
            "Environment deleted",
            extra={"project_id": options.project_id, "environment_id": options.id},
        )
        return response
