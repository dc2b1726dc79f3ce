"""
Project configuration operations.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.http.base_service import BaseService
from core.utils.response import DetailedResponse

from .models import (
    CreateConfigOptions,
    DeleteConfigOptions,
    GetConfigOptions,
    ListConfigsOptions,
    ProjectConfig,
    ProjectConfigCollection,
    ProjectConfigDelete,
)

logger = Logger(utc=True)

CONFIGS_PATH = "/v1/projects/{project_id}/configs"
CONFIG_PATH = "/v1/projects/{project_id}/configs/{id}"


class ConfigsService:
    """Manage the configurations of a project."""

    def __init__(self, base: BaseService) -> None:
        self._base = base

    def create_config(self, options: CreateConfigOptions) -> DetailedResponse[ProjectConfig]:
        return self._base.request(
            "POST",
            CONFIGS_PATH,
            operation_id="CreateConfig",
            response_model=ProjectConfig,
            path_params={"project_id": options.project_id},
            body={"definition": options.definition.model_dump(mode="json", exclude_unset=True)},
            headers=options.headers,
        )

    def list_configs(self, options: ListConfigsOptions) -> DetailedResponse[ProjectConfigCollection]:
        """List one page of configurations of a project."""
        return self._base.request(
            "GET",
            CONFIGS_PATH,
            operation_id="ListConfigs",
            response_model=ProjectConfigCollection,
            path_params={"project_id": options.project_id},
            params=options.query_params(),
            headers=options.headers,
        )

    def list_configs_page(self, options: ListConfigsOptions) -> ProjectConfigCollection:
        """Bound list operation used by ConfigsPager."""
        return self.list_configs(options).result  # type: ignore[return-value]

    def get_config(self, options: GetConfigOptions) -> DetailedResponse[ProjectConfig]:
        return self._base.request(
            "GET",
            CONFIG_PATH,
            operation_id="GetConfig",
            response_model=ProjectConfig,
            path_params={"project_id": options.project_id, "id": options.id},
            headers=options.headers,
        )

    def delete_config(self, options: DeleteConfigOptions) -> DetailedResponse[ProjectConfigDelete]:
        response = self._base.request(
            "DELETE",
            CONFIG_PATH,
            operation_id="DeleteConfig",
            response_model=ProjectConfigDelete,
            path_params={"project_id": options.project_id, "id": options.id},
            params={"draft_only": _format_bool(options.draft_only)},
            headers=options.headers,
        )
        logger.info(
            "Configuration deleted",
            extra={"project_id": options.project_id, "config_id": options.id},
        )
        return response


def _format_bool(value: bool | None) -> str | None:
    if value is None:
        return None
    return "true" if value else "false"
