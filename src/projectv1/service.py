"""
Projects API client.

Usage:
    service = ProjectV1.new_instance()
    pager = service.new_projects_pager(ListProjectsOptions(limit=25))
    for project in pager:
        ...
"""

from aws_lambda_powertools import Logger

from core.infrastructure.adapters.http_adapter import HttpAdapterProtocol
from core.infrastructure.auth import Authenticator, get_authenticator_from_environment
from core.infrastructure.http.base_service import BaseService
from core.utils.config import ServiceConfig
from core.utils.constants import DEFAULT_SERVICE_NAME
from core.utils.response import DetailedResponse
from resources.configs.models import (
    CreateConfigOptions,
    DeleteConfigOptions,
    GetConfigOptions,
    ListConfigsOptions,
    ProjectConfig,
    ProjectConfigCollection,
    ProjectConfigDelete,
)
from resources.configs.pager import ConfigsPager
from resources.configs.service import ConfigsService
from resources.environments.models import (
    CreateProjectEnvironmentOptions,
    DeleteProjectEnvironmentOptions,
    Environment,
    EnvironmentCollection,
    EnvironmentDeleteResponse,
    GetProjectEnvironmentOptions,
    ListProjectEnvironmentsOptions,
)
from resources.environments.pager import ProjectEnvironmentsPager
from resources.environments.service import EnvironmentsService
from resources.projects.models import (
    CreateProjectOptions,
    DeleteProjectOptions,
    GetProjectOptions,
    ListProjectsOptions,
    Project,
    ProjectCollection,
    UpdateProjectOptions,
)
from resources.projects.pager import ProjectsPager
from resources.projects.service import ProjectsService

logger = Logger(utc=True)


class ProjectV1(BaseService):
    """Client for the Projects API, version 1."""

    def __init__(
        self,
        config: ServiceConfig | None = None,
        authenticator: Authenticator | None = None,
        *,
        adapter: HttpAdapterProtocol | None = None,
    ) -> None:
        super().__init__(config, authenticator=authenticator, adapter=adapter)
        self.projects = ProjectsService(self)
        self.configs = ConfigsService(self)
        self.environments = EnvironmentsService(self)

    @classmethod
    def new_instance(cls, service_name: str = DEFAULT_SERVICE_NAME) -> "ProjectV1":
        """Build a client from `<SERVICE_NAME>_*` environment variables.

        Raises:
            ConfigurationError: If the environment holds invalid settings
        """
        config = ServiceConfig.from_environment(service_name)
        authenticator = get_authenticator_from_environment(service_name)
        logger.info(
            "Client created from environment",
            extra={"service_name": service_name, "service_url": config.url},
        )
        return cls(config, authenticator)

    # Projects

    def create_project(self, options: CreateProjectOptions) -> DetailedResponse[Project]:
        return self.projects.create_project(options)

    def list_projects(
        self,
        options: ListProjectsOptions | None = None,
    ) -> DetailedResponse[ProjectCollection]:
        return self.projects.list_projects(options)

    def get_project(self, options: GetProjectOptions) -> DetailedResponse[Project]:
        return self.projects.get_project(options)

    def update_project(self, options: UpdateProjectOptions) -> DetailedResponse[Project]:
        return self.projects.update_project(options)

    def delete_project(self, options: DeleteProjectOptions) -> DetailedResponse[None]:
        return self.projects.delete_project(options)

    def new_projects_pager(self, options: ListProjectsOptions | None = None) -> ProjectsPager:
        """Create a pager over every project.

        Raises:
            PagerConfigurationError: If `options.token` is set
        """
        return ProjectsPager(self.projects, options)

    # Configs

    def create_config(self, options: CreateConfigOptions) -> DetailedResponse[ProjectConfig]:
        return self.configs.create_config(options)

    def list_configs(self, options: ListConfigsOptions) -> DetailedResponse[ProjectConfigCollection]:
        return self.configs.list_configs(options)

    def get_config(self, options: GetConfigOptions) -> DetailedResponse[ProjectConfig]:
        return self.configs.get_config(options)

    def delete_config(self, options: DeleteConfigOptions) -> DetailedResponse[ProjectConfigDelete]:
        return self.configs.delete_config(options)

    def new_configs_pager(self, options: ListConfigsOptions) -> ConfigsPager:
        return ConfigsPager(self.configs, options)

    # Environments

    def create_project_environment(
        self,
        options: CreateProjectEnvironmentOptions,
    ) -> DetailedResponse[Environment]:
        return self.environments.create_project_environment(options)

    def list_project_environments(
        self,
        options: ListProjectEnvironmentsOptions,
    ) -> DetailedResponse[EnvironmentCollection]:
        return self.environments.list_project_environments(options)

    def get_project_environment(
        self,
        options: GetProjectEnvironmentOptions,
    ) -> DetailedResponse[Environment]:
        return self.environments.get_project_environment(options)

    def delete_project_environment(
        self,
        options: DeleteProjectEnvironmentOptions,
    ) -> DetailedResponse[EnvironmentDeleteResponse]:
        return self.environments.delete_project_environment(options)

    def new_project_environments_pager(
        self,
        options: ListProjectEnvironmentsOptions,
    ) -> ProjectEnvironmentsPager:
        return ProjectEnvironmentsPager(self.environments, options)
