"""Pager over the ListProjectEnvironments operation."""

from core.paging.pager import Pager

from .models import Environment, ListProjectEnvironmentsOptions
from .service import EnvironmentsService


class ProjectEnvironmentsPager(Pager[ListProjectEnvironmentsOptions, Environment]):
    """Iterates every environment of one project."""

    def __init__(
        self,
        service: EnvironmentsService,
        options: ListProjectEnvironmentsOptions,
    ) -> None:
        super().__init__(service.list_project_environments_page, options)
