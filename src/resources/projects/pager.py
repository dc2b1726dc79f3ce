"""Pager over the ListProjects operation."""

from core.paging.pager import Pager

from .models import ListProjectsOptions, Project
from .service import ProjectsService


class ProjectsPager(Pager[ListProjectsOptions, Project]):
    """Iterates every project, one ListProjects call per page."""

    def __init__(
        self,
        service: ProjectsService,
        options: ListProjectsOptions | None = None,
    ) -> None:
        super().__init__(service.list_projects_page, options or ListProjectsOptions())
