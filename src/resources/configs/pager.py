"""Pager over the ListConfigs operation."""

from core.paging.pager import Pager

from .models import ListConfigsOptions, ProjectConfigSummary
from .service import ConfigsService


class ConfigsPager(Pager[ListConfigsOptions, ProjectConfigSummary]):
    """Iterates every configuration of one project."""

    def __init__(self, service: ConfigsService, options: ListConfigsOptions) -> None:
        super().__init__(service.list_configs_page, options)
