"""
Unit tests for ProjectsService and ProjectsPager
"""

from collections.abc import Callable
from typing import Any

import pytest
import responses
from responses import matchers

from core.infrastructure.http.base_service import BaseService
from core.models.errors import PagerConfigurationError, TransportError
from resources.projects.models import (
    CreateProjectOptions,
    DeleteProjectOptions,
    GetProjectOptions,
    ListProjectsOptions,
    ProjectDefinition,
    ProjectDefinitionPatch,
    UpdateProjectOptions,
)
from resources.projects.pager import ProjectsPager
from resources.projects.service import ProjectsService

PROJECTS_URL = "https://projects.test.cloud/v1/projects"


@pytest.fixture
def projects(base_service: BaseService) -> ProjectsService:
    return ProjectsService(base_service)


class TestCreateProject:
    def test_sends_query_and_definition(
        self,
        projects: ProjectsService,
        mocked_responses: responses.RequestsMock,
        project_payload: Callable[..., dict[str, Any]],
    ) -> None:
        mocked_responses.add(
            responses.POST,
            PROJECTS_URL,
            json=project_payload("p1"),
            status=201,
            match=[
                matchers.query_param_matcher({"resource_group": "Default", "location": "us-south"}),
                matchers.json_params_matcher(
                    {
                        "definition": {
                            "name": "acme-project",
                            "description": "",
                            "destroy_on_delete": True,
                        }
                    }
                ),
                matchers.header_matcher({"Authorization": "Bearer test-token"}),
            ],
        )

        response = projects.create_project(
            CreateProjectOptions(
                resource_group="Default",
                location="us-south",
                definition=ProjectDefinition(name="acme-project"),
            )
        )

        assert response.status_code == 201
        assert response.result.id == "p1"
        assert response.result.definition.name == "acme-project"


class TestListProjects:
    def test_sends_pagination_params(
        self,
        projects: ProjectsService,
        mocked_responses: responses.RequestsMock,
    ) -> None:
        mocked_responses.add(
            responses.GET,
            PROJECTS_URL,
            json={"limit": 5, "projects": []},
            match=[matchers.query_param_matcher({"limit": "5", "token": "abc"})],
        )

        response = projects.list_projects(ListProjectsOptions(limit=5, token="abc"))

        assert response.result.limit == 5
        assert response.result.page_items() == []

    def test_without_options(
        self,
        projects: ProjectsService,
        mocked_responses: responses.RequestsMock,
    ) -> None:
        mocked_responses.add(
            responses.GET,
            PROJECTS_URL,
            json={"projects": []},
            match=[matchers.query_param_matcher({})],
        )

        assert projects.list_projects().status_code == 200


class TestGetUpdateDeleteProject:
    def test_get_project(
        self,
        projects: ProjectsService,
        mocked_responses: responses.RequestsMock,
        project_payload: Callable[..., dict[str, Any]],
    ) -> None:
        mocked_responses.add(responses.GET, f"{PROJECTS_URL}/p1", json=project_payload("p1"))

        project = projects.get_project(GetProjectOptions(id="p1")).get_result()

        assert project.state == "ready"
        assert project.created_at.year == 2024

    def test_update_sends_only_changed_fields(
        self,
        projects: ProjectsService,
        mocked_responses: responses.RequestsMock,
        project_payload: Callable[..., dict[str, Any]],
    ) -> None:
        mocked_responses.add(
            responses.PATCH,
            f"{PROJECTS_URL}/p1",
            json=project_payload("p1", description="updated"),
            match=[matchers.json_params_matcher({"definition": {"description": "updated"}})],
        )

        response = projects.update_project(
            UpdateProjectOptions(id="p1", definition=ProjectDefinitionPatch(description="updated"))
        )

        assert response.result.definition.description == "updated"

    def test_delete_project(
        self,
        projects: ProjectsService,
        mocked_responses: responses.RequestsMock,
    ) -> None:
        mocked_responses.add(responses.DELETE, f"{PROJECTS_URL}/p1", status=204)

        response = projects.delete_project(DeleteProjectOptions(id="p1"))

        assert response.status_code == 204
        assert response.result is None

    def test_get_missing_project(
        self,
        projects: ProjectsService,
        mocked_responses: responses.RequestsMock,
    ) -> None:
        mocked_responses.add(
            responses.GET,
            f"{PROJECTS_URL}/nope",
            json={"errors": [{"message": "Project nope not found"}]},
            status=404,
        )

        with pytest.raises(TransportError) as exc_info:
            projects.get_project(GetProjectOptions(id="nope"))

        assert exc_info.value.status_code == 404


class TestProjectsPager:
    def test_walks_every_page(
        self,
        projects: ProjectsService,
        mocked_responses: responses.RequestsMock,
        project_payload: Callable[..., dict[str, Any]],
    ) -> None:
        first = mocked_responses.add(
            responses.GET,
            PROJECTS_URL,
            json={
                "limit": 1,
                "next": {"href": f"{PROJECTS_URL}?limit=1&token=1"},
                "projects": [project_payload("p1")],
            },
            match=[matchers.query_param_matcher({"limit": "1"})],
        )
        second = mocked_responses.add(
            responses.GET,
            PROJECTS_URL,
            json={"limit": 1, "projects": [project_payload("p2")]},
            match=[matchers.query_param_matcher({"limit": "1", "token": "1"})],
        )

        pager = ProjectsPager(projects, ListProjectsOptions(limit=1))
        items = pager.get_all()

        assert [project.id for project in items] == ["p1", "p2"]
        assert pager.has_next() is False
        assert first.call_count == 1
        assert second.call_count == 1

    def test_rejects_preset_token(self, projects: ProjectsService) -> None:
        with pytest.raises(PagerConfigurationError):
            ProjectsPager(projects, ListProjectsOptions(token="abc"))
