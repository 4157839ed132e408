"""Tests for the project sub-resource services."""

import pytest

from jira_sdk.exceptions import (
    NoComponentIDError,
    NoPermissionSchemeIDError,
    NoProjectCategoryIDError,
    NoProjectFeatureKeyError,
    NoProjectFeatureStateError,
    NoProjectIDOrKeyError,
    NoProjectRoleIDError,
)
from jira_sdk.jira.projects import (
    ProjectCategoryService,
    ProjectComponentService,
    ProjectFeatureService,
    ProjectPermissionSchemeService,
    ProjectRoleService,
    ProjectService,
)
from jira_sdk.models.jira import (
    ComponentCountScheme,
    ComponentPayloadScheme,
    ComponentScheme,
    IssueSecurityLevelsScheme,
    NewProjectCreatedScheme,
    NotificationSchemeScheme,
    PermissionSchemeScheme,
    ProjectCategoryPayloadScheme,
    ProjectCategoryScheme,
    ProjectFeaturesScheme,
    ProjectPayloadScheme,
    ProjectRoleDetailScheme,
    ProjectRolePayloadScheme,
    ProjectRoleScheme,
    ProjectScheme,
    ProjectSearchOptionsScheme,
    ProjectSearchScheme,
    ProjectStatusPageScheme,
    ProjectUpdateScheme,
    TaskScheme,
)
from jira_sdk.models.response import ResponseScheme
from tests.fixtures.jira_mocks import MOCK_PROJECT_RESPONSE


class TestProjectCategoryService:
    """Tests for ProjectCategoryService."""

    @pytest.fixture
    def service(self, mock_connector):
        return ProjectCategoryService(mock_connector, "3")

    def test_gets(self, service, assert_request):
        service.gets()

        assert_request(
            "GET", "rest/api/3/projectCategory", target=list[ProjectCategoryScheme]
        )

    def test_get(self, service, assert_request):
        service.get(10000)

        assert_request("GET", "rest/api/3/projectCategory/10000", target=ProjectCategoryScheme)

    def test_create(self, service, assert_request):
        payload = ProjectCategoryPayloadScheme(name="CREATED", description="Created Project Category")

        service.create(payload)

        assert_request("POST", "rest/api/3/projectCategory", payload, ProjectCategoryScheme)

    def test_update(self, service, assert_request):
        payload = ProjectCategoryPayloadScheme(name="UPDATED")

        service.update(10000, payload)

        assert_request(
            "PUT", "rest/api/3/projectCategory/10000", payload, ProjectCategoryScheme
        )

    def test_delete(self, service, assert_request):
        service.delete(10000)

        assert_request("DELETE", "rest/api/3/projectCategory/10000")

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.get(0),
            lambda s: s.update(0, ProjectCategoryPayloadScheme()),
            lambda s: s.delete(0),
        ],
    )
    def test_missing_category_id(self, service, assert_no_request, call):
        with pytest.raises(NoProjectCategoryIDError):
            call(service)
        assert_no_request()


class TestProjectComponentService:
    """Tests for ProjectComponentService."""

    @pytest.fixture
    def service(self, mock_connector):
        return ProjectComponentService(mock_connector, "2")

    def test_create(self, service, assert_request):
        payload = ComponentPayloadScheme(
            name="Component 1",
            project="HSP",
            assignee_type="PROJECT_LEAD",
            lead_account_id="5b10a2844c20165700ede21g",
        )

        service.create(payload)

        assert_request("POST", "rest/api/2/component", payload, ComponentScheme)

    def test_gets(self, service, assert_request):
        service.gets("HSP")

        assert_request(
            "GET", "rest/api/2/project/HSP/components", target=list[ComponentScheme]
        )

    def test_count(self, service, assert_request):
        service.count("10000")

        assert_request(
            "GET",
            "rest/api/2/component/10000/relatedIssueCounts",
            target=ComponentCountScheme,
        )

    def test_get(self, service, assert_request):
        service.get("10000")

        assert_request("GET", "rest/api/2/component/10000", target=ComponentScheme)

    def test_update(self, service, assert_request):
        payload = ComponentPayloadScheme(name="Renamed")

        service.update("10000", payload)

        assert_request("PUT", "rest/api/2/component/10000", payload, ComponentScheme)

    def test_delete(self, service, assert_request):
        service.delete("10000")

        assert_request("DELETE", "rest/api/2/component/10000")

    def test_missing_project(self, service, assert_no_request):
        with pytest.raises(NoProjectIDOrKeyError):
            service.gets("")
        assert_no_request()

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.count(""),
            lambda s: s.get(""),
            lambda s: s.update("", ComponentPayloadScheme()),
            lambda s: s.delete(""),
        ],
    )
    def test_missing_component_id(self, service, assert_no_request, call):
        with pytest.raises(NoComponentIDError):
            call(service)
        assert_no_request()


class TestProjectFeatureService:
    """Tests for ProjectFeatureService."""

    @pytest.fixture
    def service(self, mock_connector):
        return ProjectFeatureService(mock_connector, "3")

    def test_gets(self, service, assert_request):
        service.gets("DUMMY")

        assert_request(
            "GET", "rest/api/3/project/DUMMY/features", target=ProjectFeaturesScheme
        )

    def test_set(self, service, assert_request):
        service.set("DUMMY", "jsw.classic.roadmap", "ENABLED")

        assert_request(
            "PUT",
            "rest/api/3/project/DUMMY/features/jsw.classic.roadmap",
            {"state": "ENABLED"},
            ProjectFeaturesScheme,
        )

    @pytest.mark.parametrize(
        "args,error",
        [
            (("", "jsw.classic.roadmap", "ENABLED"), NoProjectIDOrKeyError),
            (("DUMMY", "", "ENABLED"), NoProjectFeatureKeyError),
            (("DUMMY", "jsw.classic.roadmap", ""), NoProjectFeatureStateError),
        ],
    )
    def test_set_validation(self, service, assert_no_request, args, error):
        with pytest.raises(error):
            service.set(*args)
        assert_no_request()


class TestProjectPermissionSchemeService:
    """Tests for ProjectPermissionSchemeService."""

    @pytest.fixture
    def service(self, mock_connector):
        return ProjectPermissionSchemeService(mock_connector, "3")

    def test_get(self, service, assert_request):
        service.get("DUMMY", expand=["all"])

        assert_request(
            "GET",
            "rest/api/3/project/DUMMY/permissionscheme?expand=all",
            target=PermissionSchemeScheme,
        )

    def test_assign(self, service, assert_request):
        service.assign("DUMMY", 10001)

        assert_request(
            "PUT",
            "rest/api/3/project/DUMMY/permissionscheme",
            {"id": 10001},
            PermissionSchemeScheme,
        )

    def test_assign_without_scheme(self, service, assert_no_request):
        with pytest.raises(NoPermissionSchemeIDError):
            service.assign("DUMMY", 0)
        assert_no_request()

    def test_security_levels(self, service, assert_request):
        service.security_levels("DUMMY")

        assert_request(
            "GET",
            "rest/api/3/project/DUMMY/securitylevel",
            target=IssueSecurityLevelsScheme,
        )

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.get(""),
            lambda s: s.assign("", 10001),
            lambda s: s.security_levels(""),
        ],
    )
    def test_missing_project(self, service, assert_no_request, call):
        with pytest.raises(NoProjectIDOrKeyError, match="jira: no project id or key set"):
            call(service)
        assert_no_request()


class TestProjectRoleService:
    """Tests for ProjectRoleService."""

    @pytest.fixture
    def service(self, mock_connector):
        return ProjectRoleService(mock_connector, "3")

    def test_gets_returns_name_to_url_mapping(self, service, mock_connector, assert_request):
        roles = {"Developers": "https://example.atlassian.net/rest/api/3/project/DUMMY/role/10000"}
        mock_connector.call.return_value = (roles, ResponseScheme(code=200))

        result, _ = service.gets("DUMMY")

        assert result == roles
        assert_request("GET", "rest/api/3/project/DUMMY/role", target=dict[str, str])

    def test_get(self, service, assert_request):
        service.get("DUMMY", 10360)

        assert_request("GET", "rest/api/3/project/DUMMY/role/10360", target=ProjectRoleScheme)

    def test_get_without_role(self, service, assert_no_request):
        with pytest.raises(NoProjectRoleIDError):
            service.get("DUMMY", 0)
        assert_no_request()

    def test_details(self, service, assert_request):
        service.details("DUMMY")

        assert_request(
            "GET",
            "rest/api/3/project/DUMMY/roledetails",
            target=list[ProjectRoleDetailScheme],
        )

    def test_global(self, service, assert_request):
        service.global_()

        assert_request("GET", "rest/api/3/role", target=list[ProjectRoleScheme])

    def test_create(self, service, assert_request):
        payload = ProjectRolePayloadScheme(name="Developers", description="A role")

        service.create(payload)

        assert_request("POST", "rest/api/3/role", payload, ProjectRoleScheme)

    @pytest.mark.parametrize(
        "call",
        [lambda s: s.gets(""), lambda s: s.get("", 1), lambda s: s.details("")],
    )
    def test_missing_project(self, service, assert_no_request, call):
        with pytest.raises(NoProjectIDOrKeyError):
            call(service)
        assert_no_request()


class TestProjectService:
    """Tests for ProjectService."""

    @pytest.fixture
    def service(self, mock_connector):
        return ProjectService(mock_connector, "3")

    def test_create(self, service, assert_request):
        payload = ProjectPayloadScheme(
            key="DUMMY",
            name="Dummy",
            lead_account_id="5b10a2844c20165700ede21g",
            project_type_key="software",
            project_template_key="com.pyxis.greenhopper.jira:gh-simplified-kanban-classic",
            assignee_type="UNASSIGNED",
        )

        service.create(payload)

        assert_request("POST", "rest/api/3/project", payload, NewProjectCreatedScheme)

    def test_created_project_id_is_a_string(self):
        created = NewProjectCreatedScheme.from_api_response(
            {
                "self": "https://example.atlassian.net/rest/api/3/project/10000",
                "id": 10000,
                "key": "DUMMY",
            }
        )

        assert created.id == "10000"

    def test_search_with_options(self, service, assert_request):
        options = ProjectSearchOptionsScheme(
            order_by="issueCount",
            ids=[10000, 10001],
            keys=["DUMMY", "KP"],
            query="dum",
            type_keys=["business", "software"],
            category_id=10000,
            action="view",
            status=["live", "archived"],
            expand=["insight", "lead"],
            properties=["prop1"],
        )

        service.search(options, start_at=0, max_results=50)

        assert_request(
            "GET",
            "rest/api/3/project/search?action=view&categoryId=10000"
            "&expand=insight%2Clead&id=10000&id=10001&keys=DUMMY&keys=KP"
            "&maxResults=50&orderBy=issueCount&properties=prop1&query=dum"
            "&startAt=0&status=live%2Carchived&typeKey=business%2Csoftware",
            target=ProjectSearchScheme,
        )

    def test_search_without_options(self, service, assert_request):
        service.search()

        assert_request(
            "GET",
            "rest/api/3/project/search?maxResults=50&startAt=0",
            target=ProjectSearchScheme,
        )

    def test_get(self, service, mock_connector, assert_request):
        project = ProjectScheme.from_api_response(MOCK_PROJECT_RESPONSE)
        mock_connector.call.return_value = (project, ResponseScheme(code=200))

        result, _ = service.get("DUMMY", expand=["lead", "issueTypes"])

        assert result.lead.display_name == "Mia Krystof"
        assert_request(
            "GET", "rest/api/3/project/DUMMY?expand=lead%2CissueTypes", target=ProjectScheme
        )

    def test_update(self, service, assert_request):
        payload = ProjectUpdateScheme(name="Dummy renamed", description="New description")

        service.update("DUMMY", payload)

        assert_request("PUT", "rest/api/3/project/DUMMY", payload, ProjectScheme)

    def test_delete(self, service, assert_request):
        response = service.delete("DUMMY", enable_undo=True)

        assert response.code == 200
        assert_request("DELETE", "rest/api/3/project/DUMMY?enableUndo=true")

    def test_delete_asynchronously(self, service, assert_request):
        service.delete_asynchronously("DUMMY")

        assert_request("POST", "rest/api/3/project/DUMMY/delete", target=TaskScheme)

    def test_archive(self, service, assert_request):
        service.archive("DUMMY")

        assert_request("POST", "rest/api/3/project/DUMMY/archive")

    def test_restore(self, service, assert_request):
        service.restore("DUMMY")

        assert_request("POST", "rest/api/3/project/DUMMY/restore", target=ProjectScheme)

    def test_statuses(self, service, assert_request):
        service.statuses("DUMMY")

        assert_request(
            "GET",
            "rest/api/3/project/DUMMY/statuses",
            target=list[ProjectStatusPageScheme],
        )

    def test_notification_scheme(self, service, assert_request):
        service.notification_scheme("DUMMY", expand=["all"])

        assert_request(
            "GET",
            "rest/api/3/project/DUMMY/notificationscheme?expand=all",
            target=NotificationSchemeScheme,
        )

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.get(""),
            lambda s: s.update("", ProjectUpdateScheme(name="x")),
            lambda s: s.delete(""),
            lambda s: s.delete_asynchronously(""),
            lambda s: s.archive(""),
            lambda s: s.restore(""),
            lambda s: s.statuses(""),
            lambda s: s.notification_scheme(""),
        ],
    )
    def test_missing_project(self, service, assert_no_request, call):
        with pytest.raises(NoProjectIDOrKeyError, match="jira: no project id or key set"):
            call(service)
        assert_no_request()
