"""
Resource services: routes, bodies and decoded results.
"""
import pytest

from crowdin_api.exceptions.crowdin_exceptions import APIError, ConstructionError, ErrorResponse
from crowdin_api.models.crowdin.branches import BranchesMergeRequest
from crowdin_api.models.crowdin.common import JSONKind, json_kind
from crowdin_api.models.crowdin.projects import ProjectsAddRequest, ProjectsListOptions
from crowdin_api.models.crowdin.string_corrections import (
    StringCorrectionAddRequest,
    StringCorrectionsDeleteOptions,
    StringCorrectionsListOptions,
)
from crowdin_api.models.crowdin.teams import ProjectTeamAddRequest, TeamMemberAddRequest
from crowdin_api.models.crowdin.translations import BuildProjectFileTranslationRequest
from crowdin_api.models.crowdin.users import ProjectMemberAddRequest
from crowdin_api.sources.client.crowdin.envelope import BulkResult
from crowdin_api.sources.client.crowdin.patch import PatchOperation
from crowdin_api.sources.external.crowdin.service import CrowdinService


class TestProjects:

    @pytest.mark.asyncio
    async def test_list(self, data_source, mock_api):
        mock_api.add("GET", "/api/v2/projects", json_body={
            "data": [{"data": {"id": 1, "name": "Docs"}}, {"data": {"id": 2, "name": "App", "fields": []}}],
            "pagination": {"offset": 0, "limit": 2},
        })

        projects, resp = await data_source.projects.list(ProjectsListOptions(has_manager_access=1, limit=2))

        assert [p.name for p in projects] == ["Docs", "App"]
        assert projects[1].fields == []
        assert resp.pagination.limit == 2
        assert mock_api.last_request.url.query == b"hasManagerAccess=1&limit=2"

    @pytest.mark.asyncio
    async def test_add_validates_before_sending(self, data_source, mock_api):
        with pytest.raises(ConstructionError, match="name is required"):
            await data_source.projects.add(ProjectsAddRequest(source_language_id="en"))

        assert mock_api.requests == []

    @pytest.mark.asyncio
    async def test_edit(self, data_source, mock_api):
        mock_api.add("PATCH", "/api/v2/projects/4", json_body={"data": {"id": 4, "name": "Renamed"}})

        project, _ = await data_source.projects.edit(4, [PatchOperation.replace("/name", "Renamed")])

        assert project.name == "Renamed"
        assert mock_api.last_json() == [{"op": "replace", "path": "/name", "value": "Renamed"}]

    @pytest.mark.asyncio
    async def test_delete_returns_response_only(self, data_source, mock_api):
        mock_api.add("DELETE", "/api/v2/projects/4", status=204)

        resp = await data_source.projects.delete(4)

        assert resp.status_code == 204


class TestBranches:

    @pytest.mark.asyncio
    async def test_not_found(self, data_source, mock_api):
        mock_api.add("GET", "/api/v2/projects/1/branches/2", status=404,
                     json_body={"error": {"code": 404, "message": "Branch Not Found"}})

        with pytest.raises(ErrorResponse, match="404 Branch Not Found"):
            await data_source.branches.get(1, 2)

    @pytest.mark.asyncio
    async def test_merge(self, data_source, mock_api):
        mock_api.add("POST", "/api/v2/projects/1/branches/2/merges", status=202, json_body={
            "data": {"identifier": "50fb3506", "status": "created", "progress": 0,
                     "attributes": {"sourceBranchId": 3, "deleteAfterMerge": False}},
        })

        merge, resp = await data_source.branches.merge(1, 2, BranchesMergeRequest(source_branch_id=3, dry_run=False))

        assert resp.status_code == 202
        assert merge.identifier == "50fb3506"
        assert merge.attributes.source_branch_id == 3
        assert mock_api.last_json() == {"sourceBranchId": 3, "dryRun": False}

    @pytest.mark.asyncio
    async def test_merge_summary(self, data_source, mock_api):
        mock_api.add("GET", "/api/v2/projects/1/branches/2/merges/abc/summary", json_body={
            "data": {"status": "merged", "sourceBranchId": 3, "targetBranchId": 2, "dryRun": True,
                     "details": {"added": 1, "deleted": 0, "updated": 2, "conflicted": 0}},
        })

        summary, _ = await data_source.branches.get_merge_summary(1, 2, "abc")

        assert summary.dry_run is True
        assert summary.details["updated"] == 2


class TestTeams:

    @pytest.mark.asyncio
    async def test_add_member_partial_success(self, data_source, mock_api):
        mock_api.add("POST", "/api/v2/teams/2/members", status=201, json_body={
            "skipped": [{"data": {"id": 12, "username": "john"}}],
            "added": [{"data": {"id": 13, "username": "jane"}}],
            "pagination": {"offset": 0, "limit": 2},
        })

        result, resp = await data_source.teams.add_member(2, TeamMemberAddRequest(user_ids=[12, 13]))

        assert isinstance(result, BulkResult)
        assert [m.username for m in result.skipped] == ["john"]
        assert [m.username for m in result.added] == ["jane"]
        assert resp.pagination.limit == 2
        assert mock_api.last_json() == {"userIds": [12, 13]}

    @pytest.mark.asyncio
    async def test_add_member_requires_users(self, data_source, mock_api):
        with pytest.raises(ConstructionError, match="userIds is required"):
            await data_source.teams.add_member(2, TeamMemberAddRequest())
        assert mock_api.requests == []

    @pytest.mark.asyncio
    async def test_add_to_project(self, data_source, mock_api):
        mock_api.add("POST", "/api/v2/projects/1/teams", status=201, json_body={
            "skipped": None,
            "added": {"id": 2, "hasManagerAccess": True},
        })

        result, _ = await data_source.teams.add_to_project(1, ProjectTeamAddRequest(team_id=2, manager_access=True))

        assert result.skipped is None
        assert result.added.has_manager_access is True
        assert mock_api.last_json() == {"teamId": 2, "managerAccess": True}


class TestUsers:

    @pytest.mark.asyncio
    async def test_authenticated_user_with_empty_fields(self, data_source, mock_api):
        mock_api.add("GET", "/api/v2/user", json_body={"data": {"id": 1, "username": "john", "fields": []}})

        user, _ = await data_source.users.get_authenticated()

        assert user.username == "john"
        assert json_kind(user.fields) is JSONKind.ARRAY

    @pytest.mark.asyncio
    async def test_add_project_member_needs_someone(self, data_source, mock_api):
        with pytest.raises(ConstructionError, match="one of fields `userIds`, `usernames` or `emails` is required"):
            await data_source.users.add_project_member(1, ProjectMemberAddRequest(manager_access=True))
        assert mock_api.requests == []

    @pytest.mark.asyncio
    async def test_project_member_roles(self, data_source, mock_api):
        mock_api.add("GET", "/api/v2/projects/1/members/5", json_body={"data": {
            "id": 5,
            "username": "jane",
            "roles": [
                {"name": "translator", "permissions": {"allLanguages": False, "languagesAccess": []}},
                {"name": "proofreader", "permissions": {
                    "allLanguages": False,
                    "languagesAccess": {"uk": {"allContent": True, "workflowStepIds": [1]}},
                }},
            ],
        }})

        member, _ = await data_source.users.get_project_member(1, 5)

        assert member.roles[0].permissions.languages_access == {}
        assert member.roles[1].permissions.languages_access["uk"].workflow_step_ids == [1]


class TestStringCorrections:

    @pytest.mark.asyncio
    async def test_list_requires_string_id(self, data_source, mock_api):
        with pytest.raises(ConstructionError, match="stringId is required"):
            await data_source.string_corrections.list(1, StringCorrectionsListOptions())
        assert mock_api.requests == []

    @pytest.mark.asyncio
    async def test_list(self, data_source, mock_api):
        mock_api.add("GET", "/api/v2/projects/1/strings/corrections", json_body={
            "data": [{"data": {"id": 7, "text": "Fixed"}}],
            "pagination": {"offset": 0, "limit": 25},
        })

        corrections, _ = await data_source.string_corrections.list(
            1, StringCorrectionsListOptions(string_id=5, denormalize_placeholders=1)
        )

        assert corrections[0].text == "Fixed"
        assert mock_api.last_request.url.query == b"denormalizePlaceholders=1&stringId=5"

    @pytest.mark.asyncio
    async def test_delete_corrections(self, data_source, mock_api):
        mock_api.add("DELETE", "/api/v2/projects/1/strings/corrections", status=204)

        resp = await data_source.string_corrections.delete_corrections(1, StringCorrectionsDeleteOptions(string_id=5))

        assert resp.status_code == 204
        assert mock_api.last_request.url.query == b"stringId=5"

    @pytest.mark.asyncio
    async def test_add(self, data_source, mock_api):
        mock_api.add("POST", "/api/v2/projects/1/strings/corrections", status=201,
                     json_body={"data": {"id": 8, "text": "Better"}})

        correction, _ = await data_source.string_corrections.add(
            1, StringCorrectionAddRequest(string_id=5, text="Better")
        )

        assert correction.id == 8
        assert mock_api.last_json() == {"stringId": 5, "text": "Better"}


class TestApplications:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("force, query", [(True, b"force=true"), (False, b"")])
    async def test_delete_installation(self, data_source, mock_api, force, query):
        mock_api.add("DELETE", "/api/v2/applications/installations/my-app", status=204)

        await data_source.applications.delete_installation("my-app", force=force)

        assert mock_api.last_request.url.query == query

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [{"key": "value"}, {}, [], ["a", 1], "text", None],
    )
    async def test_get_data_keeps_any_json(self, data_source, mock_api, payload):
        mock_api.add("GET", "/api/v2/applications/my-app/api/settings", json_body={"data": payload})

        data, _ = await data_source.applications.get_data("my-app", "/settings")

        assert data == payload
        assert type(data) is type(payload)

    @pytest.mark.asyncio
    async def test_edit_data_sends_plain_json(self, data_source, mock_api):
        mock_api.add("PATCH", "/api/v2/applications/my-app/api/settings", json_body={"data": {"a": 2}})

        data, _ = await data_source.applications.edit_data("my-app", "settings", {"a": 2})

        assert data == {"a": 2}
        assert mock_api.last_json() == {"a": 2}

    @pytest.mark.asyncio
    async def test_installation_modules(self, data_source, mock_api):
        mock_api.add("GET", "/api/v2/applications/installations/my-app", json_body={"data": {
            "identifier": "my-app",
            "modules": [
                {"key": "custom-mt", "type": "custom-mt", "data": []},
                {"key": "menu", "type": "project-menu", "data": {"url": "/menu"}},
            ],
        }})

        installation, _ = await data_source.applications.get_installation("my-app")

        assert installation.modules[0].data == []
        assert installation.modules[1].data == {"url": "/menu"}


class TestTranslations:

    @pytest.mark.asyncio
    async def test_build_file_with_etag(self, data_source, mock_api):
        mock_api.add("POST", "/api/v2/projects/1/translations/builds/files/2", json_body={
            "data": {"url": "https://example.com/file.xliff", "expireIn": "2026-01-01T00:00:00+00:00"},
        }, headers={"ETag": '"new-etag"'})

        link, resp = await data_source.translations.build_project_file_translation(
            1, 2, BuildProjectFileTranslationRequest(target_language_id="uk"), etag='"old-etag"'
        )

        assert link.url == "https://example.com/file.xliff"
        assert resp.etag == '"new-etag"'
        assert mock_api.last_request.headers["If-None-Match"] == '"old-etag"'
        assert mock_api.last_json() == {"targetLanguageId": "uk"}

    @pytest.mark.asyncio
    async def test_build_file_without_etag(self, data_source, mock_api):
        mock_api.add("POST", "/api/v2/projects/1/translations/builds/files/2", json_body={"data": {"url": "u"}})

        await data_source.translations.build_project_file_translation(
            1, 2, BuildProjectFileTranslationRequest(target_language_id="uk")
        )

        assert "If-None-Match" not in mock_api.last_request.headers

    @pytest.mark.asyncio
    async def test_unchanged_file(self, data_source, mock_api):
        mock_api.add("POST", "/api/v2/projects/1/translations/builds/files/2", status=304)

        with pytest.raises(APIError) as exc_info:
            await data_source.translations.build_project_file_translation(
                1, 2, BuildProjectFileTranslationRequest(target_language_id="uk"), etag='"same"'
            )

        assert exc_info.value.status_code == 304


class TestStorage:

    @pytest.mark.asyncio
    async def test_add(self, data_source, mock_api, tmp_path):
        path = tmp_path / "strings.json"
        path.write_text('{"hello": "world"}')
        mock_api.add("POST", "/api/v2/storages", status=201, json_body={"data": {"id": 61, "fileName": "strings.json"}})

        with path.open("rb") as file:
            storage, _ = await data_source.storage.add(file)

        assert storage.id == 61
        assert storage.file_name == "strings.json"
        assert mock_api.last_request.headers["Crowdin-API-FileName"] == "strings.json"
        assert mock_api.last_request.headers["Content-Type"] == "application/json"


class TestLabels:

    @pytest.mark.asyncio
    async def test_unassign_from_strings(self, data_source, mock_api):
        mock_api.add("DELETE", "/api/v2/projects/1/labels/3/strings", json_body={
            "data": [{"data": {"id": 4, "text": "Hello", "labelIds": []}}],
        })

        strings, _ = await data_source.labels.unassign_from_strings(1, 3, [4, 5])

        assert strings[0].id == 4
        assert mock_api.last_request.url.query == b"stringIds=4%2C5"

    @pytest.mark.asyncio
    async def test_unassign_needs_strings(self, data_source, mock_api):
        with pytest.raises(ConstructionError, match="stringIds cannot be empty"):
            await data_source.labels.unassign_from_strings(1, 3, [])
        assert mock_api.requests == []

    @pytest.mark.asyncio
    async def test_assign_to_strings(self, data_source, mock_api):
        mock_api.add("POST", "/api/v2/projects/1/labels/3/strings", json_body={
            "data": [{"data": {"id": 4, "text": {"one": "file", "other": "files"}}}],
        })

        strings, _ = await data_source.labels.assign_to_strings(1, 3, [4])

        assert strings[0].text == {"one": "file", "other": "files"}
        assert mock_api.last_json() == {"stringIds": [4]}


class TestWebhooks:

    @pytest.mark.asyncio
    async def test_empty_headers_list(self, data_source, mock_api):
        mock_api.add("GET", "/api/v2/projects/1/webhooks/6", json_body={
            "data": {"id": 6, "name": "ci", "headers": [], "payload": {"file.added": {"fileId": "{{fileId}}"}}},
        })

        webhook, _ = await data_source.webhooks.get(1, 6)

        assert webhook.headers == {}
        assert webhook.payload == {"file.added": {"fileId": "{{fileId}}"}}


class TestFields:

    @pytest.mark.asyncio
    async def test_config_shapes(self, data_source, mock_api):
        mock_api.add("GET", "/api/v2/fields", json_body={"data": [
            {"data": {"id": 1, "type": "checkbox", "config": []}},
            {"data": {"id": 2, "type": "select", "config": {"options": [{"label": "A", "value": "a"}]}}},
            {"data": {"id": 3, "type": "text", "config": None}},
        ]})

        fields, _ = await data_source.fields.list()

        assert [json_kind(f.config) for f in fields] == [JSONKind.ARRAY, JSONKind.OBJECT, JSONKind.NULL]


class TestDataSource:

    def test_service_needs_a_client(self):
        with pytest.raises(ValueError):
            CrowdinService(None)

    @pytest.mark.asyncio
    async def test_base_url(self, data_source):
        assert data_source.base_url == "https://api.crowdin.com"
        assert data_source.get_data_source() is data_source
