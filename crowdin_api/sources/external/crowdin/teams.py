from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from crowdin_api.models.crowdin.common import ListOptions
from crowdin_api.models.crowdin.teams import (
    ProjectTeamAddRequest,
    ProjectTeamAddResult,
    Team,
    TeamAddRequest,
    TeamMember,
    TeamMemberAddRequest,
    TeamsListOptions,
)
from crowdin_api.sources.client.crowdin.envelope import BulkResult, Expect
from crowdin_api.sources.client.crowdin.patch import PatchInput
from crowdin_api.sources.client.crowdin.response import CrowdinResponse
from crowdin_api.sources.external.crowdin.service import CrowdinService


class TeamsService(CrowdinService):
    """Teams (Enterprise) bundle users so they can be added to projects together."""

    async def list(self, options: Optional[TeamsListOptions] = None) -> Tuple[List[Team], CrowdinResponse]:
        """GET /api/v2/teams"""
        resp = await self._client.get("/api/v2/teams", options, Expect.many(Team))
        return resp.data, resp

    async def get(self, team_id: int) -> Tuple[Optional[Team], CrowdinResponse]:
        """GET /api/v2/teams/{teamId}"""
        resp = await self._client.get(f"/api/v2/teams/{team_id}", None, Expect.single(Team))
        return resp.data, resp

    async def add(self, request: TeamAddRequest) -> Tuple[Optional[Team], CrowdinResponse]:
        """POST /api/v2/teams"""
        resp = await self._client.post("/api/v2/teams", request, Expect.single(Team))
        return resp.data, resp

    async def edit(self, team_id: int, operations: Sequence[PatchInput]) -> Tuple[Optional[Team], CrowdinResponse]:
        """PATCH /api/v2/teams/{teamId}"""
        resp = await self._client.patch(f"/api/v2/teams/{team_id}", operations, Expect.single(Team))
        return resp.data, resp

    async def delete(self, team_id: int) -> CrowdinResponse:
        """DELETE /api/v2/teams/{teamId}"""
        return await self._client.delete(f"/api/v2/teams/{team_id}")

    async def add_to_project(
        self,
        project_id: int,
        request: ProjectTeamAddRequest,
    ) -> Tuple[Optional[ProjectTeamAddResult], CrowdinResponse]:
        """Add a team to a project. The team is reported as either skipped or added.

        POST /api/v2/projects/{projectId}/teams
        """
        resp = await self._client.post(
            f"/api/v2/projects/{project_id}/teams", request, Expect.plain(ProjectTeamAddResult)
        )
        return resp.data, resp

    async def list_members(
        self,
        team_id: int,
        options: Optional[ListOptions] = None,
    ) -> Tuple[List[TeamMember], CrowdinResponse]:
        """GET /api/v2/teams/{teamId}/members"""
        resp = await self._client.get(f"/api/v2/teams/{team_id}/members", options, Expect.many(TeamMember))
        return resp.data, resp

    async def add_member(
        self,
        team_id: int,
        request: TeamMemberAddRequest,
    ) -> Tuple[Optional[BulkResult[TeamMember]], CrowdinResponse]:
        """Add users to a team. Users already in the team come back as skipped.

        POST /api/v2/teams/{teamId}/members
        """
        resp = await self._client.post(f"/api/v2/teams/{team_id}/members", request, Expect.bulk(TeamMember))
        return resp.data, resp

    async def delete_member(self, team_id: int, member_id: int) -> CrowdinResponse:
        """DELETE /api/v2/teams/{teamId}/members/{memberId}"""
        return await self._client.delete(f"/api/v2/teams/{team_id}/members/{member_id}")

    async def delete_all_members(self, team_id: int) -> CrowdinResponse:
        """DELETE /api/v2/teams/{teamId}/members"""
        return await self._client.delete(f"/api/v2/teams/{team_id}/members")
