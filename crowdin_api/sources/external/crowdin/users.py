from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from crowdin_api.models.crowdin.users import (
    InviteUserRequest,
    ProjectMember,
    ProjectMemberAddRequest,
    ProjectMemberReplaceRequest,
    ProjectMembersListOptions,
    User,
    UsersListOptions,
)
from crowdin_api.sources.client.crowdin.envelope import BulkResult, Expect
from crowdin_api.sources.client.crowdin.patch import PatchInput
from crowdin_api.sources.client.crowdin.response import CrowdinResponse
from crowdin_api.sources.external.crowdin.service import CrowdinService


class UsersService(CrowdinService):
    """Users of the account, and members of individual projects."""

    async def get_authenticated(self) -> Tuple[Optional[User], CrowdinResponse]:
        """Get the user the token belongs to.

        GET /api/v2/user
        """
        resp = await self._client.get("/api/v2/user", None, Expect.single(User))
        return resp.data, resp

    async def list_project_members(
        self,
        project_id: int,
        options: Optional[ProjectMembersListOptions] = None,
    ) -> Tuple[List[ProjectMember], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/members"""
        resp = await self._client.get(
            f"/api/v2/projects/{project_id}/members", options, Expect.many(ProjectMember)
        )
        return resp.data, resp

    async def get_project_member(
        self,
        project_id: int,
        member_id: int,
    ) -> Tuple[Optional[ProjectMember], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/members/{memberId}"""
        resp = await self._client.get(
            f"/api/v2/projects/{project_id}/members/{member_id}", None, Expect.single(ProjectMember)
        )
        return resp.data, resp

    async def add_project_member(
        self,
        project_id: int,
        request: ProjectMemberAddRequest,
    ) -> Tuple[Optional[BulkResult[ProjectMember]], CrowdinResponse]:
        """Add members to a project. Existing members come back as skipped.

        POST /api/v2/projects/{projectId}/members
        """
        resp = await self._client.post(
            f"/api/v2/projects/{project_id}/members", request, Expect.bulk(ProjectMember)
        )
        return resp.data, resp

    async def replace_project_member_permissions(
        self,
        project_id: int,
        member_id: int,
        request: ProjectMemberReplaceRequest,
    ) -> Tuple[Optional[ProjectMember], CrowdinResponse]:
        """PUT /api/v2/projects/{projectId}/members/{memberId}"""
        resp = await self._client.put(
            f"/api/v2/projects/{project_id}/members/{member_id}", request, Expect.single(ProjectMember)
        )
        return resp.data, resp

    async def delete_project_member(self, project_id: int, member_id: int) -> CrowdinResponse:
        """DELETE /api/v2/projects/{projectId}/members/{memberId}"""
        return await self._client.delete(f"/api/v2/projects/{project_id}/members/{member_id}")

    async def list(self, options: Optional[UsersListOptions] = None) -> Tuple[List[User], CrowdinResponse]:
        """GET /api/v2/users (Enterprise)"""
        resp = await self._client.get("/api/v2/users", options, Expect.many(User))
        return resp.data, resp

    async def get(self, user_id: int) -> Tuple[Optional[User], CrowdinResponse]:
        """GET /api/v2/users/{userId} (Enterprise)"""
        resp = await self._client.get(f"/api/v2/users/{user_id}", None, Expect.single(User))
        return resp.data, resp

    async def invite(self, request: InviteUserRequest) -> Tuple[Optional[User], CrowdinResponse]:
        """POST /api/v2/users (Enterprise)"""
        resp = await self._client.post("/api/v2/users", request, Expect.single(User))
        return resp.data, resp

    async def edit(self, user_id: int, operations: Sequence[PatchInput]) -> Tuple[Optional[User], CrowdinResponse]:
        """PATCH /api/v2/users/{userId} (Enterprise)"""
        resp = await self._client.patch(f"/api/v2/users/{user_id}", operations, Expect.single(User))
        return resp.data, resp

    async def delete(self, user_id: int) -> CrowdinResponse:
        """DELETE /api/v2/users/{userId} (Enterprise)"""
        return await self._client.delete(f"/api/v2/users/{user_id}")
