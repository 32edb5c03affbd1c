from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from crowdin_api.models.crowdin.branches import (
    Branch,
    BranchesAddRequest,
    BranchesCloneRequest,
    BranchesListOptions,
    BranchesMergeRequest,
    BranchMerge,
    BranchMergeSummary,
)
from crowdin_api.sources.client.crowdin.envelope import Expect
from crowdin_api.sources.client.crowdin.patch import PatchInput
from crowdin_api.sources.client.crowdin.response import CrowdinResponse
from crowdin_api.sources.external.crowdin.service import CrowdinService


class BranchesService(CrowdinService):
    """Version branches of a project, with merge and clone operations.

    Merges and clones run asynchronously: the call returns a status object
    whose `identifier` is then polled with `check_merge_status` or
    `check_clone_status`.
    """

    @staticmethod
    def _path(project_id: int, branch_id: Optional[int] = None) -> str:
        path = f"/api/v2/projects/{project_id}/branches"
        if branch_id is not None:
            path += f"/{branch_id}"
        return path

    async def list(
        self,
        project_id: int,
        options: Optional[BranchesListOptions] = None,
    ) -> Tuple[List[Branch], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/branches"""
        resp = await self._client.get(self._path(project_id), options, Expect.many(Branch))
        return resp.data, resp

    async def get(self, project_id: int, branch_id: int) -> Tuple[Optional[Branch], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/branches/{branchId}"""
        resp = await self._client.get(self._path(project_id, branch_id), None, Expect.single(Branch))
        return resp.data, resp

    async def add(self, project_id: int, request: BranchesAddRequest) -> Tuple[Optional[Branch], CrowdinResponse]:
        """POST /api/v2/projects/{projectId}/branches"""
        resp = await self._client.post(self._path(project_id), request, Expect.single(Branch))
        return resp.data, resp

    async def edit(
        self,
        project_id: int,
        branch_id: int,
        operations: Sequence[PatchInput],
    ) -> Tuple[Optional[Branch], CrowdinResponse]:
        """PATCH /api/v2/projects/{projectId}/branches/{branchId}"""
        resp = await self._client.patch(self._path(project_id, branch_id), operations, Expect.single(Branch))
        return resp.data, resp

    async def delete(self, project_id: int, branch_id: int) -> CrowdinResponse:
        """DELETE /api/v2/projects/{projectId}/branches/{branchId}"""
        return await self._client.delete(self._path(project_id, branch_id))

    async def merge(
        self,
        project_id: int,
        branch_id: int,
        request: BranchesMergeRequest,
    ) -> Tuple[Optional[BranchMerge], CrowdinResponse]:
        """Merge `request.source_branch_id` into `branch_id`.

        POST /api/v2/projects/{projectId}/branches/{branchId}/merges
        """
        path = f"{self._path(project_id, branch_id)}/merges"
        resp = await self._client.post(path, request, Expect.single(BranchMerge))
        return resp.data, resp

    async def check_merge_status(
        self,
        project_id: int,
        branch_id: int,
        merge_id: str,
    ) -> Tuple[Optional[BranchMerge], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/branches/{branchId}/merges/{mergeId}"""
        path = f"{self._path(project_id, branch_id)}/merges/{merge_id}"
        resp = await self._client.get(path, None, Expect.single(BranchMerge))
        return resp.data, resp

    async def get_merge_summary(
        self,
        project_id: int,
        branch_id: int,
        merge_id: str,
    ) -> Tuple[Optional[BranchMergeSummary], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/branches/{branchId}/merges/{mergeId}/summary"""
        path = f"{self._path(project_id, branch_id)}/merges/{merge_id}/summary"
        resp = await self._client.get(path, None, Expect.single(BranchMergeSummary))
        return resp.data, resp

    async def clone(
        self,
        project_id: int,
        branch_id: int,
        request: BranchesCloneRequest,
    ) -> Tuple[Optional[BranchMerge], CrowdinResponse]:
        """POST /api/v2/projects/{projectId}/branches/{branchId}/clones"""
        path = f"{self._path(project_id, branch_id)}/clones"
        resp = await self._client.post(path, request, Expect.single(BranchMerge))
        return resp.data, resp

    async def get_clone(
        self,
        project_id: int,
        branch_id: int,
        clone_id: str,
    ) -> Tuple[Optional[Branch], CrowdinResponse]:
        """Get the branch created by a finished clone.

        GET /api/v2/projects/{projectId}/branches/{branchId}/clones/{cloneId}/branch
        """
        path = f"{self._path(project_id, branch_id)}/clones/{clone_id}/branch"
        resp = await self._client.get(path, None, Expect.single(Branch))
        return resp.data, resp

    async def check_clone_status(
        self,
        project_id: int,
        branch_id: int,
        clone_id: str,
    ) -> Tuple[Optional[BranchMerge], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/branches/{branchId}/clones/{cloneId}"""
        path = f"{self._path(project_id, branch_id)}/clones/{clone_id}"
        resp = await self._client.get(path, None, Expect.single(BranchMerge))
        return resp.data, resp
