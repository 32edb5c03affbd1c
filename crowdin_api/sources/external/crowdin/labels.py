from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from crowdin_api.exceptions.crowdin_exceptions import ConstructionError
from crowdin_api.models.crowdin.labels import (
    AssignToStringsRequest,
    Label,
    LabelAddRequest,
    LabelsListOptions,
    SourceString,
)
from crowdin_api.sources.client.crowdin.envelope import Expect
from crowdin_api.sources.client.crowdin.patch import PatchInput
from crowdin_api.sources.client.crowdin.response import CrowdinResponse
from crowdin_api.sources.external.crowdin.service import CrowdinService


class LabelsService(CrowdinService):
    """Labels group strings inside a project, e.g. by feature or release."""

    async def list(
        self,
        project_id: int,
        options: Optional[LabelsListOptions] = None,
    ) -> Tuple[List[Label], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/labels"""
        resp = await self._client.get(f"/api/v2/projects/{project_id}/labels", options, Expect.many(Label))
        return resp.data, resp

    async def get(self, project_id: int, label_id: int) -> Tuple[Optional[Label], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/labels/{labelId}"""
        resp = await self._client.get(
            f"/api/v2/projects/{project_id}/labels/{label_id}", None, Expect.single(Label)
        )
        return resp.data, resp

    async def add(self, project_id: int, request: LabelAddRequest) -> Tuple[Optional[Label], CrowdinResponse]:
        """POST /api/v2/projects/{projectId}/labels"""
        resp = await self._client.post(f"/api/v2/projects/{project_id}/labels", request, Expect.single(Label))
        return resp.data, resp

    async def edit(
        self,
        project_id: int,
        label_id: int,
        operations: Sequence[PatchInput],
    ) -> Tuple[Optional[Label], CrowdinResponse]:
        """PATCH /api/v2/projects/{projectId}/labels/{labelId}"""
        resp = await self._client.patch(
            f"/api/v2/projects/{project_id}/labels/{label_id}", operations, Expect.single(Label)
        )
        return resp.data, resp

    async def delete(self, project_id: int, label_id: int) -> CrowdinResponse:
        """DELETE /api/v2/projects/{projectId}/labels/{labelId}"""
        return await self._client.delete(f"/api/v2/projects/{project_id}/labels/{label_id}")

    async def assign_to_strings(
        self,
        project_id: int,
        label_id: int,
        string_ids: List[int],
    ) -> Tuple[List[SourceString], CrowdinResponse]:
        """Assign a label to up to 500 strings at a time.

        POST /api/v2/projects/{projectId}/labels/{labelId}/strings
        """
        request = AssignToStringsRequest(string_ids=string_ids)
        resp = await self._client.post(
            f"/api/v2/projects/{project_id}/labels/{label_id}/strings", request, Expect.many(SourceString)
        )
        return resp.data, resp

    async def unassign_from_strings(
        self,
        project_id: int,
        label_id: int,
        string_ids: List[int],
    ) -> Tuple[List[SourceString], CrowdinResponse]:
        """DELETE /api/v2/projects/{projectId}/labels/{labelId}/strings?stringIds=1,2"""
        if not string_ids:
            raise ConstructionError("stringIds cannot be empty")
        resp = await self._client.delete(
            f"/api/v2/projects/{project_id}/labels/{label_id}/strings",
            expect=Expect.many(SourceString),
            options={"stringIds": string_ids},
        )
        return resp.data, resp
