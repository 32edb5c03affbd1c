from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from crowdin_api.models.crowdin.fields import CustomField, FieldAddRequest, FieldsListOptions
from crowdin_api.sources.client.crowdin.envelope import Expect
from crowdin_api.sources.client.crowdin.patch import PatchInput
from crowdin_api.sources.client.crowdin.response import CrowdinResponse
from crowdin_api.sources.external.crowdin.service import CrowdinService


class FieldsService(CrowdinService):
    """Custom fields attached to projects, users, tasks, files and strings (Enterprise)."""

    async def list(self, options: Optional[FieldsListOptions] = None) -> Tuple[List[CustomField], CrowdinResponse]:
        """GET /api/v2/fields"""
        resp = await self._client.get("/api/v2/fields", options, Expect.many(CustomField))
        return resp.data, resp

    async def get(self, field_id: int) -> Tuple[Optional[CustomField], CrowdinResponse]:
        """GET /api/v2/fields/{fieldId}"""
        resp = await self._client.get(f"/api/v2/fields/{field_id}", None, Expect.single(CustomField))
        return resp.data, resp

    async def add(self, request: FieldAddRequest) -> Tuple[Optional[CustomField], CrowdinResponse]:
        """POST /api/v2/fields"""
        resp = await self._client.post("/api/v2/fields", request, Expect.single(CustomField))
        return resp.data, resp

    async def edit(
        self,
        field_id: int,
        operations: Sequence[PatchInput],
    ) -> Tuple[Optional[CustomField], CrowdinResponse]:
        """PATCH /api/v2/fields/{fieldId}"""
        resp = await self._client.patch(f"/api/v2/fields/{field_id}", operations, Expect.single(CustomField))
        return resp.data, resp

    async def delete(self, field_id: int) -> CrowdinResponse:
        """DELETE /api/v2/fields/{fieldId}"""
        return await self._client.delete(f"/api/v2/fields/{field_id}")
