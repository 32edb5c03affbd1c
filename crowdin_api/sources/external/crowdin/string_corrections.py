from __future__ import annotations

from typing import List, Optional, Tuple

from crowdin_api.exceptions.crowdin_exceptions import ConstructionError
from crowdin_api.models.crowdin.string_corrections import (
    StringCorrection,
    StringCorrectionAddRequest,
    StringCorrectionGetOptions,
    StringCorrectionsDeleteOptions,
    StringCorrectionsListOptions,
)
from crowdin_api.sources.client.crowdin.envelope import Expect
from crowdin_api.sources.client.crowdin.response import CrowdinResponse
from crowdin_api.sources.external.crowdin.service import CrowdinService


class StringCorrectionsService(CrowdinService):
    """Corrections of source strings (Enterprise)."""

    async def list(
        self,
        project_id: int,
        options: StringCorrectionsListOptions,
    ) -> Tuple[List[StringCorrection], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/strings/corrections?stringId=..."""
        if options is None or not options.string_id:
            raise ConstructionError("stringId is required")
        resp = await self._client.get(
            f"/api/v2/projects/{project_id}/strings/corrections", options, Expect.many(StringCorrection)
        )
        return resp.data, resp

    async def get(
        self,
        project_id: int,
        correction_id: int,
        options: Optional[StringCorrectionGetOptions] = None,
    ) -> Tuple[Optional[StringCorrection], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/strings/corrections/{correctionId}"""
        resp = await self._client.get(
            f"/api/v2/projects/{project_id}/strings/corrections/{correction_id}",
            options,
            Expect.single(StringCorrection),
        )
        return resp.data, resp

    async def add(
        self,
        project_id: int,
        request: StringCorrectionAddRequest,
    ) -> Tuple[Optional[StringCorrection], CrowdinResponse]:
        """POST /api/v2/projects/{projectId}/strings/corrections"""
        resp = await self._client.post(
            f"/api/v2/projects/{project_id}/strings/corrections", request, Expect.single(StringCorrection)
        )
        return resp.data, resp

    async def delete_corrections(
        self,
        project_id: int,
        options: StringCorrectionsDeleteOptions,
    ) -> CrowdinResponse:
        """Delete every correction of a string.

        DELETE /api/v2/projects/{projectId}/strings/corrections?stringId=...
        """
        if options is None or not options.string_id:
            raise ConstructionError("stringId is required")
        return await self._client.delete(f"/api/v2/projects/{project_id}/strings/corrections", options=options)

    async def restore(
        self,
        project_id: int,
        correction_id: int,
    ) -> Tuple[Optional[StringCorrection], CrowdinResponse]:
        """PUT /api/v2/projects/{projectId}/strings/corrections/{correctionId}"""
        resp = await self._client.put(
            f"/api/v2/projects/{project_id}/strings/corrections/{correction_id}",
            None,
            Expect.single(StringCorrection),
        )
        return resp.data, resp

    async def delete(self, project_id: int, correction_id: int) -> CrowdinResponse:
        """DELETE /api/v2/projects/{projectId}/strings/corrections/{correctionId}"""
        return await self._client.delete(f"/api/v2/projects/{project_id}/strings/corrections/{correction_id}")
