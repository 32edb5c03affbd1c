from __future__ import annotations

from typing import BinaryIO, List, Optional, Tuple

from crowdin_api.exceptions.crowdin_exceptions import ConstructionError
from crowdin_api.models.crowdin.common import ListOptions
from crowdin_api.models.crowdin.storage import Storage
from crowdin_api.sources.client.crowdin.envelope import Expect
from crowdin_api.sources.client.crowdin.response import CrowdinResponse
from crowdin_api.sources.external.crowdin.service import CrowdinService


class StorageService(CrowdinService):
    """Files must be added to storage before they can be used in a project.

    Files in storage include files for localization, screenshots,
    glossaries and translation memories. Storage keeps them for 24 hours.
    """

    async def add(self, file: BinaryIO) -> Tuple[Optional[Storage], CrowdinResponse]:
        """Upload an open binary file to storage. ZIP files are not supported.

        POST /api/v2/storages
        """
        if file is None:
            raise ConstructionError("file is required")
        resp = await self._client.upload("/api/v2/storages", file, Expect.single(Storage))
        return resp.data, resp

    async def list(self, options: Optional[ListOptions] = None) -> Tuple[List[Storage], CrowdinResponse]:
        """GET /api/v2/storages"""
        resp = await self._client.get("/api/v2/storages", options, Expect.many(Storage))
        return resp.data, resp

    async def get(self, storage_id: int) -> Tuple[Optional[Storage], CrowdinResponse]:
        """GET /api/v2/storages/{storageId}"""
        resp = await self._client.get(f"/api/v2/storages/{storage_id}", None, Expect.single(Storage))
        return resp.data, resp

    async def delete(self, storage_id: int) -> CrowdinResponse:
        """DELETE /api/v2/storages/{storageId}"""
        return await self._client.delete(f"/api/v2/storages/{storage_id}")
