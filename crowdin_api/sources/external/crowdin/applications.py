from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from crowdin_api.models.crowdin.applications import InstallApplicationRequest, Installation
from crowdin_api.models.crowdin.common import JSONValue, ListOptions
from crowdin_api.sources.client.crowdin.envelope import Expect
from crowdin_api.sources.client.crowdin.patch import PatchInput
from crowdin_api.sources.client.crowdin.response import CrowdinResponse
from crowdin_api.sources.external.crowdin.service import CrowdinService


class ApplicationsService(CrowdinService):
    """Installed Crowdin apps and the data they store.

    Application data is free-form: the `*_data` calls return whatever JSON
    value the app keeps (object, array, scalar or null) without coercion.
    """

    @staticmethod
    def _data_path(application_id: str, path: str) -> str:
        return f"/api/v2/applications/{application_id}/api/{path.lstrip('/')}"

    async def list_installations(
        self,
        options: Optional[ListOptions] = None,
    ) -> Tuple[List[Installation], CrowdinResponse]:
        """GET /api/v2/applications/installations"""
        resp = await self._client.get("/api/v2/applications/installations", options, Expect.many(Installation))
        return resp.data, resp

    async def get_installation(self, application_id: str) -> Tuple[Optional[Installation], CrowdinResponse]:
        """GET /api/v2/applications/installations/{applicationId}"""
        resp = await self._client.get(
            f"/api/v2/applications/installations/{application_id}", None, Expect.single(Installation)
        )
        return resp.data, resp

    async def install(self, request: InstallApplicationRequest) -> Tuple[Optional[Installation], CrowdinResponse]:
        """POST /api/v2/applications/installations"""
        resp = await self._client.post("/api/v2/applications/installations", request, Expect.single(Installation))
        return resp.data, resp

    async def edit_installation(
        self,
        application_id: str,
        operations: Sequence[PatchInput],
    ) -> Tuple[Optional[Installation], CrowdinResponse]:
        """PATCH /api/v2/applications/installations/{applicationId}"""
        resp = await self._client.patch(
            f"/api/v2/applications/installations/{application_id}", operations, Expect.single(Installation)
        )
        return resp.data, resp

    async def delete_installation(self, application_id: str, force: bool = False) -> CrowdinResponse:
        """DELETE /api/v2/applications/installations/{applicationId}[?force=true]"""
        return await self._client.delete(
            f"/api/v2/applications/installations/{application_id}",
            options={"force": force},
        )

    async def get_data(self, application_id: str, path: str) -> Tuple[JSONValue, CrowdinResponse]:
        """GET /api/v2/applications/{applicationId}/api/{path}"""
        resp = await self._client.get(self._data_path(application_id, path), None, Expect.raw())
        return resp.data, resp

    async def add_data(
        self,
        application_id: str,
        path: str,
        data: Dict[str, Any],
    ) -> Tuple[JSONValue, CrowdinResponse]:
        """POST /api/v2/applications/{applicationId}/api/{path}"""
        resp = await self._client.post(self._data_path(application_id, path), data, Expect.raw())
        return resp.data, resp

    async def update_or_restore_data(
        self,
        application_id: str,
        path: str,
        data: Dict[str, Any],
    ) -> Tuple[JSONValue, CrowdinResponse]:
        """PUT /api/v2/applications/{applicationId}/api/{path}"""
        resp = await self._client.put(self._data_path(application_id, path), data, Expect.raw())
        return resp.data, resp

    async def edit_data(
        self,
        application_id: str,
        path: str,
        data: Dict[str, Any],
    ) -> Tuple[JSONValue, CrowdinResponse]:
        """PATCH /api/v2/applications/{applicationId}/api/{path}

        The body is the app's own JSON, not a list of patch operations.
        """
        resp = await self._client.patch_raw(self._data_path(application_id, path), data, Expect.raw())
        return resp.data, resp

    async def delete_data(self, application_id: str, path: str) -> CrowdinResponse:
        """DELETE /api/v2/applications/{applicationId}/api/{path}"""
        return await self._client.delete(self._data_path(application_id, path))
