from __future__ import annotations

from typing import List, Optional, Tuple, Union

from crowdin_api.models.crowdin.translations import (
    BuildProjectFileTranslationRequest,
    BuildProjectRequest,
    BuildsListOptions,
    DownloadLink,
    ProjectBuild,
    PseudoBuildProjectRequest,
)
from crowdin_api.sources.client.crowdin.envelope import Expect
from crowdin_api.sources.client.crowdin.response import CrowdinResponse
from crowdin_api.sources.external.crowdin.service import CrowdinService


class TranslationsService(CrowdinService):
    """Project builds and translated file downloads."""

    async def build_project_file_translation(
        self,
        project_id: int,
        file_id: int,
        request: BuildProjectFileTranslationRequest,
        etag: Optional[str] = None,
    ) -> Tuple[Optional[DownloadLink], CrowdinResponse]:
        """Build a single translated file and get its download link.

        Pass the `etag` of a previous build to skip unchanged files: the
        server then answers 304 Not Modified, raised as an APIError whose
        `status_code` is 304.

        POST /api/v2/projects/{projectId}/translations/builds/files/{fileId}
        """
        headers = None
        if etag is not None:
            headers = {"If-None-Match": etag}
        resp = await self._client.post(
            f"/api/v2/projects/{project_id}/translations/builds/files/{file_id}",
            request,
            Expect.single(DownloadLink),
            headers=headers,
        )
        return resp.data, resp

    async def build_project(
        self,
        project_id: int,
        request: Union[BuildProjectRequest, PseudoBuildProjectRequest, None] = None,
    ) -> Tuple[Optional[ProjectBuild], CrowdinResponse]:
        """Start a project build, or a pseudo-localization build.

        POST /api/v2/projects/{projectId}/translations/builds
        """
        resp = await self._client.post(
            f"/api/v2/projects/{project_id}/translations/builds", request, Expect.single(ProjectBuild)
        )
        return resp.data, resp

    async def list_project_builds(
        self,
        project_id: int,
        options: Optional[BuildsListOptions] = None,
    ) -> Tuple[List[ProjectBuild], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/translations/builds"""
        resp = await self._client.get(
            f"/api/v2/projects/{project_id}/translations/builds", options, Expect.many(ProjectBuild)
        )
        return resp.data, resp

    async def check_build_status(
        self,
        project_id: int,
        build_id: int,
    ) -> Tuple[Optional[ProjectBuild], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/translations/builds/{buildId}"""
        resp = await self._client.get(
            f"/api/v2/projects/{project_id}/translations/builds/{build_id}", None, Expect.single(ProjectBuild)
        )
        return resp.data, resp

    async def download_project_translations(
        self,
        project_id: int,
        build_id: int,
    ) -> Tuple[Optional[DownloadLink], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/translations/builds/{buildId}/download"""
        resp = await self._client.get(
            f"/api/v2/projects/{project_id}/translations/builds/{build_id}/download",
            None,
            Expect.single(DownloadLink),
        )
        return resp.data, resp

    async def cancel_build(self, project_id: int, build_id: int) -> CrowdinResponse:
        """DELETE /api/v2/projects/{projectId}/translations/builds/{buildId}"""
        return await self._client.delete(f"/api/v2/projects/{project_id}/translations/builds/{build_id}")
