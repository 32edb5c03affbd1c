from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from crowdin_api.models.crowdin.projects import Project, ProjectsAddRequest, ProjectsListOptions
from crowdin_api.sources.client.crowdin.envelope import Expect
from crowdin_api.sources.client.crowdin.patch import PatchInput
from crowdin_api.sources.client.crowdin.response import CrowdinResponse
from crowdin_api.sources.external.crowdin.service import CrowdinService


class ProjectsService(CrowdinService):
    """Projects group source files, strings and their translations."""

    async def list(self, options: Optional[ProjectsListOptions] = None) -> Tuple[List[Project], CrowdinResponse]:
        """List projects.

        GET /api/v2/projects
        """
        resp = await self._client.get("/api/v2/projects", options, Expect.many(Project))
        return resp.data, resp

    async def get(self, project_id: int) -> Tuple[Optional[Project], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}"""
        resp = await self._client.get(f"/api/v2/projects/{project_id}", None, Expect.single(Project))
        return resp.data, resp

    async def add(self, request: ProjectsAddRequest) -> Tuple[Optional[Project], CrowdinResponse]:
        """Create a project.

        POST /api/v2/projects
        """
        resp = await self._client.post("/api/v2/projects", request, Expect.single(Project))
        return resp.data, resp

    async def edit(
        self,
        project_id: int,
        operations: Sequence[PatchInput],
    ) -> Tuple[Optional[Project], CrowdinResponse]:
        """Update project settings with patch operations, e.g.
        `[PatchOperation.replace("/name", "New name")]`.

        PATCH /api/v2/projects/{projectId}
        """
        resp = await self._client.patch(f"/api/v2/projects/{project_id}", operations, Expect.single(Project))
        return resp.data, resp

    async def delete(self, project_id: int) -> CrowdinResponse:
        """DELETE /api/v2/projects/{projectId}"""
        return await self._client.delete(f"/api/v2/projects/{project_id}")
