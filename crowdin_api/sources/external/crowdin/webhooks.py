from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from crowdin_api.models.crowdin.common import ListOptions
from crowdin_api.models.crowdin.webhooks import Webhook, WebhookAddRequest
from crowdin_api.sources.client.crowdin.envelope import Expect
from crowdin_api.sources.client.crowdin.patch import PatchInput
from crowdin_api.sources.client.crowdin.response import CrowdinResponse
from crowdin_api.sources.external.crowdin.service import CrowdinService


class WebhooksService(CrowdinService):
    """Project webhooks."""

    async def list(
        self,
        project_id: int,
        options: Optional[ListOptions] = None,
    ) -> Tuple[List[Webhook], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/webhooks"""
        resp = await self._client.get(f"/api/v2/projects/{project_id}/webhooks", options, Expect.many(Webhook))
        return resp.data, resp

    async def get(self, project_id: int, webhook_id: int) -> Tuple[Optional[Webhook], CrowdinResponse]:
        """GET /api/v2/projects/{projectId}/webhooks/{webhookId}"""
        resp = await self._client.get(
            f"/api/v2/projects/{project_id}/webhooks/{webhook_id}", None, Expect.single(Webhook)
        )
        return resp.data, resp

    async def add(self, project_id: int, request: WebhookAddRequest) -> Tuple[Optional[Webhook], CrowdinResponse]:
        """POST /api/v2/projects/{projectId}/webhooks"""
        resp = await self._client.post(f"/api/v2/projects/{project_id}/webhooks", request, Expect.single(Webhook))
        return resp.data, resp

    async def edit(
        self,
        project_id: int,
        webhook_id: int,
        operations: Sequence[PatchInput],
    ) -> Tuple[Optional[Webhook], CrowdinResponse]:
        """PATCH /api/v2/projects/{projectId}/webhooks/{webhookId}"""
        resp = await self._client.patch(
            f"/api/v2/projects/{project_id}/webhooks/{webhook_id}", operations, Expect.single(Webhook)
        )
        return resp.data, resp

    async def delete(self, project_id: int, webhook_id: int) -> CrowdinResponse:
        """DELETE /api/v2/projects/{projectId}/webhooks/{webhookId}"""
        return await self._client.delete(f"/api/v2/projects/{project_id}/webhooks/{webhook_id}")
