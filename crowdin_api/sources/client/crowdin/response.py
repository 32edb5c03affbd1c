from typing import Any, Optional

import httpx  # type: ignore

from crowdin_api.models.crowdin.common import Pagination
from crowdin_api.sources.client.http.http_response import HTTPResponse


class CrowdinResponse(HTTPResponse):
    """Result of a single Crowdin API call.

    Wraps the raw HTTP response and adds the decoded payload and, for list
    calls, the pagination echoed by the server. Created once per call.
    """
    def __init__(
        self,
        response: httpx.Response,
        data: Any = None,
        pagination: Optional[Pagination] = None,
    ) -> None:
        super().__init__(response)
        self.data = data
        self.pagination = pagination

    @property
    def etag(self) -> Optional[str]:
        """ETag header, used for conditional file builds"""
        return self.headers.get("ETag")

    def __repr__(self) -> str:
        return f"<CrowdinResponse [{self.status_code}] {self.response.request.method} {self.url}>"
