import asyncio
import logging
from typing import Optional

import httpx  # type: ignore
from aiolimiter import AsyncLimiter

from crowdin_api.sources.client.http.http_request import HTTPRequest
from crowdin_api.sources.client.http.http_response import HTTPResponse
from crowdin_api.sources.client.iclient import IClient


class HTTPClient(IClient):
    """
    HTTP client with authentication and optional request throttling.

    Features:
    - Automatic Authorization header injection
    - One pooled httpx.AsyncClient shared by every call
    - Optional client-side rate limiting through an AsyncLimiter
    - Per-call deadline; cancellation of the awaiting task aborts the request

    Requests are sent exactly once. Nothing is retried: a failed call surfaces
    to the caller, who owns any retry policy.

    Args:
        token: Authentication token
        token_type: Token type for Authorization header (default: "Bearer")
        timeout: Default whole-request timeout in seconds (default: None = no timeout)
        follow_redirects: Whether to follow HTTP redirects (default: True)
        rate_limiter: Optional AsyncLimiter acquired once per request
        transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        logger: Optional logger instance
    """
    def __init__(
        self,
        token: str,
        token_type: str = "Bearer",
        timeout: Optional[float] = None,
        follow_redirects: bool = True,
        rate_limiter: Optional[AsyncLimiter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ) -> None:
        self.headers = {
            "Authorization": f"{token_type} {token}",
        }
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.rate_limiter = rate_limiter
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> "HTTPClient":
        """Get the client"""
        return self

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure the pooled httpx client is created and available."""
        if self.client is None:
            # Deadlines are applied per call in execute(), not by httpx
            self.client = httpx.AsyncClient(
                transport=self.transport,
                timeout=httpx.Timeout(None),
                follow_redirects=self.follow_redirects
            )
        return self.client

    async def _send(self, client: httpx.AsyncClient, request: HTTPRequest) -> httpx.Response:
        # Merge client headers with request headers (request headers take precedence)
        merged_headers = {**self.headers, **request.headers}
        request_kwargs = {"headers": merged_headers}

        if isinstance(request.body, (dict, list)):
            request_kwargs["json"] = request.body
        elif request.body is not None:
            # bytes or an async byte stream
            request_kwargs["content"] = request.body

        if self.rate_limiter is not None:
            async with self.rate_limiter:
                return await client.request(request.method, request.url, **request_kwargs)
        return await client.request(request.method, request.url, **request_kwargs)

    async def execute(self, request: HTTPRequest, timeout: Optional[float] = None) -> HTTPResponse:
        """Execute an HTTP request
        Args:
            request: The HTTP request to execute
            timeout: Deadline for the whole call in seconds, overrides the client default
        Returns:
            A HTTPResponse object containing the response from the server
        Raises:
            asyncio.TimeoutError: the deadline expired; the request was aborted
            httpx.HTTPError: network or protocol failure
        """
        client = await self._ensure_client()
        deadline = timeout if timeout is not None else self.timeout

        self.logger.debug(f"→ {request.method} {request.url}")
        response = await asyncio.wait_for(self._send(client, request), timeout=deadline)
        self.logger.debug(f"← {response.status_code} {request.method} {request.url}")
        return HTTPResponse(response)

    async def close(self) -> None:
        """Close the client"""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry"""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit"""
        await self.close()
