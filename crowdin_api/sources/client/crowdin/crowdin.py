import asyncio
import json
import logging
import mimetypes
import os
from collections.abc import AsyncIterator
from typing import Any, BinaryIO, Dict, Optional, Sequence
from urllib.parse import quote_plus, urlsplit, urlunsplit

import httpx  # type: ignore
from aiolimiter import AsyncLimiter
from pydantic import BaseModel, Field, ValidationError, field_validator  # type: ignore

from crowdin_api.config.constants.crowdin import (
    DEFAULT_BASE_URL,
    DEFAULT_MEDIA_TYPE,
    FILE_NAME_HEADER,
    UPLOAD_CHUNK_SIZE,
    USER_AGENT,
)
from crowdin_api.config.constants.http_status_code import is_not_modified, is_success
from crowdin_api.config.settings import CrowdinSettings
from crowdin_api.exceptions.crowdin_exceptions import APIError, ConstructionError
from crowdin_api.models.crowdin.common import Pagination, RequestModel, ensure_request
from crowdin_api.sources.client.crowdin.envelope import Expect, decode_envelope
from crowdin_api.sources.client.crowdin.errors import map_error_response
from crowdin_api.sources.client.crowdin.patch import PatchInput, build_patch_body
from crowdin_api.sources.client.crowdin.query import with_query
from crowdin_api.sources.client.crowdin.response import CrowdinResponse
from crowdin_api.sources.client.http.http_client import HTTPClient
from crowdin_api.sources.client.http.http_request import HTTPRequest
from crowdin_api.sources.client.iclient import IClient


def organization_base_url(base_url: str, organization: Optional[str]) -> str:
    """Prefix the host with the organization name for Crowdin Enterprise"""
    if not organization:
        return base_url
    parts = urlsplit(base_url)
    return urlunsplit(parts._replace(netloc=f"{organization}.{parts.netloc}"))


def guess_media_type(file_name: str) -> str:
    """Content-Type for an upload, from the file extension"""
    media_type, _ = mimetypes.guess_type(file_name)
    if media_type is None:
        return DEFAULT_MEDIA_TYPE
    if media_type.startswith("text/"):
        return f"{media_type}; charset=utf-8"
    return media_type


class CrowdinRESTClientViaToken(HTTPClient):
    """Crowdin REST client via personal access token

    Every API call goes through the verbs below. Each one builds a request
    from a path, optional list options and an optional body, sends it once,
    and either decodes the success envelope or raises the mapped APIError.

    Args:
        token: Personal access token
        base_url: API base URL (default: https://api.crowdin.com/)
        organization: Crowdin Enterprise organization name, if any
        user_agent: User-Agent header value
        timeout: Default deadline per call in seconds (default: None = no deadline)
        rate_limiter: Optional AsyncLimiter to throttle outgoing requests
        transport: Optional httpx transport (tests use httpx.MockTransport)
        logger: Optional logger instance
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        organization: Optional[str] = None,
        user_agent: str = USER_AGENT,
        timeout: Optional[float] = None,
        rate_limiter: Optional[AsyncLimiter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if not token:
            raise ConstructionError("token cannot be empty")
        super().__init__(
            token,
            "Bearer",
            timeout=timeout,
            rate_limiter=rate_limiter,
            transport=transport,
            logger=logger or logging.getLogger(__name__),
        )
        self.base_url = organization_base_url(base_url, organization).rstrip("/")
        self.organization = organization
        self.user_agent = user_agent

        self.headers.update({
            "User-Agent": user_agent,
            "Accept": "application/json",
        })

    def get_base_url(self) -> str:
        """Get the base URL"""
        return self.base_url

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _serialize(body: Any) -> Any:
        """Turn a request body into JSON-ready data.

        RequestModel bodies are checked first; `None` fields are left out so
        that unset and zero stay distinguishable on the wire.
        """
        if body is None:
            return None
        if isinstance(body, RequestModel):
            return ensure_request(body).to_dict()
        if isinstance(body, BaseModel):
            return body.model_dump(by_alias=True, exclude_none=True, mode="json")
        if isinstance(body, (list, tuple)):
            return [CrowdinRESTClientViaToken._serialize(item) for item in body]
        if isinstance(body, dict):
            return body
        raise ConstructionError(f"unsupported body type: {type(body).__name__}")

    @staticmethod
    def _salvage_pagination(body: bytes) -> Optional[Pagination]:
        # Best effort only: error bodies rarely carry pagination
        try:
            payload = json.loads(body) if body else None
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(payload, dict) or not isinstance(payload.get("pagination"), dict):
            return None
        try:
            return Pagination.model_validate(payload["pagination"])
        except ValidationError:
            return None

    async def request(
        self,
        method: str,
        path: str,
        *,
        options: Any = None,
        body: Any = None,
        expect: Optional[Expect] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> CrowdinResponse:
        """Send one API request and decode the answer.

        Args:
            method: HTTP method
            path: API path, e.g. "/api/v2/projects/1/branches"
            options: List options encoded into the query string (None = no query)
            body: JSON body: a model, a list of models, a dict or a list;
                an async byte stream is sent as is
            expect: Envelope shape of a successful answer (None = ignore body)
            headers: Extra headers, merged over the client defaults
            timeout: Deadline for this call in seconds
        Returns:
            CrowdinResponse with `data` and `pagination` filled in
        Raises:
            ConstructionError: the request is invalid; nothing was sent
            APIError: the server answered with a non-2xx status
            DecodeError: a 2xx body did not match the expected envelope
        """
        url = with_query(self._url(path), options)
        payload = body if isinstance(body, (bytes, AsyncIterator)) else self._serialize(body)

        request = HTTPRequest(
            method=method,
            url=url,
            headers=dict(headers or {}),
            body=payload,
        )
        http_response = await self.execute(request, timeout=timeout)
        response = CrowdinResponse(http_response.response)

        if not is_success(response.status_code):
            response.pagination = self._salvage_pagination(response.bytes())
            error: APIError = map_error_response(response)
            if is_not_modified(response.status_code):
                # unchanged since the given etag; routine for conditional builds
                self.logger.debug(f"{method} {url} not modified")
            else:
                self.logger.warning(f"{method} {url} failed with {response.status_code}: {error}")
            raise error

        decoded = decode_envelope(response.bytes(), expect)
        response.data = decoded.data
        response.pagination = decoded.pagination
        return response

    async def get(
        self,
        path: str,
        options: Any = None,
        expect: Optional[Expect] = None,
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> CrowdinResponse:
        """GET `path`, with `options` as the query string"""
        return await self.request("GET", path, options=options, expect=expect, headers=headers, timeout=timeout)

    async def post(
        self,
        path: str,
        body: Any = None,
        expect: Optional[Expect] = None,
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> CrowdinResponse:
        """POST a JSON body to `path`"""
        return await self.request("POST", path, body=body, expect=expect, headers=headers, timeout=timeout)

    async def put(
        self,
        path: str,
        body: Any = None,
        expect: Optional[Expect] = None,
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> CrowdinResponse:
        """PUT a JSON body to `path`"""
        return await self.request("PUT", path, body=body, expect=expect, headers=headers, timeout=timeout)

    async def patch(
        self,
        path: str,
        operations: Optional[Sequence[PatchInput]],
        expect: Optional[Expect] = None,
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> CrowdinResponse:
        """PATCH `path` with an ordered list of patch operations.

        The operations are validated before anything is sent.
        """
        body = build_patch_body(operations)
        return await self.request("PATCH", path, body=body, expect=expect, headers=headers, timeout=timeout)

    async def patch_raw(
        self,
        path: str,
        body: Any,
        expect: Optional[Expect] = None,
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> CrowdinResponse:
        """PATCH `path` with a free-form JSON body (application data endpoints)"""
        return await self.request("PATCH", path, body=body, expect=expect, headers=headers, timeout=timeout)

    async def delete(
        self,
        path: str,
        body: Any = None,
        expect: Optional[Expect] = None,
        *,
        options: Any = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> CrowdinResponse:
        """DELETE `path`. Both the JSON body and the query options are optional."""
        return await self.request(
            "DELETE", path, options=options, body=body, expect=expect, headers=headers, timeout=timeout
        )

    @staticmethod
    async def _stream_file(file: BinaryIO, chunk_size: int) -> AsyncIterator[bytes]:
        loop = asyncio.get_running_loop()
        while True:
            chunk = await loop.run_in_executor(None, file.read, chunk_size)
            if not chunk:
                break
            yield chunk

    async def upload(
        self,
        path: str,
        file: BinaryIO,
        expect: Optional[Expect] = None,
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        chunk_size: int = UPLOAD_CHUNK_SIZE,
    ) -> CrowdinResponse:
        """Stream an open binary file to `path`.

        Content-Type comes from the file extension (application/octet-stream
        when unknown) and the percent-encoded base name is sent in the
        Crowdin-API-FileName header. Zip archives are not supported.
        """
        if file is None:
            raise ConstructionError("file is required")
        file_name = os.path.basename(getattr(file, "name", "") or "")
        if not file_name:
            raise ConstructionError("file must have a name")
        if file_name.lower().endswith(".zip"):
            raise ConstructionError("zip archives are not supported")

        upload_headers = {
            "Content-Type": guess_media_type(file_name),
            FILE_NAME_HEADER: quote_plus(file_name),
        }
        upload_headers.update(headers or {})

        return await self.request(
            "POST",
            path,
            body=self._stream_file(file, chunk_size),
            expect=expect,
            headers=upload_headers,
            timeout=timeout,
        )


class CrowdinTokenConfig(BaseModel):
    """Configuration for Crowdin REST client via token
    Args:
        token: Personal access token
        organization: Crowdin Enterprise organization name (optional)
        base_url: The base URL of the API
        timeout: Default deadline per call in seconds (None = no deadline)
        user_agent: User-Agent header value
        requests_per_second: Optional client-side throttle
    """
    token: str
    organization: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = Field(default=None, gt=0)
    user_agent: str = USER_AGENT
    requests_per_second: Optional[float] = Field(default=None, gt=0)

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: str) -> str:
        if not v:
            raise ValueError("token cannot be empty")
        return v

    def create_client(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> CrowdinRESTClientViaToken:
        """Create a Crowdin REST client"""
        rate_limiter = None
        if self.requests_per_second:
            rate_limiter = AsyncLimiter(self.requests_per_second, 1)
        return CrowdinRESTClientViaToken(
            self.token,
            base_url=self.base_url,
            organization=self.organization,
            user_agent=self.user_agent,
            timeout=self.timeout,
            rate_limiter=rate_limiter,
            transport=transport,
            logger=logger,
        )

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary, without the token"""
        return self.model_dump(exclude={"token"})


class CrowdinClient(IClient):
    """Builder class for Crowdin clients with different construction methods"""

    def __init__(self, client: CrowdinRESTClientViaToken) -> None:
        """Initialize with a Crowdin REST client object"""
        self.client = client

    def get_client(self) -> CrowdinRESTClientViaToken:
        """Return the Crowdin REST client object"""
        return self.client

    def get_base_url(self) -> str:
        """Get the base URL"""
        return self.client.get_base_url()

    @classmethod
    def build_with_config(
        cls,
        config: CrowdinTokenConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "CrowdinClient":
        """Build CrowdinClient with configuration
        Args:
            config: CrowdinTokenConfig instance
            transport: Optional httpx transport
            logger: Optional logger instance
        Returns:
            CrowdinClient instance
        """
        return cls(config.create_client(transport=transport, logger=logger))

    @classmethod
    def build_from_env(cls, settings: Optional[CrowdinSettings] = None) -> "CrowdinClient":
        """Build CrowdinClient from CROWDIN_* environment variables (and .env)
        Raises:
            ValueError: If no token is configured
        """
        settings = settings or CrowdinSettings.from_env()
        if not settings.token:
            raise ValueError("Crowdin token not found: set CROWDIN_TOKEN")
        config = CrowdinTokenConfig(
            token=settings.token,
            organization=settings.organization,
            base_url=settings.base_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            requests_per_second=settings.requests_per_second,
        )
        return cls.build_with_config(config)

    @classmethod
    async def build_and_validate(
        cls,
        config: CrowdinTokenConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "CrowdinClient":
        """
        Builds the CrowdinClient and validates the token by fetching the
        authenticated user.
        Raises:
            ValueError: If the token is invalid or the connection fails.
        """
        client_instance = cls.build_with_config(config, transport=transport)
        http_client = client_instance.get_client()

        try:
            await http_client.get("/api/v2/user", expect=Expect.raw())
        except APIError as e:
            await http_client.close()
            raise ValueError(f"Crowdin token validation failed: {e}") from e
        except httpx.HTTPError as e:
            await http_client.close()
            raise ValueError(f"Failed to connect to Crowdin for validation: {e!s}") from e

        return client_instance
