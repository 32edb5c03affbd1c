"""
The plain HTTP layer under the Crowdin transport.
"""
import json

import pytest

from crowdin_api.sources.client.http.http_client import HTTPClient
from crowdin_api.sources.client.http.http_request import HTTPRequest
from crowdin_api.sources.client.http.http_response import HTTPResponse


class TestHTTPRequest:

    def test_fields(self):
        request = HTTPRequest(url="https://api.crowdin.com/api/v2/user")

        assert set(HTTPRequest.model_fields) == {"url", "method", "headers", "body"}
        assert request.method == "GET"
        assert request.headers == {}
        assert request.body is None


class TestExecute:

    @pytest.mark.asyncio
    async def test_request_headers_override_client_headers(self, mock_api):
        mock_api.add("GET", "/api/v2/user", json_body={"data": {"id": 1}}, headers={"ETag": "abc"})
        client = HTTPClient("secret", "Bearer", transport=mock_api.transport())
        try:
            response = await client.execute(HTTPRequest(
                url="https://api.crowdin.com/api/v2/user",
                headers={"Authorization": "Bearer other", "X-Trace": "1"},
            ))
        finally:
            await client.close()

        assert isinstance(response, HTTPResponse)
        assert response.status_code == 200
        assert response.headers["etag"] == "abc"
        assert response.url == "https://api.crowdin.com/api/v2/user"
        assert json.loads(response.bytes()) == {"data": {"id": 1}}
        assert mock_api.last_request.headers["Authorization"] == "Bearer other"
        assert mock_api.last_request.headers["X-Trace"] == "1"

    @pytest.mark.asyncio
    async def test_bytes_body_is_sent_as_is(self, mock_api):
        mock_api.add("POST", "/api/v2/storages", status=201)
        client = HTTPClient("secret", transport=mock_api.transport())
        try:
            await client.execute(HTTPRequest(
                url="https://api.crowdin.com/api/v2/storages",
                method="POST",
                body=b"raw bytes",
            ))
        finally:
            await client.close()

        assert mock_api.last_body == b"raw bytes"
        assert mock_api.last_request.headers["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_context_manager_closes_the_pool(self, mock_api):
        async with HTTPClient("secret", transport=mock_api.transport()) as client:
            assert client.client is not None
            assert client.get_client() is client

        assert client.client is None
