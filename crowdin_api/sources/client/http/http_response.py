import httpx  # type: ignore


class HTTPResponse:
    """HTTP response
    Args:
        response: The underlying httpx response
    """
    def __init__(self, response: httpx.Response) -> None:
        self.response = response

    @property
    def status_code(self) -> int:
        """Get the status code of the response"""
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        """Get the response headers (case-insensitive)"""
        return self.response.headers

    @property
    def url(self) -> str:
        """Get the URL of the request"""
        return str(self.response.url)

    def bytes(self) -> bytes:
        """Get the raw body of the response"""
        return self.response.content
