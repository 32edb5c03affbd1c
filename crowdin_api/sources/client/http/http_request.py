from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field  # type: ignore


class HTTPRequest(BaseModel):
    """HTTP request
    Args:
        url: The URL of the request, query string included
        method: The HTTP method to use
        headers: The headers to send with the request
        body: The body of the request. JSON-ready data (dict or list),
            raw bytes, or an async byte stream for uploads
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    url: str
    method: str = Field(default="GET")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Any = None
