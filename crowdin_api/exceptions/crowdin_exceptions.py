from typing import TYPE_CHECKING, Any, List, Optional, Union

if TYPE_CHECKING:
    from crowdin_api.sources.client.crowdin.response import CrowdinResponse


class CrowdinError(Exception):
    """Base exception for all errors raised by the Crowdin client"""

    def __init__(self, message: str, details: Optional[dict] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConstructionError(CrowdinError, ValueError):
    """Raised when a request is invalid before anything is sent over the wire"""


class DecodeError(CrowdinError):
    """Raised when a success response body cannot be decoded into the expected envelope"""

    def __init__(self, message: str = "failed to decode response body", body: bytes = b"") -> None:
        super().__init__(message, {"body": body[:512]})
        self.body = body


class APIError(CrowdinError):
    """Raised when the API answers with a non-2xx status code.

    `response` is the CrowdinResponse of the failed call, so callers can
    still look at the status code and headers.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Union[int, str, None] = None,
        response: Optional["CrowdinResponse"] = None,
    ) -> None:
        super().__init__(message, {"status_code": status_code, "code": code})
        self.status_code = status_code
        self.code = code
        self.response = response


class ErrorResponse(APIError):
    """`{"error": {"code": ..., "message": ...}}`"""

    def __init__(
        self,
        status_code: int,
        code: Union[int, str, None],
        message: str,
        response: Optional["CrowdinResponse"] = None,
    ) -> None:
        super().__init__(message, status_code, code, response)

    def __str__(self) -> str:
        return f"{self.code} {self.message}"


class ValidationErrorResponse(APIError):
    """`{"errors": [{"error": {"key": ..., "errors": [...]}}]}` and its batch variant"""

    def __init__(
        self,
        status_code: int,
        errors: List[Any],
        response: Optional["CrowdinResponse"] = None,
    ) -> None:
        self.errors = errors
        super().__init__(self._render(errors), status_code, None, response)

    @staticmethod
    def _render_error(error: Any) -> str:
        key = error.key or ""
        parts = [f"{e.message} ({e.code if e.code is not None else 'n/a'})" for e in error.errors]
        return f"{key}: {', '.join(parts)}"

    @classmethod
    def _render(cls, errors: List[Any]) -> str:
        rendered = []
        for item in errors:
            # batch items carry an index and their own nested error list
            if getattr(item, "index", None) is not None:
                nested = "; ".join(cls._render_error(e.error) for e in item.errors)
                rendered.append(f"Index: {item.index}, {nested}")
            else:
                rendered.append(cls._render_error(item.error))
        return "; ".join(rendered)

    def __str__(self) -> str:
        return self.message


class UnexpectedStatusError(APIError):
    """Non-2xx response whose body matches no known error shape"""

    def __init__(self, status_code: int, response: Optional["CrowdinResponse"] = None) -> None:
        super().__init__(f"client: server returned {status_code} status code", status_code, None, response)


def is_api_error(exc: BaseException) -> bool:
    """True if `exc` was produced from a non-2xx API response"""
    return isinstance(exc, APIError)
