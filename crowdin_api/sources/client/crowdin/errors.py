"""
Mapping of non-2xx responses to typed errors.

Known bodies:
    {"error": {"code": 404, "message": "Branch Not Found"}}
    {"errors": [{"error": {"key": "name", "errors": [{"code": ..., "message": ...}]}}]}
    {"errors": [{"index": 0, "errors": [{"error": {...}}]}]}   (batch requests)

Anything else falls back to UnexpectedStatusError.
"""

import json
from typing import List, Optional, Union

from pydantic import ValidationError  # type: ignore

from crowdin_api.exceptions.crowdin_exceptions import (
    APIError,
    ErrorResponse,
    UnexpectedStatusError,
    ValidationErrorResponse,
)
from crowdin_api.models.crowdin.common import CrowdinModel
from crowdin_api.sources.client.crowdin.response import CrowdinResponse


class ErrorDetail(CrowdinModel):
    code: Union[int, str, None] = None
    message: str = ""


class ErrorBody(CrowdinModel):
    error: ErrorDetail


class KeyedErrors(CrowdinModel):
    key: str = ""
    errors: List[ErrorDetail] = []


class ValidationItem(CrowdinModel):
    error: KeyedErrors


class BatchValidationItem(CrowdinModel):
    index: int
    errors: List[ValidationItem]


class ValidationErrorBody(CrowdinModel):
    errors: List[Union[BatchValidationItem, ValidationItem]]


def _parse(body: bytes) -> Optional[object]:
    if not body or not body.strip():
        return None
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


def map_error_response(response: CrowdinResponse) -> APIError:
    """Build the typed error for a non-2xx response.

    The returned error keeps a reference to `response`, so callers can still
    inspect the status code and headers of the failed call.
    """
    status = response.status_code
    payload = _parse(response.bytes())

    if isinstance(payload, dict) and "error" in payload:
        try:
            parsed = ErrorBody.model_validate(payload)
            return ErrorResponse(status, parsed.error.code, parsed.error.message, response)
        except ValidationError:
            pass  # not this shape; try the next one

    if isinstance(payload, dict) and isinstance(payload.get("errors"), list) and payload["errors"]:
        try:
            parsed_errors = ValidationErrorBody.model_validate(payload)
            return ValidationErrorResponse(status, parsed_errors.errors, response)
        except ValidationError:
            pass

    return UnexpectedStatusError(status, response)
