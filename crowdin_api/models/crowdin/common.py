from enum import Enum
from typing import Annotated, Any, ClassVar, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue, ValidationInfo, field_validator  # type: ignore

from crowdin_api.exceptions.crowdin_exceptions import ConstructionError

# Any JSON value. `{}`, `[]` and `null` stay distinct after decoding.
JSONValue = JsonValue


class JSONKind(str, Enum):
    """Shape of a decoded JSON value"""
    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"
    NULL = "null"


def json_kind(value: Any) -> JSONKind:
    """Classify a decoded JSON value"""
    if value is None:
        return JSONKind.NULL
    if isinstance(value, dict):
        return JSONKind.OBJECT
    if isinstance(value, list):
        return JSONKind.ARRAY
    return JSONKind.SCALAR


class CrowdinModel(BaseModel):
    """Base for every Crowdin payload: camelCase on the wire, snake_case in Python"""
    model_config = ConfigDict(populate_by_name=True)

    # fields where an explicit null means something and must not become the default
    keep_null: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # null on a field with a default decodes to that default; required fields still reject it
        if value is not None or info.field_name is None or info.field_name in cls.keep_null:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)

    def to_dict(self) -> dict:
        """Convert to a wire-ready dictionary"""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Pagination(CrowdinModel):
    """Pagination metadata attached to list responses"""
    offset: int = 0
    limit: int = 0
    total: Optional[int] = None


class ListOptions(CrowdinModel):
    """Pagination options shared by every list endpoint

    Args:
        limit: A maximum number of items to retrieve (default 25, max 500)
        offset: A starting offset in the collection of items (default 0)
    """
    limit: Optional[Annotated[int, Field(ge=1)]] = None
    offset: Optional[Annotated[int, Field(ge=0)]] = None


class OrderedListOptions(ListOptions):
    """List options with sorting, e.g. `order_by="createdAt desc,name"`"""
    order_by: Optional[str] = Field(default=None, alias="orderBy")


class RequestModel(CrowdinModel):
    """Request body that can check itself before it is sent.

    Subclasses override `validate_request` and raise ConstructionError
    through `require()` when a mandatory value is missing.
    """

    def validate_request(self) -> None:
        """Raise ConstructionError if the request is incomplete"""
        return None

    @staticmethod
    def require(condition: Any, message: str) -> None:
        if not condition:
            raise ConstructionError(message)


def ensure_request(request: Optional[RequestModel]) -> RequestModel:
    """Reject a missing request and run its own checks"""
    if request is None:
        raise ConstructionError("request cannot be None")
    request.validate_request()
    return request
