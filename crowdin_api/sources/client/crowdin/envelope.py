"""
Response envelope decoding.

Every Crowdin resource travels wrapped in `{"data": ...}`. Lists wrap each
item again: `{"data": [{"data": item}, ...], "pagination": {...}}`. The
generic envelopes below are parametrized by the resource model, so the
double unwrap lives in one place for every resource type.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError  # type: ignore

from crowdin_api.exceptions.crowdin_exceptions import DecodeError
from crowdin_api.models.crowdin.common import CrowdinModel, JSONValue, Pagination

T = TypeVar("T")


class DataEnvelope(CrowdinModel, Generic[T]):
    """`{"data": T}`"""
    data: Optional[T] = None


class ListEnvelope(CrowdinModel, Generic[T]):
    """`{"data": [{"data": T}, ...], "pagination": {...}}`"""
    data: List[DataEnvelope[T]] = []
    pagination: Optional[Pagination] = None

    def items(self) -> List[T]:
        return [item.data for item in self.data]


class BulkResult(CrowdinModel, Generic[T]):
    """Partial-success result of bulk operations: both partitions of the input"""
    skipped: List[T] = []
    added: List[T] = []


class BulkEnvelope(CrowdinModel, Generic[T]):
    """`{"skipped": [{"data": T}, ...], "added": [{"data": T}, ...]}`"""
    skipped: List[DataEnvelope[T]] = []
    added: List[DataEnvelope[T]] = []
    pagination: Optional[Pagination] = None


class RawEnvelope(CrowdinModel):
    """`{"data": <any JSON>}`, kept verbatim"""
    data: JSONValue = None


class EnvelopeShape(str, Enum):
    SINGLE = "single"
    LIST = "list"
    RAW = "raw"
    BULK = "bulk"
    PLAIN = "plain"
    NONE = "none"


@dataclass(frozen=True)
class Expect:
    """What a call expects back: the envelope shape and the resource model"""
    shape: EnvelopeShape
    model: Optional[Type[Any]] = None

    @classmethod
    def single(cls, model: Type[Any]) -> "Expect":
        return cls(EnvelopeShape.SINGLE, model)

    @classmethod
    def many(cls, model: Type[Any]) -> "Expect":
        return cls(EnvelopeShape.LIST, model)

    @classmethod
    def bulk(cls, model: Type[Any]) -> "Expect":
        """`{"skipped": [{"data": T}], "added": [{"data": T}]}`"""
        return cls(EnvelopeShape.BULK, model)

    @classmethod
    def plain(cls, model: Type[Any]) -> "Expect":
        """The body itself is the model, with no `data` wrapper"""
        return cls(EnvelopeShape.PLAIN, model)

    @classmethod
    def raw(cls) -> "Expect":
        return cls(EnvelopeShape.RAW)

    @classmethod
    def nothing(cls) -> "Expect":
        return cls(EnvelopeShape.NONE)


@dataclass
class DecodedBody:
    """Result of decoding: the unwrapped value and, for lists, the pagination"""
    data: Any = None
    pagination: Optional[Pagination] = None


def _validate(envelope: Type[BaseModel], body: bytes) -> BaseModel:
    try:
        return envelope.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"failed to decode response body: {exc.errors()[0]['msg']}", body) from exc


def decode_envelope(body: bytes, expect: Optional[Expect]) -> DecodedBody:
    """Decode a success response body according to `expect`.

    An empty body (204 No Content) is never parsed and decodes to nothing.
    Invalid JSON or a shape mismatch raises DecodeError; no partial result
    is returned.
    """
    if expect is None or expect.shape is EnvelopeShape.NONE:
        return DecodedBody()

    if not body or not body.strip():
        if expect.shape is EnvelopeShape.LIST:
            return DecodedBody(data=[])
        return DecodedBody()

    if expect.shape is EnvelopeShape.SINGLE:
        single = _validate(DataEnvelope[expect.model], body)
        return DecodedBody(data=single.data)

    if expect.shape is EnvelopeShape.LIST:
        listing = _validate(ListEnvelope[expect.model], body)
        return DecodedBody(data=listing.items(), pagination=listing.pagination)

    if expect.shape is EnvelopeShape.BULK:
        bulk = _validate(BulkEnvelope[expect.model], body)
        return DecodedBody(
            data=BulkResult[expect.model](
                skipped=[item.data for item in bulk.skipped],
                added=[item.data for item in bulk.added],
            ),
            pagination=bulk.pagination,
        )

    if expect.shape is EnvelopeShape.PLAIN:
        return DecodedBody(data=_validate(expect.model, body))

    raw = _validate(RawEnvelope, body)
    return DecodedBody(data=raw.data)
