"""
Partial updates: an ordered list of JSON-Patch-like operations.

Order matters, so the body keeps the exact order it was given in. A later
operation may target a path that an earlier one created.
"""

from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, List, Mapping, Optional, Sequence, Union

from pydantic import Field  # type: ignore

from crowdin_api.exceptions.crowdin_exceptions import ConstructionError
from crowdin_api.models.crowdin.common import CrowdinModel, JSONValue


class PatchOp(str, Enum):
    ADD = "add"
    REPLACE = "replace"
    REMOVE = "remove"
    TEST = "test"


ALLOWED_OPS = ", ".join(op.value for op in PatchOp)
_OP_VALUES = frozenset(op.value for op in PatchOp)

# Distinguishes "value not given" from an explicit JSON null
_MISSING: Any = object()


class PatchOperation(CrowdinModel):
    """One `{op, path, value}` instruction.

    Args:
        op: One of add, replace, remove, test
        path: A JSON Pointer as defined by RFC 6901, e.g. "/title"
        value: New value; not sent for `remove`
    """
    keep_null: ClassVar[FrozenSet[str]] = frozenset({"value"})

    op: str
    path: str = ""
    value: JSONValue = Field(default_factory=lambda: _MISSING)

    def validate_operation(self) -> None:
        """Raise ConstructionError if the operation cannot be sent"""
        if self.op not in _OP_VALUES:
            raise ConstructionError(f'invalid op: "{self.op}", must be one of {ALLOWED_OPS}')
        if not self.path:
            raise ConstructionError("path is required")
        if self.op != PatchOp.REMOVE.value and self.value is _MISSING:
            raise ConstructionError("value is required")

    def to_wire(self) -> Dict[str, Any]:
        wire: Dict[str, Any] = {"op": self.op, "path": self.path}
        if self.op != PatchOp.REMOVE.value and self.value is not _MISSING:
            wire["value"] = self.value
        return wire

    @classmethod
    def replace(cls, path: str, value: Any) -> "PatchOperation":
        return cls(op=PatchOp.REPLACE.value, path=path, value=value)

    @classmethod
    def add(cls, path: str, value: Any) -> "PatchOperation":
        return cls(op=PatchOp.ADD.value, path=path, value=value)

    @classmethod
    def remove(cls, path: str) -> "PatchOperation":
        return cls(op=PatchOp.REMOVE.value, path=path)

    @classmethod
    def test(cls, path: str, value: Any) -> "PatchOperation":
        return cls(op=PatchOp.TEST.value, path=path, value=value)


PatchInput = Union[PatchOperation, Mapping[str, Any]]


def _coerce(item: PatchInput) -> PatchOperation:
    if isinstance(item, PatchOperation):
        return item
    if isinstance(item, Mapping):
        op = item.get("op", "")
        op = op.value if isinstance(op, PatchOp) else op
        if "value" in item:
            return PatchOperation(op=op, path=item.get("path", ""), value=item["value"])
        return PatchOperation(op=op, path=item.get("path", ""))
    raise ConstructionError(f"invalid patch operation type: {type(item).__name__}")


def build_patch_body(operations: Optional[Sequence[PatchInput]]) -> List[Dict[str, Any]]:
    """Validate `operations` and return the JSON-ready PATCH body.

    Raises:
        ConstructionError: the list is empty or None, or an operation is invalid
    """
    if not operations:
        raise ConstructionError("body cannot be empty or None")

    body = []
    for item in operations:
        operation = _coerce(item)
        operation.validate_operation()
        body.append(operation.to_wire())
    return body
