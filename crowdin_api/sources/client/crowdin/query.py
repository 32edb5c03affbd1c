"""
Query string encoding for list options.

Options are pydantic models (or plain dicts). Every field that carries a
value becomes one `key=value` pair; keys come from field aliases and are
sorted, so encoding the same options twice yields the same string.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from pydantic import BaseModel  # type: ignore

LIST_SEPARATOR = ","


@dataclass(frozen=True)
class QueryParam:
    """Field metadata for query encoding.

    `allowed` restricts a field to an accepted set of values. A value outside
    the set is dropped from the query instead of raising. `None` means the
    filter is unset, so a `0` inside `allowed` is still sent.

    Usage:
        type: Annotated[Optional[int], QueryParam(allowed=(0, 1))] = None
    """
    allowed: Optional[Tuple[Any, ...]] = None


def _is_absent(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple, set, dict)) and len(value) == 0:
        return True
    # numeric zero of any type; bool is an int subclass and handled above
    if isinstance(value, (int, float, Decimal)) and value == 0:
        return True
    return False


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _format(value: Any) -> str:
    if isinstance(value, set):
        value = sorted(value)
    if isinstance(value, (list, tuple)):
        return LIST_SEPARATOR.join(_format_scalar(v) for v in value)
    return _format_scalar(value)


def _field_meta(model: BaseModel, name: str) -> Optional[QueryParam]:
    info = type(model).model_fields.get(name)
    if info is None:
        return None
    for meta in info.metadata:
        if isinstance(meta, QueryParam):
            return meta
    return None


def _model_pairs(options: BaseModel) -> Iterable[Tuple[str, Any]]:
    for name, info in type(options).model_fields.items():
        value = getattr(options, name)
        key = info.alias or name
        meta = _field_meta(options, name)

        if meta is not None and meta.allowed is not None:
            if value is None:
                continue
            raw = value.value if isinstance(value, Enum) else value
            if raw not in meta.allowed:
                continue
            yield key, value
            continue

        if _is_absent(value):
            continue
        yield key, value


def _mapping_pairs(options: Mapping[str, Any]) -> Iterable[Tuple[str, Any]]:
    for key, value in options.items():
        if _is_absent(value):
            continue
        yield key, value


def query_pairs(options: Any) -> List[Tuple[str, str]]:
    """Return the sorted `(key, value)` pairs that `options` encodes to."""
    if options is None:
        return []
    if isinstance(options, BaseModel):
        pairs = _model_pairs(options)
    elif isinstance(options, Mapping):
        pairs = _mapping_pairs(options)
    else:
        raise TypeError(f"unsupported options type: {type(options).__name__}")

    return sorted((key, _format(value)) for key, value in pairs)


def encode_query(options: Any) -> str:
    """Encode list options into a query string without the leading `?`.

    `None` and all-empty options encode to an empty string. List values are
    comma-joined and then percent-encoded as one unit (`,` -> `%2C`).
    """
    return urlencode(query_pairs(options))


def with_query(path: str, options: Any) -> str:
    """Append the encoded options to `path`, if there are any."""
    query = encode_query(options)
    if not query:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"
