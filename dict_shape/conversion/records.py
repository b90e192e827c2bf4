"""Extraction of the externally visible fields of record values.

Three record flavours are understood:

* pydantic models, dumped through ``model_dump(by_alias=True)`` so that field
  aliases and private attributes behave exactly as they do in pydantic's own
  serialization;
* dataclass instances, whose fields may carry a label in their metadata
  (``field(metadata=label("id"))``) or be hidden (``field(metadata=hidden())``);
* named tuples.

Fields whose name starts with an underscore are never exported.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from pydantic import BaseModel, TypeAdapter
from pydantic.dataclasses import is_pydantic_dataclass
from pydantic_core import PydanticSerializationError

from dict_shape.errors import ConversionError

from .kinds import ShapeKind, classify, is_named_tuple


LABEL_KEY = "name"
EXPORTED_KEY = "exported"


def label(name: str) -> dict[str, Any]:
    """Build dataclass field metadata giving the field an external name."""
    if not name:
        msg = "label must not be empty"
        raise ValueError(msg)
    return {LABEL_KEY: name}


def hidden() -> dict[str, Any]:
    """Build dataclass field metadata that keeps the field out of conversions."""
    return {EXPORTED_KEY: False}


def _is_private(name: str) -> bool:
    return name.startswith("_")


def _dumped_fields(record: Any, dumped: Any) -> dict[str, Any]:
    match classify(dumped):
        case ShapeKind.MAPPING:
            return dict(dumped)
        case ShapeKind.ORDERED_SEQUENCE | ShapeKind.FIXED_SEQUENCE:
            return {str(index): value for index, value in enumerate(dumped)}
        case _:
            msg = f"{type(record).__name__} does not dump to a mapping or sequence"
            raise ConversionError(msg)


def _pydantic_to_dict(record: Any) -> dict[str, Any]:
    try:
        if isinstance(record, BaseModel):
            dumped = record.model_dump(mode="python", by_alias=True)
        else:
            dumped = TypeAdapter(type(record)).dump_python(record, mode="python", by_alias=True)
    except (PydanticSerializationError, AttributeError, ValueError, TypeError) as exc:
        msg = f"cannot serialize {type(record).__name__}: {exc}"
        raise ConversionError(msg) from exc
    return _dumped_fields(record, dumped)


def _dataclass_to_dict(record: Any) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for field in dataclasses.fields(record):
        if _is_private(field.name) or not field.metadata.get(EXPORTED_KEY, True):
            continue
        value = getattr(record, field.name, dataclasses.MISSING)
        if value is dataclasses.MISSING:
            continue
        key = field.metadata.get(LABEL_KEY) or field.name
        result[key] = value
    return result


def record_to_dict(record: Any) -> dict[str, Any]:
    """Return the exported fields of ``record`` keyed by their external names.

    Only the top level is unpacked; nested values are returned as they are
    (pydantic already dumps nested models to dicts). A root model dumping to
    a sequence is keyed by position. Dataclass fields that were never set
    (``field(init=False)`` without a default) are skipped.

    Raises:
        ConversionError: if ``record`` is not a supported record or its
            serializer rejects it.
    """
    if isinstance(record, BaseModel) or is_pydantic_dataclass(type(record)):
        return _pydantic_to_dict(record)
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return _dataclass_to_dict(record)
    if is_named_tuple(record):
        return {key: value for key, value in record._asdict().items() if not _is_private(key)}
    msg = f"{type(record).__name__} is not a record"
    raise ConversionError(msg)
