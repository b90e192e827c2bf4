"""Runtime classification of values into the shapes the converter understands."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel


_TEXT_TYPES = (str, bytes, bytearray, memoryview)


class ShapeKind(Enum):
    """Shape of a value as seen by the canonical map converter."""

    MAPPING = "mapping"
    RECORD = "record"
    ORDERED_SEQUENCE = "ordered_sequence"
    FIXED_SEQUENCE = "fixed_sequence"
    SCALAR = "scalar"


def is_named_tuple(value: Any) -> bool:
    """Return True for instances of ``collections.namedtuple`` or ``typing.NamedTuple`` classes."""
    return isinstance(value, tuple) and hasattr(type(value), "_fields") and hasattr(value, "_asdict")


def classify(value: Any) -> ShapeKind:
    """Return the shape of ``value``.

    Text and binary strings are scalars even though they are sequences.
    Dataclass classes, as opposed to their instances, are scalars too.
    """
    if isinstance(value, Mapping):
        return ShapeKind.MAPPING
    if isinstance(value, BaseModel):
        return ShapeKind.RECORD
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return ShapeKind.RECORD
    if is_named_tuple(value):
        return ShapeKind.RECORD
    if isinstance(value, tuple):
        return ShapeKind.FIXED_SEQUENCE
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return ShapeKind.ORDERED_SEQUENCE
    return ShapeKind.SCALAR


def is_container(value: Any) -> bool:
    """Return True when ``value`` converts to a nested mapping rather than a leaf."""
    return classify(value) is not ShapeKind.SCALAR
