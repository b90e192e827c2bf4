"""Conversion of arbitrary values into canonical, string-keyed mapping trees."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from dict_shape.errors import ConversionError

from .kinds import ShapeKind, classify, is_container
from .records import record_to_dict


if TYPE_CHECKING:
    from collections.abc import Iterable


logger = logging.getLogger(__name__)


def _key(key: Any) -> str:
    return key if isinstance(key, str) else str(key)


def _convert_child(value: Any) -> Any:
    if is_container(value):
        return to_canonical_map(value)
    return value


def _convert_items(items: Iterable[tuple[Any, Any]]) -> dict[str, Any]:
    return {_key(key): _convert_child(value) for key, value in items}


def to_canonical_map(value: Any) -> dict[str, Any]:
    """Convert ``value`` into a canonical mapping.

    Mappings keep their keys (rendered with ``str`` when they are not
    strings), records contribute their exported fields under their labels,
    and sequences are keyed by decimal position. Containers found at any
    depth are converted the same way, so every nested value in the result
    is either a scalar or another canonical mapping.

    Anything else, including ``None`` and bare scalars, converts to ``{}``.
    This function does not raise for unconvertible input.
    """
    kind = classify(value)
    match kind:
        case ShapeKind.MAPPING:
            return _convert_items(value.items())
        case ShapeKind.RECORD:
            try:
                fields = record_to_dict(value)
            except ConversionError:
                logger.debug("record %s could not be converted", type(value).__name__, exc_info=True)
                return {}
            return _convert_items(fields.items())
        case ShapeKind.ORDERED_SEQUENCE | ShapeKind.FIXED_SEQUENCE:
            return _convert_items(enumerate(value))
        case _:
            return {}
