"""Flattening of nested mappings into separator-joined keys, and the reverse."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from dict_shape.errors import ConversionError

from .mapper import PathMapper


if TYPE_CHECKING:
    from collections.abc import Iterable


logger = logging.getLogger(__name__)


def _check_root(node: Any, *, strict: bool, operation: str) -> bool:
    if isinstance(node, Mapping):
        return True
    if strict:
        msg = f"cannot {operation} a non-mapping value of type {type(node).__name__}"
        raise ConversionError(msg)
    logger.debug("%s of non-mapping %s returns an empty mapping", operation, type(node).__name__)
    return False


def flatten(node: Mapping[str, Any], *, sep: str = ".", strict: bool = False) -> dict[str, Any]:
    """Flatten a nested mapping into a single level of separator-joined keys.

    Every leaf (a value that is not itself a mapping) is emitted under the
    path of keys leading to it, e.g. ``{"a": {"b": 1}}`` becomes ``{"a.b": 1}``.
    Empty nested mappings have no leaves and therefore vanish.

    A non-mapping root flattens to ``{}``, or raises ``ConversionError`` when
    ``strict`` is set.
    """
    mapper = PathMapper(sep=sep)
    if not _check_root(node, strict=strict, operation="flatten"):
        return {}

    flattened: dict[str, Any] = {}

    def walk(current: Mapping[Any, Any], prefix: str) -> None:
        for key, value in current.items():
            path = mapper.join(prefix, key if isinstance(key, str) else str(key))
            if isinstance(value, Mapping):
                walk(value, path)
            else:
                flattened[path] = value

    walk(node, "")
    return flattened


def reconstruct_nested(items: Iterable[tuple[tuple[str, ...], Any]]) -> dict[str, Any]:
    """Reconstruct a nested mapping from path/value pairs.

    Intermediate mappings are created on demand. A leaf sitting where an
    intermediate mapping is needed is replaced by that mapping, and the final
    segment of each path always overwrites what was there, so conflicting
    paths resolve to whichever pair came last.

    Mapping values supplied by the caller are copied before anything is
    written below them.
    """
    result: dict[str, Any] = {}
    owned = {id(result)}
    for path, value in items:
        if not path:
            continue
        current = result
        for segment in path[:-1]:
            child = current.get(segment)
            if not isinstance(child, dict) or id(child) not in owned:
                child = dict(child) if isinstance(child, Mapping) else {}
                current[segment] = child
                owned.add(id(child))
            current = child
        current[path[-1]] = value
    return result


def unflatten(flat: Mapping[str, Any], *, sep: str = ".", strict: bool = False) -> dict[str, Any]:
    """Rebuild the nested mapping encoded by separator-joined keys.

    A key containing the separator literally cannot be told apart from a
    nested path; ``unflatten(flatten(m)) == m`` only holds when no key of
    ``m`` contains ``sep``.
    """
    mapper = PathMapper(sep=sep)
    if not _check_root(flat, strict=strict, operation="unflatten"):
        return {}

    return reconstruct_nested((mapper.split(str(key)), value) for key, value in flat.items())
