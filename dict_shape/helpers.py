"""Small helpers for strings, sequences, mappings and types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def uc_first(text: str) -> str:
    """Upper-case the first character of ``text`` and leave the rest alone."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def in_array(value: T, items: Iterable[T]) -> bool:
    """Return True when ``items`` holds an element equal to ``value``."""
    return any(item == value for item in items)


def type_name(obj: Any) -> str:
    """Return the name of the type of ``obj``, or of ``obj`` itself when it is a class."""
    cls = obj if isinstance(obj, type) else type(obj)
    return cls.__name__


def method_exists(obj: Any, name: str) -> bool:
    """Return True when the type of ``obj`` (or ``obj`` itself, for a class) has a method ``name``."""
    cls = obj if isinstance(obj, type) else type(obj)
    return callable(getattr(cls, name, None))


def map_keys(mapping: Mapping[K, Any]) -> list[K]:
    return list(mapping.keys())


def map_values(mapping: Mapping[Any, V]) -> list[V]:
    return list(mapping.values())
