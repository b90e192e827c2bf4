from collections import OrderedDict
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dict_shape.errors import ConversionError
from dict_shape.key_mapping.mapper import PathMapper
from dict_shape.key_mapping.nested import flatten, reconstruct_nested, unflatten


_KEYS = st.text(min_size=1, max_size=12).filter(lambda value: "." not in value)
_SCALARS = st.none() | st.booleans() | st.integers(min_value=-10_000, max_value=10_000) | st.text(max_size=20)
_TREES = st.dictionaries(
    _KEYS,
    st.recursive(_SCALARS, lambda children: st.dictionaries(_KEYS, children, min_size=1, max_size=4), max_leaves=15),
    max_size=5,
)


def _count_leaves(node: dict[str, Any]) -> int:
    return sum(_count_leaves(value) if isinstance(value, dict) else 1 for value in node.values())


def test_path_mapper_join_and_split() -> None:
    mapper = PathMapper()
    assert mapper.join("", "user") == "user"
    assert mapper.join("user", "details") == "user.details"
    assert mapper.split("user.details.age") == ("user", "details", "age")
    assert mapper.split("a..b") == ("a", "", "b")

    slash = PathMapper(sep="/")
    assert slash.join("a", "b") == "a/b"
    assert slash.split("a/b.c") == ("a", "b.c")


def test_path_mapper_rejects_empty_separator() -> None:
    with pytest.raises(ValueError, match="sep must not be empty"):
        _ = PathMapper(sep="")
    with pytest.raises(ValueError, match="sep must not be empty"):
        _ = flatten({"a": 1}, sep="")


def test_flatten_one_level() -> None:
    assert flatten({"user": {"id": 3, "name": "john"}}) == {"user.id": 3, "user.name": "john"}


def test_flatten_deep_nesting() -> None:
    assert flatten({"a": {"b": {"c": {"d": 42}}}}) == {"a.b.c.d": 42}


def test_flatten_keeps_non_mapping_leaves_opaque() -> None:
    node = {"tags": ["go", "dev"], "none": None, "nested": {"set": {1, 2}}}
    assert flatten(node) == {"tags": ["go", "dev"], "none": None, "nested.set": {1, 2}}


def test_flatten_drops_empty_nested_mappings() -> None:
    assert flatten({"a": {}, "b": 1}) == {"b": 1}
    assert flatten({}) == {}


def test_flatten_accepts_any_mapping_and_stringifies_keys() -> None:
    node = OrderedDict([("a", OrderedDict([(1, "x")]))])
    assert flatten(node) == {"a.1": "x"}


def test_flatten_custom_separator() -> None:
    assert flatten({"a": {"b": 1}}, sep="__") == {"a__b": 1}


def test_flatten_non_mapping_root() -> None:
    assert flatten([1, 2, 3]) == {}  # type: ignore[arg-type]
    assert flatten(None) == {}  # type: ignore[arg-type]
    with pytest.raises(ConversionError, match="cannot flatten a non-mapping value of type list"):
        _ = flatten([1, 2, 3], strict=True)  # type: ignore[arg-type]


def test_flatten_does_not_mutate_input() -> None:
    node = {"user": {"id": 3}}
    _ = flatten(node)
    assert node == {"user": {"id": 3}}


def test_unflatten_groups_shared_prefixes() -> None:
    flat = {"user.name": "Bob", "user.age": 25, "location.city": "Berlin"}
    assert unflatten(flat) == {"user": {"name": "Bob", "age": 25}, "location": {"city": "Berlin"}}


def test_unflatten_single_segment_keys() -> None:
    assert unflatten({"a": 1, "b": None}) == {"a": 1, "b": None}


def test_unflatten_custom_separator() -> None:
    assert unflatten({"a/b.c": 1}, sep="/") == {"a": {"b.c": 1}}


def test_unflatten_leaf_then_child_replaces_leaf() -> None:
    assert unflatten({"a": 1, "a.b": 2}) == {"a": {"b": 2}}


def test_unflatten_child_then_leaf_overwrites_mapping() -> None:
    assert unflatten({"a.b": 2, "a": 1}) == {"a": 1}


def test_unflatten_does_not_mutate_mapping_values() -> None:
    inner = {"x": 1}
    flat = {"a": inner, "a.y": 2}
    assert unflatten(flat) == {"a": {"x": 1, "y": 2}}
    assert inner == {"x": 1}


def test_unflatten_non_mapping_root() -> None:
    assert unflatten("a.b") == {}  # type: ignore[arg-type]
    with pytest.raises(ConversionError, match="cannot unflatten"):
        _ = unflatten("a.b", strict=True)  # type: ignore[arg-type]


def test_unflatten_keys_with_separator_are_ambiguous() -> None:
    original = {"a.b": 1}
    assert unflatten(flatten(original)) == {"a": {"b": 1}}


def test_reconstruct_nested_from_path_tuples() -> None:
    data = [(("sup1", "key"), "value"), (("sup2",), [1, 2, 3])]
    assert reconstruct_nested(data) == {"sup1": {"key": "value"}, "sup2": [1, 2, 3]}


def test_reconstruct_nested_skips_empty_path() -> None:
    assert reconstruct_nested([((), "root"), (("a",), 1)]) == {"a": 1}


@given(tree=_TREES)
def test_flatten_then_unflatten_roundtrip(tree: dict[str, Any]) -> None:
    flat = flatten(tree)
    assert len(flat) == _count_leaves(tree)
    assert not any(isinstance(value, dict) for value in flat.values())
    assert unflatten(flat) == tree
