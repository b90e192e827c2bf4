"""dict-shape - convert arbitrary values to string-keyed trees, flatten and unflatten them"""

from ._version import version as __version__
from .conversion import ShapeKind, classify, hidden, is_container, label, record_to_dict, to_canonical_map
from .errors import ConversionError
from .helpers import in_array, map_keys, map_values, method_exists, type_name, uc_first
from .key_mapping import PathMapper, flatten, unflatten


__all__ = [
    "ConversionError",
    "PathMapper",
    "ShapeKind",
    "__version__",
    "classify",
    "flatten",
    "hidden",
    "in_array",
    "is_container",
    "label",
    "map_keys",
    "map_values",
    "method_exists",
    "record_to_dict",
    "to_canonical_map",
    "type_name",
    "uc_first",
    "unflatten",
]
