"""Shape classification and canonical map conversion."""

from .canonical import to_canonical_map
from .kinds import ShapeKind, classify, is_container
from .records import hidden, label, record_to_dict


__all__ = ["ShapeKind", "classify", "hidden", "is_container", "label", "record_to_dict", "to_canonical_map"]
