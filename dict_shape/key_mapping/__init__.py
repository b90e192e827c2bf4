"""Path mapping, flattening and nested reconstruction utilities."""

from .mapper import PathMapper
from .nested import flatten, reconstruct_nested, unflatten


__all__ = ["PathMapper", "flatten", "reconstruct_nested", "unflatten"]
