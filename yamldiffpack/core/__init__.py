"""Core tree primitives for yamldiff."""

from yamldiffpack.core.tree import has_typed_key, is_mapping, leaves_equal, typed_keys
from yamldiffpack.core.types import DifferenceTree, Mapping, Tree

__all__ = [
    "DifferenceTree",
    "Mapping",
    "Tree",
    "has_typed_key",
    "is_mapping",
    "leaves_equal",
    "typed_keys",
]
