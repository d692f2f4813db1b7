"""Type definitions for yamldiff document trees."""

from typing import Any

Tree = Any
Mapping = dict[Any, Any]
DifferenceTree = dict[Any, Any]
