"""Node classification and strict structural equality for document trees."""

from __future__ import annotations

from typing import Any


def is_mapping(value: Any) -> bool:
    """Return True for mapping nodes; every other node is a leaf."""
    return isinstance(value, dict)


def typed_keys(mapping: dict[Any, Any]) -> set[tuple[type, Any]]:
    """Key set of `mapping` where keys only match when their types match.

    Python hashes `1`, `1.0` and `True` to the same dict slot; YAML keeps
    them apart, so lookups go through `(type(key), key)` pairs.
    """
    return {(type(key), key) for key in mapping}


def has_typed_key(keys: set[tuple[type, Any]], key: Any) -> bool:
    return (type(key), key) in keys


def leaves_equal(left: Any, right: Any) -> bool:
    """Compare two nodes by type, shape and content.

    Values of different types are never equal, so `1`, `1.0` and `True`
    are three distinct leaves even though Python's `==` would merge them.
    Nested lists and mappings are walked on an explicit stack.
    """
    pending: list[tuple[Any, Any]] = [(left, right)]

    while pending:
        a, b = pending.pop()
        if type(a) is not type(b):
            return False

        if isinstance(a, dict):
            if len(a) != len(b):
                return False
            b_keys = typed_keys(b)
            for key, a_value in a.items():
                if not has_typed_key(b_keys, key):
                    return False
                pending.append((a_value, b[key]))
            continue

        if isinstance(a, (list, tuple)):
            if len(a) != len(b):
                return False
            pending.extend(zip(a, b))
            continue

        if a != b:
            return False

    return True
