"""Tree diff engine producing a sparse difference tree."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from yamldiffpack.core import (
    DifferenceTree,
    Mapping,
    has_typed_key,
    is_mapping,
    leaves_equal,
    typed_keys,
)
from yamldiffpack.diff.models import DifferenceNotice

NoticeSink = Callable[[DifferenceNotice], None]

_EXHAUSTED = object()


@dataclass(slots=True)
class _Frame:
    first: Mapping
    second: Mapping
    second_keys: set[tuple[type, Any]]
    path: str
    keys: Iterator[Any]
    result: DifferenceTree
    parent: DifferenceTree | None = None
    parent_key: Any = None


def diff_trees(
    first: Mapping,
    second: Mapping,
    *,
    path: str = "",
    emit_notices: bool = False,
    on_notice: NoticeSink | None = None,
) -> DifferenceTree:
    """Diff two mappings, keeping the first tree's value at every difference.

    Only keys of `first` drive the walk. Keys missing from `second` are
    skipped, and keys only present in `second` are never visited. Subtrees
    without differences leave nothing behind in the result.

    The walk is depth-first on an explicit stack, so document nesting depth
    is not bounded by the interpreter recursion limit. When `emit_notices`
    is set, each difference is passed to `on_notice` as it is discovered
    (a sink is required in that case).
    """
    if emit_notices and on_notice is None:
        raise ValueError("on_notice is required when emit_notices is set")
    sink = on_notice if emit_notices else None

    root: DifferenceTree = {}
    stack = [
        _Frame(
            first=first,
            second=second,
            second_keys=typed_keys(second),
            path=path,
            keys=iter(first),
            result=root,
        )
    ]

    while stack:
        frame = stack[-1]
        key = next(frame.keys, _EXHAUSTED)

        if key is _EXHAUSTED:
            stack.pop()
            if frame.parent is not None and frame.result:
                frame.parent[frame.parent_key] = frame.result
            continue

        if not has_typed_key(frame.second_keys, key):
            continue

        first_value = frame.first[key]
        second_value = frame.second[key]
        child_path = f"{frame.path}.{key}"

        if is_mapping(first_value):
            if is_mapping(second_value):
                stack.append(
                    _Frame(
                        first=first_value,
                        second=second_value,
                        second_keys=typed_keys(second_value),
                        path=child_path,
                        keys=iter(first_value),
                        result={},
                        parent=frame.result,
                        parent_key=key,
                    )
                )
                continue
            # mapping against leaf is always a difference
            _report(sink, child_path, first_value, second_value)
            frame.result[key] = first_value
            continue

        if not leaves_equal(first_value, second_value):
            _report(sink, child_path, first_value, second_value)
            frame.result[key] = first_value

    return root


def collect_notices(
    first: Mapping,
    second: Mapping,
) -> tuple[DifferenceTree, list[DifferenceNotice]]:
    """Diff two mappings and return the difference tree with its notices in walk order."""
    notices: list[DifferenceNotice] = []
    tree = diff_trees(first, second, emit_notices=True, on_notice=notices.append)
    return tree, notices


def _report(sink: NoticeSink | None, path: str, first: Any, second: Any) -> None:
    if sink is None:
        return
    sink(DifferenceNotice(path=path, first=first, second=second))
