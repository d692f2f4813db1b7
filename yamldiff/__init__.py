"""Stable public API surface for yamldiff.

This module is the supported import path for library users.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from yamldiffpack.core import DifferenceTree, Mapping
from yamldiffpack.diff import (
    DifferenceNotice,
    OutputMode,
    RenderPlan,
    collect_notices,
    diff_trees,
    render_banner,
    render_difference_tree,
    render_notice,
)
from yamldiffpack.document import (
    DocumentError,
    DocumentLoadError,
    DocumentSerializationError,
    dump_document,
    load_document,
    parse_document,
)

__version__ = "0.1.0"


@dataclass(slots=True)
class ComparisonResult:
    """Difference tree plus the notices discovered while building it."""

    difference_tree: DifferenceTree
    notices: list[DifferenceNotice] = field(default_factory=list)

    @property
    def identical(self) -> bool:
        return not self.difference_tree

    def render(self, mode: OutputMode = OutputMode.YAMLDIFF) -> str:
        """Render the result the way the CLI prints it for `mode`."""
        plan = mode.plan
        parts: list[str] = []
        if plan.emit_notices:
            parts.extend(f"{render_notice(notice)}\n" for notice in self.notices)
        if plan.serialize:
            parts.append(render_difference_tree(self.difference_tree, with_banner=plan.with_banner))
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "identical": self.identical,
            "difference_tree": self.difference_tree,
            "notices": [notice.to_dict() for notice in self.notices],
        }


def compare_documents(first: Mapping, second: Mapping) -> ComparisonResult:
    """Compare two already-loaded trees."""
    difference_tree, notices = collect_notices(first, second)
    return ComparisonResult(difference_tree=difference_tree, notices=notices)


def compare_files(first: str | Path, second: str | Path) -> ComparisonResult:
    """Load two YAML files and compare them.

    Raises `DocumentLoadError` when either file cannot be loaded.
    """
    return compare_documents(load_document(first), load_document(second))


__all__ = [
    "ComparisonResult",
    "DifferenceNotice",
    "DocumentError",
    "DocumentLoadError",
    "DocumentSerializationError",
    "OutputMode",
    "RenderPlan",
    "__version__",
    "compare_documents",
    "compare_files",
    "diff_trees",
    "dump_document",
    "load_document",
    "parse_document",
    "render_banner",
    "render_difference_tree",
    "render_notice",
]
