"""CLI-friendly rendering for difference notices and difference trees."""

from __future__ import annotations

from yamldiffpack.core import DifferenceTree
from yamldiffpack.diff.models import DifferenceNotice
from yamldiffpack.document import dump_document

BANNER_RULE = "=" * 30
BANNER_TITLE = "Differing Values from First File"


def render_notice(notice: DifferenceNotice) -> str:
    lines = [
        "",
        f"Difference at: {notice.path}",
        f"  First file:  {notice.first}",
        f"  Second file: {notice.second}",
    ]
    return "\n".join(lines)


def render_banner() -> str:
    return f"\n{BANNER_RULE}\n{BANNER_TITLE}\n{BANNER_RULE}\n\n"


def render_difference_tree(tree: DifferenceTree, *, with_banner: bool = False) -> str:
    """Render a difference tree as YAML, optionally under the banner.

    The output always ends with the YAML text plus one blank line.
    Raises `DocumentSerializationError` for values YAML cannot represent.
    """
    body = dump_document(tree)
    header = render_banner() if with_banner else ""
    return f"{header}{body}\n"
