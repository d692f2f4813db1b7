"""Diff subsystem for yamldiff."""

from yamldiffpack.diff.engine import NoticeSink, collect_notices, diff_trees
from yamldiffpack.diff.formatting import render_banner, render_difference_tree, render_notice
from yamldiffpack.diff.models import DifferenceNotice, OutputMode, RenderPlan

__all__ = [
    "DifferenceNotice",
    "NoticeSink",
    "OutputMode",
    "RenderPlan",
    "collect_notices",
    "diff_trees",
    "render_banner",
    "render_difference_tree",
    "render_notice",
]
