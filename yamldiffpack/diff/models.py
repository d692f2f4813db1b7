"""Data models for tree diff notices and output modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(slots=True)
class DifferenceNotice:
    """A single differing value at a dot-joined key path."""

    path: str
    first: Any
    second: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "first": self.first,
            "second": self.second,
        }


@dataclass(frozen=True, slots=True)
class RenderPlan:
    """What a run does with the walk: print notices, add a banner, dump YAML."""

    emit_notices: bool
    with_banner: bool
    serialize: bool


class OutputMode(str, Enum):
    NOTICES = "notices"
    YAML = "yaml"
    YAMLDIFF = "yamldiff"

    @property
    def plan(self) -> RenderPlan:
        return _RENDER_PLANS[self]


_RENDER_PLANS: dict[OutputMode, RenderPlan] = {
    OutputMode.NOTICES: RenderPlan(emit_notices=True, with_banner=False, serialize=False),
    OutputMode.YAML: RenderPlan(emit_notices=False, with_banner=False, serialize=True),
    OutputMode.YAMLDIFF: RenderPlan(emit_notices=True, with_banner=True, serialize=True),
}
