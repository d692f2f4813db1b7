"""YAML read/write utilities for document trees."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from yamldiffpack.core import Mapping, is_mapping
from yamldiffpack.document.exceptions import DocumentLoadError, DocumentSerializationError


def parse_document(text: str, *, source: str = "<string>") -> Mapping:
    """Parse YAML text into a mapping tree.

    An empty document yields an empty mapping. Any other top-level value
    that is not a mapping is rejected.
    """
    try:
        content = yaml.safe_load(text)
    except yaml.YAMLError as error:
        raise DocumentLoadError(f"Document is not valid YAML: {source} ({error})") from error
    except RecursionError as error:
        raise DocumentLoadError(f"Document is nested too deeply: {source}") from error

    if content is None:
        return {}
    if not is_mapping(content):
        raise DocumentLoadError(
            f"Document root must be a mapping: {source} (got {type(content).__name__})"
        )
    return content


def load_document(path: str | Path) -> Mapping:
    target = Path(path)
    try:
        raw_text = target.read_text(encoding="utf-8")
    except FileNotFoundError as error:
        raise DocumentLoadError(f"Document not found: {target}") from error
    except UnicodeDecodeError as error:
        raise DocumentLoadError(f"Document is not valid UTF-8 text: {target}") from error
    except OSError as error:
        raise DocumentLoadError(f"Document could not be read: {target} ({error})") from error

    return parse_document(raw_text, source=str(target))


def dump_document(tree: Mapping) -> str:
    """Encode a tree as block-style YAML with keys ordered by their text form.

    Values YAML cannot represent, and trees nested past what the encoder
    can walk, raise `DocumentSerializationError`.
    """
    try:
        return yaml.safe_dump(
            _ordered(tree),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as error:
        raise DocumentSerializationError(str(error)) from error
    except RecursionError as error:
        raise DocumentSerializationError("difference tree is nested too deeply to encode") from error


def _ordered(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _ordered(value[key]) for key in sorted(value.keys(), key=str)}
    if isinstance(value, list):
        return [_ordered(item) for item in value]
    return value
