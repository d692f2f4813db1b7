"""Document loading and serialization for yamldiff."""

from yamldiffpack.document.exceptions import (
    DocumentError,
    DocumentLoadError,
    DocumentSerializationError,
)
from yamldiffpack.document.io import dump_document, load_document, parse_document

__all__ = [
    "DocumentError",
    "DocumentLoadError",
    "DocumentSerializationError",
    "dump_document",
    "load_document",
    "parse_document",
]
