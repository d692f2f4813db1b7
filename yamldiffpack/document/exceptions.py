"""Document subsystem exceptions."""


class DocumentError(Exception):
    """Base class for document errors."""


class DocumentLoadError(DocumentError):
    """Document could not be read or is not a YAML mapping."""


class DocumentSerializationError(DocumentError):
    """Tree could not be encoded as YAML."""
