"""Exceptions raised at the document loading boundary."""


class YmlDiffError(Exception):
    """Base class for ymldiff errors."""


class DocumentError(YmlDiffError):
    """A document could not be read or parsed."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Error parsing {path}: {cause}")
