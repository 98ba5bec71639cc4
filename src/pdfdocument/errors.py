"""
Errors - Exceptions raised while resolving document output.
"""


class DocumentError(Exception):
    """Base class for document errors."""


class NameNotSetError(DocumentError, RuntimeError):
    """The destination needs a filename but none was configured."""

    def __init__(self, message: str = "Filename not set"):
        super().__init__(message)


class DirectoryCreationError(DocumentError, RuntimeError):
    """The output directory does not exist and could not be created."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Directory `{path}` was not created")


class InvalidDestinationError(DocumentError, ValueError):
    """The destination code is outside the D/F/I/S vocabulary."""

    def __init__(self, destination: str):
        self.destination = destination
        super().__init__("Invalid output destination")
