"""Errors raised while resolving archive entry content."""
from __future__ import annotations


class ResolverError(Exception):
    """Base class for every resolution failure."""


class RootNotFoundError(ResolverError):
    """No package root matches the given identifier."""

    def __init__(self, root_id: str, reason: str | None = None) -> None:
        self.root_id = root_id
        message = f"No package root found for {root_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NotAnArchiveError(ResolverError):
    """The root exists but is not backed by an archive file."""

    def __init__(self, root_id: str, location: str) -> None:
        self.root_id = root_id
        self.location = location
        super().__init__(f"Package root {root_id} is not an archive: {location}")


class ReadError(ResolverError):
    """An archive or one of its entries could not be read.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        message = f"Can't read file content: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
