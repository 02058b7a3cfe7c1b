"""Data models for the entries of an archive root."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Callable, Sequence, Union


class EntryKind(Enum):
    """Tag distinguishing the two kinds of archive entry."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class FileEntry:
    """A readable leaf entry.

    Attributes
    ----------
    path : str
        The portable, slash-rooted path of the entry inside the archive.
    opener : callable
        Returns a fresh binary stream over the entry bytes.

    """

    path: str
    opener: Callable[[], IO[bytes]] = field(repr=False, compare=False)
    kind: EntryKind = field(default=EntryKind.FILE, init=False)

    def open(self) -> IO[bytes]:
        """Open the entry's byte stream. The caller owns closing it."""
        return self.opener()


@dataclass(frozen=True)
class DirectoryEntry:
    """A container entry whose children are materialized on access."""

    path: str
    loader: Callable[[], Sequence["Entry"]] = field(repr=False, compare=False)
    kind: EntryKind = field(default=EntryKind.DIRECTORY, init=False)

    @property
    def children(self) -> Sequence["Entry"]:
        return self.loader()


Entry = Union[FileEntry, DirectoryEntry]


@dataclass
class EntryTree:
    """The entries of one archive root, valid for a single resolution.

    The tree keeps the archive handle it was built from open until
    ``close()`` is called; use it as a context manager.
    """

    root_id: str
    loader: Callable[[], Sequence[Entry]] = field(repr=False)
    source: object | None = field(default=None, repr=False)

    @property
    def children(self) -> Sequence[Entry]:
        return self.loader()

    def close(self) -> None:
        closer = getattr(self.source, "close", None)
        if closer is not None:
            closer()
        self.source = None

    def __enter__(self) -> "EntryTree":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
