"""Data models for package roots."""
from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class ArchiveRoot:
    """A package root backed by an archive file."""

    archive_path: Path
    password: str | None = None


@dataclass(frozen=True)
class SourceFolderRoot:
    """A package root backed by a plain directory."""

    folder: Path


PackageRoot = Union[ArchiveRoot, SourceFolderRoot]
