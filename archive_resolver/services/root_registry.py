"""Mapping of root identifiers to package roots."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable
from zipfile import BadZipFile

from py7zr.exceptions import ArchiveError
from rarfile import Error as RarError
from verboselogs import VerboseLogger

from archive_resolver.exceptions import NotAnArchiveError, ReadError, RootNotFoundError
from archive_resolver.models import (
    ArchiveRoot,
    EntryTree,
    PackageRoot,
    SourceFolderRoot,
    build_entry_tree,
    read_archive,
)

ARCHIVE_OPEN_ERRORS = (OSError, BadZipFile, RarError, ArchiveError)


class RootRegistry:
    """Registry of the package roots known to the workspace.

    Root identifiers are opaque: they are only ever compared verbatim.
    """

    def __init__(
        self,
        logger: VerboseLogger,
        library_dirs: Iterable[str | Path] = (),
        source_folders: Iterable[str | Path] = (),
        archive_extensions: Iterable[str] = (".jar", ".zip", ".rar", ".7z"),
    ) -> None:
        self.logger = logger
        self.archive_extensions = {ext.lower() for ext in archive_extensions}
        self._roots: dict[str, PackageRoot] = {}

        for library_dir in library_dirs:
            self.discover(Path(library_dir))
        for folder in source_folders:
            self.register_source_folder(Path(folder).as_posix(), folder)

    def register_archive(
        self, root_id: str, archive_path: str | Path, password: str | None = None
    ) -> ArchiveRoot:
        root = ArchiveRoot(Path(archive_path), password=password)
        self._roots[root_id] = root
        self.logger.debug(f"Registered archive root {root_id} -> {root.archive_path}")
        return root

    def register_source_folder(self, root_id: str, folder: str | Path) -> SourceFolderRoot:
        root = SourceFolderRoot(Path(folder))
        self._roots[root_id] = root
        self.logger.debug(f"Registered source folder root {root_id} -> {root.folder}")
        return root

    def discover(self, library_dir: Path) -> list[str]:
        """Register every archive found below a directory, keyed by its POSIX path."""
        if not library_dir.is_dir():
            self.logger.warning(f"Library directory not found: {library_dir}")
            return []

        root_ids = []
        for path in sorted(library_dir.rglob("*")):
            if path.is_file() and path.suffix.lower() in self.archive_extensions:
                root_id = path.as_posix()
                self.register_archive(root_id, path)
                root_ids.append(root_id)

        self.logger.verbose(f"Discovered {len(root_ids)} archive(s) in {library_dir}")
        return root_ids

    def get(self, root_id: str) -> PackageRoot | None:
        return self._roots.get(root_id)

    def __contains__(self, root_id: object) -> bool:
        return root_id in self._roots

    def __len__(self) -> int:
        return len(self._roots)

    def resolve_root(self, root_id: str) -> EntryTree:
        """Open the archive behind a root and return its entry tree.

        The returned tree holds the archive open; close it, or use it as a
        context manager, once the lookup is done.

        Raises
        ------
        RootNotFoundError
            If no root is registered under ``root_id`` or its archive file
            is missing.
        NotAnArchiveError
            If the root is a plain source folder.
        ReadError
            If the archive file exists but can't be opened.

        """
        match self._roots.get(root_id):
            case SourceFolderRoot(folder=folder):
                raise NotAnArchiveError(root_id, folder.as_posix())

            case ArchiveRoot(archive_path=archive_path, password=password):
                if not archive_path.is_file():
                    raise RootNotFoundError(root_id, f"{archive_path} does not exist")
                try:
                    archive = read_archive(archive_path, password)
                except NotImplementedError as err:
                    raise NotAnArchiveError(root_id, archive_path.as_posix()) from err
                except ARCHIVE_OPEN_ERRORS as err:
                    raise ReadError(archive_path.as_posix(), str(err)) from err

            case _:
                raise RootNotFoundError(root_id)

        try:
            return build_entry_tree(root_id, archive)
        except ARCHIVE_OPEN_ERRORS as err:
            archive.close()
            raise ReadError(archive_path.as_posix(), str(err)) from err
