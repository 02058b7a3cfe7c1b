"""Uniform access to the members of zip, rar and 7-Zip archives."""
from __future__ import annotations

from collections import defaultdict
from io import BytesIO
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import IO
from zipfile import ZipFile, ZipInfo

from py7zr import SevenZipFile
from rarfile import RarFile, RarInfo

from .entry import DirectoryEntry, Entry, EntryTree, FileEntry

ArchiveType = RarFile | ZipFile | SevenZipFile
Member = str | ZipInfo | RarInfo


class ArchiveWrapper:
    """Wrap an opened archive behind a small, format-independent interface.

    Parameters
    ----------
    archive : rarfile.RarFile or zipfile.ZipFile or py7zr.SevenZipFile
        The opened archive.
    filename : str
        The archive filename, used in diagnostics.
    password : str, optional
        If applicable, the password required to read the archive members.

    """

    def __init__(
        self, archive: ArchiveType, filename: str, password: str | None = None
    ) -> None:
        self.archive = archive
        self.filename = filename
        self.password = password

    def members(self) -> list[tuple[str, bool, Member]]:
        """Return ``(name, is_directory, member)`` for every member, in archive order.

        ``member`` is what ``open_member`` expects. For zip and rar archives
        it is the member info, so that duplicate names stay distinct.
        """
        if isinstance(self.archive, SevenZipFile):
            return [
                (info.filename, info.is_directory, info.filename)
                for info in self.archive.list()
            ]
        return [
            (info.filename, info.is_dir(), info) for info in self.archive.infolist()
        ]

    def open_member(self, member: Member) -> IO[bytes]:
        """Open a member as a binary stream.

        Raises
        ------
        KeyError
            If the member does not exist.
        OSError, zipfile.BadZipFile, rarfile.Error, py7zr.exceptions.ArchiveError
            If the member can't be read.

        """
        if isinstance(self.archive, SevenZipFile):
            return self._open_7z_member(str(member))
        if isinstance(self.archive, RarFile):
            return self.archive.open(member, pwd=self.password)
        pwd = self.password.encode() if self.password else None
        return self.archive.open(member, pwd=pwd)

    def _open_7z_member(self, name: str) -> IO[bytes]:
        # 7-Zip solid blocks have no per-member stream; extract the single
        # target and hand back its bytes.
        with TemporaryDirectory() as tmp_dir:
            try:
                self.archive.extract(path=tmp_dir, targets=[name])
            finally:
                self.archive.reset()
            extracted = Path(tmp_dir, name)
            if not extracted.is_file():
                raise KeyError(f"There is no item named {name!r} in the archive")
            return BytesIO(extracted.read_bytes())

    def close(self) -> None:
        self.archive.close()

    def __enter__(self) -> "ArchiveWrapper":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def read_archive(filename: str | Path, password: str | None = None) -> ArchiveWrapper:
    """Open an archive file and return a reader object.

    Parameters
    ----------
    filename : str or pathlib.Path
        The archive filename. Its extension selects the archive format.
    password : str, optional
        If applicable, the password required to open the archive.

    Returns
    -------
    archive_resolver.models.archive_wrapper.ArchiveWrapper

    Raises
    ------
    NotImplementedError
        If the file extension is not handled.
    zipfile.BadZipFile, rarfile.Error, py7zr.exceptions.Bad7zFile
        If the file is not a valid archive of its format.
    FileNotFoundError, OSError, PermissionError
        If the archive file is not found or can't be read.

    """
    archive: ArchiveType
    path = Path(filename)

    match path.suffix.lower():
        case ".jar" | ".zip":
            archive = ZipFile(path)

        case ".rar":
            archive = RarFile(path)

        case ".7z":
            archive = SevenZipFile(path, mode="r", password=password)

        case other_ext:
            raise NotImplementedError(f"{other_ext} not handled.")

    return ArchiveWrapper(archive, filename=str(path), password=password)


def to_portable_path(name: str) -> str:
    """Turn an archive member name into a slash-rooted portable path."""
    return "/" + name.replace("\\", "/").strip("/")


def build_entry_tree(root_id: str, archive: ArchiveWrapper) -> EntryTree:
    """Build the entry tree of an opened archive.

    Directories that only exist implicitly, as the prefix of a member
    name, are synthesized. Member order is preserved, and duplicate file
    members are all kept in the order the archive lists them.
    """
    layout: dict[str, list[tuple[str, bool, Member | None]]] = defaultdict(list)
    known_dirs: set[str] = {"/"}

    def add_directory(path: str) -> None:
        if path in known_dirs:
            return
        parent = path.rsplit("/", 1)[0] or "/"
        add_directory(parent)
        known_dirs.add(path)
        layout[parent].append((path, True, None))

    for name, is_dir, member in archive.members():
        path = to_portable_path(name)
        if path == "/":
            continue
        if is_dir:
            add_directory(path)
            continue
        parent = path.rsplit("/", 1)[0] or "/"
        add_directory(parent)
        layout[parent].append((path, False, member))

    def opener_for(member: Member):
        return lambda: archive.open_member(member)

    def load(parent: str) -> tuple[Entry, ...]:
        entries: list[Entry] = []
        for path, is_dir, member in layout.get(parent, ()):
            if is_dir:
                entries.append(DirectoryEntry(path, loader=loader_for(path)))
            else:
                entries.append(FileEntry(path, opener=opener_for(member)))
        return tuple(entries)

    def loader_for(path: str):
        return lambda: load(path)

    return EntryTree(root_id, loader=loader_for("/"), source=archive)
