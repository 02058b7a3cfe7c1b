"""Module that contains data models."""
from .archive_wrapper import ArchiveWrapper, build_entry_tree, read_archive
from .entry import DirectoryEntry, Entry, EntryKind, EntryTree, FileEntry
from .package_node import NodeKind, PackageNode
from .project import Project
from .roots import ArchiveRoot, PackageRoot, SourceFolderRoot

__all__ = [
    "ArchiveWrapper",
    "build_entry_tree",
    "read_archive",
    "DirectoryEntry",
    "Entry",
    "EntryKind",
    "EntryTree",
    "FileEntry",
    "NodeKind",
    "PackageNode",
    "Project",
    "ArchiveRoot",
    "PackageRoot",
    "SourceFolderRoot",
]
