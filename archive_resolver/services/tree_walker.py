"""Depth-first lookup of a file entry by its portable path."""
from __future__ import annotations

from archive_resolver.models import Entry, EntryKind, EntryTree, FileEntry


def find_entry(tree: EntryTree, target: str) -> FileEntry | None:
    """Return the first file entry whose path equals ``target``.

    Entries are visited in pre-order: each directory is searched before
    its next sibling, so among duplicate paths the first one listed wins.
    Paths are compared verbatim. Returns None when no entry matches.
    """
    stack: list[tuple[Entry, frozenset[str]]] = [
        (entry, frozenset()) for entry in reversed(tree.children)
    ]

    while stack:
        entry, ancestors = stack.pop()
        match entry.kind:
            case EntryKind.FILE:
                if entry.path == target:
                    return entry
            case EntryKind.DIRECTORY:
                # A directory nested under its own path is a cycle.
                if entry.path in ancestors:
                    continue
                inner = ancestors | {entry.path}
                stack.extend((child, inner) for child in reversed(entry.children))

    return None
