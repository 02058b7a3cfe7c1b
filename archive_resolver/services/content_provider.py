"""Content provider for files stored inside archive roots."""
from __future__ import annotations

from typing import Protocol
from urllib.parse import unquote, urlsplit

from verboselogs import VerboseLogger

from archive_resolver.exceptions import NotAnArchiveError, ReadError, RootNotFoundError
from archive_resolver.models import EntryTree
from archive_resolver.services.content_decoder import read_content
from archive_resolver.services.tree_walker import find_entry


class RootResolver(Protocol):
    """Anything able to turn a root identifier into an entry tree."""

    def resolve_root(self, root_id: str) -> EntryTree:
        ...


class ArchiveContentProvider:
    """Get file content from an entry contained inside an archive root."""

    def __init__(self, root_resolver: RootResolver, logger: VerboseLogger):
        self.root_resolver = root_resolver
        self.logger = logger

    def get_content(self, uri: str) -> str | None:
        """Resolve an entry URI.

        The URI path is the entry path inside the archive and its query is
        the root identifier, e.g. ``jar://contents/META-INF/MANIFEST.MF?=lib.jar``.
        """
        parts = urlsplit(uri)
        return self.resolve_content(unquote(parts.query), unquote(parts.path))

    def resolve_content(self, root_id: str, path: str) -> str | None:
        """Return the decoded text of the entry at ``path`` in root ``root_id``.

        Returns None when the root is not an archive or holds no file at
        ``path``.

        Raises
        ------
        RootNotFoundError
            If ``root_id`` matches no package root.
        ReadError
            If the archive or the matched entry can't be read.

        """
        try:
            tree = self.root_resolver.resolve_root(root_id)
        except NotAnArchiveError as err:
            self.logger.verbose(f"Skipping {path}: {err}")
            return None
        except (RootNotFoundError, ReadError) as err:
            self.logger.error(f"Problem getting archive entry content: {err}")
            raise

        with tree:
            entry = find_entry(tree, path)
            if entry is None:
                self.logger.debug(f"No entry {path} in {root_id}")
                return None

            try:
                content = read_content(entry)
            except ReadError as err:
                self.logger.error(f"Problem getting archive entry content: {err}")
                raise

        self.logger.debug(f"Read {len(content)} characters from {path} in {root_id}")
        return content
