from io import BytesIO
from urllib.parse import quote

import pytest

from archive_resolver.exceptions import ReadError, RootNotFoundError
from archive_resolver.models import EntryTree, FileEntry
from archive_resolver.services.content_provider import ArchiveContentProvider
from archive_resolver.services.root_registry import RootRegistry


@pytest.fixture
def registry(make_jar, tmp_path, logger):
    jar = make_jar(
        "lib.jar",
        [
            ("META-INF/", None),
            ("META-INF/MANIFEST.MF", b"Manifest-Version: 1.0\n"),
            ("a/b/File.txt", b"hello"),
            ("x/y/z/File.txt", b"deep"),
            ("empty.properties", b""),
        ],
    )
    registry = RootRegistry(logger=logger)
    registry.register_archive("=lib/lib.jar", jar)
    registry.register_source_folder("=lib/src", tmp_path)
    return registry


@pytest.fixture
def provider(registry, logger):
    return ArchiveContentProvider(root_resolver=registry, logger=logger)


def test_resolves_nested_entry(provider):
    assert provider.resolve_content("=lib/lib.jar", "/a/b/File.txt") == "hello"


def test_resolves_three_levels_deep(provider):
    assert provider.resolve_content("=lib/lib.jar", "/x/y/z/File.txt") == "deep"


def test_resolves_manifest(provider):
    assert provider.resolve_content("=lib/lib.jar", "/META-INF/MANIFEST.MF") == "Manifest-Version: 1.0\n"


def test_empty_entry_is_empty_string(provider):
    assert provider.resolve_content("=lib/lib.jar", "/empty.properties") == ""


@pytest.mark.parametrize("path", ["/missing.txt", "/a/b", "a/b/File.txt", "/A/B/File.txt", ""])
def test_missing_entry_is_none(provider, path):
    assert provider.resolve_content("=lib/lib.jar", path) is None


@pytest.mark.parametrize("path", ["/a/b/File.txt", "/missing.txt"])
def test_unknown_root_raises_for_any_path(provider, path):
    with pytest.raises(RootNotFoundError):
        provider.resolve_content("=nope", path)


@pytest.mark.parametrize("path", ["/a/b/File.txt", "/anything"])
def test_source_folder_root_is_none(provider, path):
    assert provider.resolve_content("=lib/src", path) is None


def test_get_content_from_uri(provider):
    uri = "jar://contents/a/b/File.txt?" + quote("=lib/lib.jar", safe="")
    assert provider.get_content(uri) == "hello"


def test_get_content_from_uri_with_encoded_path(make_jar, logger):
    jar = make_jar("spaced.jar", [("dir with space/File.txt", b"spaced")])
    registry = RootRegistry(logger=logger)
    registry.register_archive("=spaced", jar)
    provider = ArchiveContentProvider(root_resolver=registry, logger=logger)

    assert provider.get_content("jar://contents/dir%20with%20space/File.txt?=spaced") == "spaced"


def test_duplicate_paths_first_wins(make_jar, logger):
    jar = make_jar("dup.jar", [("dup.txt", b"first"), ("dup.txt", b"second")])
    registry = RootRegistry(logger=logger)
    registry.register_archive("dup", jar)
    provider = ArchiveContentProvider(root_resolver=registry, logger=logger)

    assert provider.resolve_content("dup", "/dup.txt") == "first"
    assert provider.resolve_content("dup", "/dup.txt") == "first"


class _StubResolver:
    def __init__(self, tree: EntryTree):
        self.tree = tree
        self.closed = False

    def resolve_root(self, root_id):
        resolver = self

        class _Source:
            def close(self):
                resolver.closed = True

        self.tree.source = _Source()
        return self.tree


def test_read_error_propagates_and_tree_closed(logger):
    def fail():
        raise OSError("truncated")

    tree = EntryTree("stub", loader=lambda: (FileEntry("/f.txt", opener=fail),))
    resolver = _StubResolver(tree)
    provider = ArchiveContentProvider(root_resolver=resolver, logger=logger)

    with pytest.raises(ReadError) as excinfo:
        provider.resolve_content("stub", "/f.txt")

    assert excinfo.value.path == "/f.txt"
    assert resolver.closed


def test_tree_closed_after_success_and_miss(logger):
    tree = EntryTree("stub", loader=lambda: (FileEntry("/f.txt", opener=lambda: BytesIO(b"x")),))
    resolver = _StubResolver(tree)
    provider = ArchiveContentProvider(root_resolver=resolver, logger=logger)

    assert provider.resolve_content("stub", "/f.txt") == "x"
    assert resolver.closed

    resolver.closed = False
    assert provider.resolve_content("stub", "/g.txt") is None
    assert resolver.closed


def test_resolves_7z_entries(make_7z, logger):
    archive_path = make_7z("lib.7z", [("a/b/File.txt", b"hello"), ("empty.txt", b"")])
    registry = RootRegistry(logger=logger)
    registry.register_archive("seven", archive_path)
    provider = ArchiveContentProvider(root_resolver=registry, logger=logger)

    assert provider.resolve_content("seven", "/a/b/File.txt") == "hello"
    assert provider.resolve_content("seven", "/empty.txt") == ""
    assert provider.resolve_content("seven", "/missing.txt") is None
    assert provider.resolve_content("seven", "/a/b/File.txt") == "hello"
