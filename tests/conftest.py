from pathlib import Path
from zipfile import ZipFile

import pytest
from py7zr import SevenZipFile

from archive_resolver.helpers import init_logger


@pytest.fixture
def logger():
    return init_logger("test_archive_resolver", "DEBUG")


@pytest.fixture
def make_jar(tmp_path: Path):
    """Write a zip archive from ``(name, bytes | None)`` pairs; None marks a directory."""

    def _make(name: str, members: list[tuple[str, bytes | None]]) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with ZipFile(path, "w") as archive:
            for member, data in members:
                if data is None:
                    archive.writestr(member if member.endswith("/") else member + "/", b"")
                else:
                    archive.writestr(member, data)
        return path

    return _make


@pytest.fixture
def make_7z(tmp_path: Path):
    """Write a 7-Zip archive from ``(name, bytes)`` pairs."""

    def _make(name: str, members: list[tuple[str, bytes]]) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        staging = tmp_path / f"{name}.staging"
        with SevenZipFile(path, "w") as archive:
            for member, data in members:
                source = staging / member
                source.parent.mkdir(parents=True, exist_ok=True)
                source.write_bytes(data)
                archive.write(source, arcname=member)
        return path

    return _make
