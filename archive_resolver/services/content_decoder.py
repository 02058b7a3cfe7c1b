"""Decoding of file entries to text."""
from zipfile import BadZipFile

from py7zr.exceptions import ArchiveError
from rarfile import Error as RarError

from archive_resolver.exceptions import ReadError
from archive_resolver.models import FileEntry

ENTRY_READ_ERRORS = (OSError, KeyError, BadZipFile, RarError, ArchiveError, UnicodeDecodeError)


def read_content(entry: FileEntry) -> str:
    """Read a file entry and decode it as UTF-8.

    An entry without bytes decodes to the empty string.

    Raises
    ------
    ReadError
        If the entry stream can't be opened, read or decoded. The
        original exception is chained.

    """
    try:
        with entry.open() as stream:
            return stream.read().decode("utf-8")
    except ENTRY_READ_ERRORS as err:
        raise ReadError(entry.path, str(err)) from err
