"""Helper functions."""
from argparse import ArgumentParser, Namespace
from dataclasses import asdict, is_dataclass
from json import JSONEncoder, dumps
from pathlib import Path
from typing import Any

import coloredlogs
from verboselogs import VerboseLogger


class EnhancedJSONEncoder(JSONEncoder):
    """Enhanced JSON encoder for specific classes."""

    def default(self, o: Any) -> Any:  # type: ignore[override]
        """Handle custom types JSON serialization."""
        if is_dataclass(o) and not isinstance(o, type):
            return asdict(o)
        if isinstance(o, Path):
            return o.as_posix()
        if isinstance(o, set):
            return list(o)
        return super().default(o)


def to_json(content: Any) -> str:
    """Serialize data models to indented JSON."""
    return dumps(content, ensure_ascii=False, cls=EnhancedJSONEncoder, indent=4)


def parse_options(description: str, argv: list[str] | None = None) -> Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    description : str
        The program's description.
    argv : list of str, optional
        Arguments to parse instead of ``sys.argv``.

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments as an object.

    """
    parser = ArgumentParser(description=description)

    parser.add_argument(
        "-L",
        "--library-dir",
        metavar="DIRECTORY",
        action="append",
        default=[],
        help="directory scanned for archive roots (repeatable)",
    )
    parser.add_argument(
        "-S",
        "--source-folder",
        metavar="DIRECTORY",
        action="append",
        default=[],
        help="plain directory registered as a non-archive root (repeatable)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase logs output verbosity (default: info, -v: verbose, "
        "-vv: debug, -vvv: spam)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    content = commands.add_parser(
        "content", help="print the content of an archive entry"
    )
    content.add_argument("root_id", type=str, help="the package root identifier")
    content.add_argument(
        "path", type=str, help="the entry path inside the archive, e.g. /META-INF/MANIFEST.MF"
    )

    uri = commands.add_parser(
        "uri",
        help="print the content of an archive entry addressed by URI "
        "(path: entry path, query: root identifier)",
    )
    uri.add_argument("uri", type=str, help="the entry URI")

    projects = commands.add_parser(
        "projects", help="list the projects belonging to a workspace folder"
    )
    projects.add_argument("workspace_uri", type=str, help="the workspace folder URI")
    projects.add_argument(
        "-w",
        "--workspace-dir",
        metavar="DIRECTORY",
        type=str,
        default=None,
        help="directory holding the projects (default: from settings)",
    )

    return parser.parse_args(argv)


def init_logger(
    name: str,
    verbosity_level: int | str = 0,
    formatting: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> VerboseLogger:
    """Initialize the program's logger.

    Parameters
    ----------
    name : str
        The logger's name.
    verbosity_level : int or str
        Verbosity count (0: info, 1: verbose, 2: debug, 3+: spam) or a
        level name.
    formatting : str, optional
        The log format.

    Returns
    -------
    verboselogs.VerboseLogger
        The logger.

    """
    levels: list[str] = ["INFO", "VERBOSE", "DEBUG", "SPAM"]
    if isinstance(verbosity_level, int):
        level = levels[min(max(verbosity_level, 0), len(levels) - 1)]
    else:
        level = verbosity_level.upper()

    logger = VerboseLogger(name)

    coloredlogs.install(
        logger=logger,
        level=level,
        fmt=formatting,
    )

    return logger
