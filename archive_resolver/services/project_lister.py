"""Listing of the projects that belong to a workspace folder."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable
from urllib.parse import unquote, urlsplit

from verboselogs import VerboseLogger

from archive_resolver.models import NodeKind, PackageNode, Project


def path_from_uri(uri: str) -> Path:
    """Return the canonical filesystem path of a ``file:`` URI or plain path."""
    parts = urlsplit(uri)
    if parts.scheme == "file":
        return Path(unquote(parts.path)).resolve()
    return Path(uri).resolve()


def string_hash(text: str) -> int:
    """Return the 32-bit polynomial hash (base 31) of a string, as a signed int.

    The string is hashed over its UTF-16 code units.
    """
    data = text.encode("utf-16-be")
    value = 0
    for index in range(0, len(data), 2):
        unit = int.from_bytes(data[index:index + 2], "big")
        value = (31 * value + unit) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def invisible_project_name(workspace_path: Path) -> str:
    """Name given to the project generated for a folder with no build file."""
    return f"{workspace_path.name}_{string_hash(workspace_path.as_posix()) & 0xFFFFFFFF:x}"


def is_contained_in(location: Path, parents: Iterable[Path]) -> bool:
    return any(location == parent or parent in location.parents for parent in parents)


class WorkspaceProjects:
    """The projects known to a workspace.

    By default every sub-directory of ``workspace_dir`` is a project;
    projects living elsewhere can be linked with ``add``.
    """

    def __init__(self, logger: VerboseLogger, workspace_dir: str | Path | None = None):
        self.logger = logger
        self._projects: dict[str, Project] = {}
        if workspace_dir is not None:
            self.scan(Path(workspace_dir))

    def add(self, name: str, location: str | Path) -> Project:
        project = Project(name=name, location=Path(location))
        self._projects[name] = project
        return project

    def scan(self, workspace_dir: Path) -> None:
        if not workspace_dir.is_dir():
            self.logger.warning(f"Workspace directory not found: {workspace_dir}")
            return
        for child in sorted(workspace_dir.iterdir()):
            if child.is_dir() and not child.name.startswith("."):
                self.add(child.name, child)
        self.logger.verbose(f"Found {len(self._projects)} project(s) in {workspace_dir}")

    @property
    def projects(self) -> list[Project]:
        return list(self._projects.values())

    def list_projects(self, workspace_uri: str) -> list[PackageNode]:
        """Return a project node for every existing project of a workspace folder.

        A project belongs to the folder when it is located inside it, or
        when it is the folder's invisible project.
        """
        workspace_path = path_from_uri(workspace_uri)
        invisible_name = invisible_project_name(workspace_path)

        children: list[PackageNode] = []
        for project in self._projects.values():
            if not project.exists:
                self.logger.debug(f"Skipping missing project {project.name}")
                continue
            location = project.location.resolve()
            if is_contained_in(location, [workspace_path]) or project.name == invisible_name:
                children.append(
                    PackageNode(
                        name=project.name,
                        path=project.full_path,
                        kind=NodeKind.PROJECT,
                        uri=project.location_uri,
                    )
                )

        return children
