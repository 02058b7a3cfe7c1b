"""Data model for workspace projects."""
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Project:
    """A project known to the workspace.

    Attributes
    ----------
    name : str
        The project name, unique within the workspace.
    location : pathlib.Path
        Where the project lives on disk. Linked projects may live outside
        the workspace directory.

    """

    name: str
    location: Path

    @property
    def exists(self) -> bool:
        return self.location.is_dir()

    @property
    def full_path(self) -> str:
        return f"/{self.name}"

    @property
    def location_uri(self) -> str:
        return self.location.resolve().as_uri()
