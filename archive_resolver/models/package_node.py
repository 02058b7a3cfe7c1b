"""Data model for the nodes returned by workspace listings."""
from dataclasses import dataclass
from enum import IntEnum


class NodeKind(IntEnum):
    """Kind of a node in the package explorer hierarchy."""

    PROJECT = 2


@dataclass
class PackageNode:
    """Class defining one node of the package explorer."""

    name: str
    path: str
    kind: NodeKind
    uri: str | None = None
