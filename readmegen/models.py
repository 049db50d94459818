"""Core data models shared across readmegen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Optional, Tuple


class NodeType(str, Enum):
    """Kind of filesystem entry captured in the scanned tree."""

    FILE = "file"
    DIRECTORY = "directory"


class ManifestType(str, Enum):
    """Closed set of dependency manifest kinds."""

    NPM = "npm"
    PIP = "pip"
    CARGO = "cargo"
    OTHER = "other"


@dataclass(frozen=True)
class DirectoryNode:
    """One filesystem entry and, for directories, its scanned children."""

    name: str
    type: NodeType
    path: str
    children: Tuple["DirectoryNode", ...] = ()

    def __post_init__(self) -> None:
        if self.type == NodeType.FILE and self.children:
            raise ValueError(f"File node {self.path} cannot have children")

    @property
    def is_dir(self) -> bool:
        return self.type == NodeType.DIRECTORY

    def walk(self) -> Iterator["DirectoryNode"]:
        """Yield this node and every descendant in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def file_paths(self) -> list[str]:
        """Return the paths of all file leaves below this node."""
        return [node.path for node in self.walk() if node.type == NodeType.FILE]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.value,
            "path": self.path,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass(frozen=True)
class DependencyManifest:
    """A detected dependency-declaration file."""

    type: ManifestType
    file_path: str
    project_name: str
    description: str = ""
    dependencies: Tuple[str, ...] = ()
    license: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "file_path": self.file_path,
            "project_name": self.project_name,
            "description": self.description,
            "dependencies": list(self.dependencies),
            "license": self.license,
        }


@dataclass(frozen=True)
class ProjectMetadata:
    """Aggregate analysis result handed to every section generator."""

    name: str
    description: str
    language: str
    entry_point: Optional[str]
    scripts: Mapping[str, str] = field(hash=False)
    dependencies: Tuple[DependencyManifest, ...]
    structure: DirectoryNode
    license: Optional[str] = None
    license_file: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "scripts", MappingProxyType(dict(self.scripts)))
        object.__setattr__(self, "dependencies", tuple(self.dependencies))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "language": self.language,
            "entry_point": self.entry_point,
            "scripts": dict(self.scripts),
            "dependencies": [manifest.to_dict() for manifest in self.dependencies],
            "structure": self.structure.to_dict(),
            "license": self.license,
            "license_file": self.license_file,
        }


class SectionKey(str, Enum):
    """README sections, declared in document order."""

    TITLE = "title"
    DESCRIPTION = "description"
    INSTALLATION = "installation"
    USAGE = "usage"
    STRUCTURE = "structure"
    LICENSE = "license"

    @classmethod
    def parse(cls, value: object) -> Optional["SectionKey"]:
        """Return the matching key for a config string, or None when unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


Sections = Dict[SectionKey, str]

DEFAULT_MAX_DEPTH = 3


@dataclass(frozen=True)
class GeneratorConfig:
    """User policy loaded from .readmerc.json; every field has a default."""

    exclude_sections: FrozenSet[SectionKey] = frozenset()
    custom_content: Mapping[SectionKey, str] = field(default_factory=dict, hash=False)
    max_depth: int = DEFAULT_MAX_DEPTH
    include_hidden_files: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "exclude_sections", frozenset(self.exclude_sections))
        object.__setattr__(
            self, "custom_content", MappingProxyType(dict(self.custom_content))
        )
