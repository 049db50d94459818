"""Directory tree scanning for project analysis."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Set

from .logging import get_logger
from .models import DEFAULT_MAX_DEPTH, DirectoryNode, NodeType

# Dot-prefixed entries that are still worth showing in the structure section.
_ALLOWED_HIDDEN = {".gitignore"}

_EXCLUDED_DIRS = {
    "node_modules",
    "dist",
}

logger = get_logger("tree_scanner")


class EntryStatus(str, Enum):
    """Outcome of scanning a single directory entry."""

    INCLUDED = "included"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class EntryScan:
    """Result of probing one entry: the scanned node, or why it was skipped."""

    status: EntryStatus
    node: Optional[DirectoryNode] = None
    reason: Optional[str] = None

    @classmethod
    def included(cls, node: DirectoryNode) -> "EntryScan":
        return cls(status=EntryStatus.INCLUDED, node=node)

    @classmethod
    def skipped(cls, reason: str) -> "EntryScan":
        return cls(status=EntryStatus.SKIPPED, reason=reason)


def is_excluded_name(name: str, *, include_hidden: bool = False) -> bool:
    """Return True when an entry name is filtered out before scanning."""
    if name in _EXCLUDED_DIRS:
        return True
    if name.startswith(".") and not include_hidden:
        return name not in _ALLOWED_HIDDEN
    return False


class TreeScanner:
    """Walks a directory into an immutable DirectoryNode tree."""

    def __init__(self, *, include_hidden: bool = False) -> None:
        self.include_hidden = include_hidden

    def scan(self, path: str | Path, max_depth: int = DEFAULT_MAX_DEPTH) -> DirectoryNode:
        """Return the tree rooted at ``path``, expanding at most ``max_depth`` levels.

        The root path must exist; errors raised for the root itself propagate.
        Entries below the root that cannot be read are skipped.
        """
        root = str(path)
        visited: Set[str] = set()
        return self._scan(root, max_depth, 0, visited)

    def scan_entry(
        self,
        path: str | Path,
        max_depth: int = DEFAULT_MAX_DEPTH,
        current_depth: int = 0,
        visited: Optional[Set[str]] = None,
    ) -> EntryScan:
        """Scan one entry, reporting unreadable or cyclic entries as skipped."""
        entry_path = str(path)
        seen = visited if visited is not None else set()
        try:
            node = self._scan(entry_path, max_depth, current_depth, seen)
        except _CycleDetected:
            return EntryScan.skipped("symlink cycle")
        except OSError as exc:
            return EntryScan.skipped(exc.strerror or exc.__class__.__name__)
        return EntryScan.included(node)

    def _scan(
        self,
        path: str,
        max_depth: int,
        current_depth: int,
        visited: Set[str],
    ) -> DirectoryNode:
        name = os.path.basename(os.path.normpath(path))
        if not os.path.isdir(path):
            # stat raises for broken symlinks and entries removed mid-scan
            os.stat(path)
            return DirectoryNode(name=name, type=NodeType.FILE, path=path)

        if current_depth >= max_depth:
            return DirectoryNode(name=name, type=NodeType.DIRECTORY, path=path)

        # visited holds the resolved ancestors of the entry being scanned
        real_path = os.path.realpath(path)
        if real_path in visited:
            raise _CycleDetected(path)
        visited.add(real_path)
        try:
            children = self._scan_children(path, max_depth, current_depth, visited)
        finally:
            visited.discard(real_path)

        return DirectoryNode(
            name=name,
            type=NodeType.DIRECTORY,
            path=path,
            children=tuple(children),
        )

    def _scan_children(
        self,
        path: str,
        max_depth: int,
        current_depth: int,
        visited: Set[str],
    ) -> List[DirectoryNode]:
        children: List[DirectoryNode] = []
        for entry in sorted(os.listdir(path)):
            if is_excluded_name(entry, include_hidden=self.include_hidden):
                continue
            result = self.scan_entry(
                os.path.join(path, entry), max_depth, current_depth + 1, visited
            )
            if result.status == EntryStatus.SKIPPED:
                logger.debug("Skipping %s: %s", os.path.join(path, entry), result.reason)
                continue
            children.append(result.node)  # type: ignore[arg-type]
        return children


class _CycleDetected(Exception):
    """Internal signal raised when a directory resolves to one of its own ancestors."""


__all__ = ["EntryScan", "EntryStatus", "TreeScanner", "is_excluded_name"]
