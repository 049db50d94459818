"""Classifies scanned directories into source, test and config roles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ..models import DirectoryNode, NodeType

SOURCE_PATTERNS = frozenset({"src", "lib", "source", "app"})
TEST_PATTERNS = frozenset({"test", "tests", "__tests__", "spec", "specs"})
CONFIG_PATTERNS = frozenset({"config", "configuration", ".config"})


@dataclass
class DirectoryClassification:
    """Directory paths grouped by the role their name suggests."""

    source: List[str] = field(default_factory=list)
    test: List[str] = field(default_factory=list)
    config: List[str] = field(default_factory=list)

    def as_dict(self) -> Dict[str, List[str]]:
        return {"source": list(self.source), "test": list(self.test), "config": list(self.config)}


def classify(tree: DirectoryNode) -> DirectoryClassification:
    """Bucket every directory in ``tree`` by its lower-cased base name."""
    result = DirectoryClassification()
    for node in tree.walk():
        if node.type != NodeType.DIRECTORY:
            continue
        lower_name = node.name.lower()
        if lower_name in SOURCE_PATTERNS:
            result.source.append(node.path)
        elif lower_name in TEST_PATTERNS:
            result.test.append(node.path)
        elif lower_name in CONFIG_PATTERNS:
            result.config.append(node.path)
    return result


__all__ = [
    "CONFIG_PATTERNS",
    "DirectoryClassification",
    "SOURCE_PATTERNS",
    "TEST_PATTERNS",
    "classify",
]
