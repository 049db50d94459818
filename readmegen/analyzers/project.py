"""Project analysis: combines scanning, language and manifest detection."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from ..logging import get_logger
from ..models import (
    DEFAULT_MAX_DEPTH,
    DependencyManifest,
    DirectoryNode,
    ManifestType,
    NodeType,
    ProjectMetadata,
)
from ..tree_scanner import TreeScanner
from .language import detect_language
from .manifests import ManifestDetector, ManifestParseError, load_package_json
from .structure import classify

_LICENSE_PREFIXES = ("LICENSE", "LICENCE", "COPYING")

logger = get_logger("analyzers.project")


class ProjectAnalyzer:
    """Derives ProjectMetadata for a project root."""

    def __init__(
        self,
        scanner: TreeScanner | None = None,
        detector: ManifestDetector | None = None,
    ) -> None:
        self.scanner = scanner or TreeScanner()
        self.detector = detector or ManifestDetector()

    def analyze(self, root: str | Path, *, max_depth: int = DEFAULT_MAX_DEPTH) -> ProjectMetadata:
        root_path = str(root)
        structure = self.scanner.scan(root_path, max_depth=max_depth)
        files = structure.file_paths()
        language = detect_language(files)
        manifests = self.detector.find_manifests(root_path)
        logger.debug(
            "Scanned %d files; detected %d manifests", len(files), len(manifests)
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Directory roles: %s", classify(structure).as_dict())

        fallback_name = os.path.basename(os.path.normpath(root_path))
        primary = manifests[0] if manifests else None
        name = (primary.project_name if primary else "") or fallback_name
        description = primary.description if primary else ""

        npm_manifest = next(
            (manifest for manifest in manifests if manifest.type == ManifestType.NPM),
            None,
        )
        scripts: Dict[str, str] = {}
        entry_point: Optional[str] = None
        if npm_manifest is not None:
            package = self._reload_package_json(npm_manifest)
            scripts = _extract_scripts(package)
            entry_point = _extract_entry_point(package)

        return ProjectMetadata(
            name=name,
            description=description,
            language=language,
            entry_point=entry_point,
            scripts=scripts,
            dependencies=tuple(manifests),
            structure=structure,
            license=_first_license(manifests),
            license_file=_find_license_file(structure),
        )

    @staticmethod
    def _reload_package_json(manifest: DependencyManifest) -> Dict[str, Any]:
        try:
            return load_package_json(Path(manifest.file_path))
        except (ManifestParseError, OSError, UnicodeDecodeError) as exc:
            logger.debug("Could not re-read %s: %s", manifest.file_path, exc)
            return {}


def _extract_scripts(package: Dict[str, Any]) -> Dict[str, str]:
    scripts = package.get("scripts")
    if not isinstance(scripts, dict):
        return {}
    return {
        str(name): command
        for name, command in scripts.items()
        if isinstance(command, str)
    }


def _extract_entry_point(package: Dict[str, Any]) -> Optional[str]:
    main = package.get("main")
    if isinstance(main, str) and main:
        return main
    binary = package.get("bin")
    if isinstance(binary, str) and binary:
        return binary
    if isinstance(binary, dict):
        for target in binary.values():
            if isinstance(target, str) and target:
                return target
    return None


def _first_license(manifests: Sequence[DependencyManifest]) -> Optional[str]:
    for manifest in manifests:
        if manifest.license:
            return manifest.license
    return None


def _find_license_file(structure: DirectoryNode) -> Optional[str]:
    for child in structure.children:
        if child.type == NodeType.FILE and child.name.upper().startswith(_LICENSE_PREFIXES):
            return child.name
    return None


__all__ = ["ProjectAnalyzer"]
