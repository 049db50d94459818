"""Dependency manifest detection for npm, pip and cargo projects."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..logging import get_logger
from ..models import DependencyManifest, ManifestType

PACKAGE_JSON = "package.json"
REQUIREMENTS_TXT = "requirements.txt"
CARGO_TOML = "Cargo.toml"

_CARGO_NAME = re.compile(r'^\s*name\s*=\s*"([^"]+)"', re.MULTILINE)
_CARGO_DESCRIPTION = re.compile(r'^\s*description\s*=\s*"([^"]+)"', re.MULTILINE)
_CARGO_LICENSE = re.compile(r'^\s*license\s*=\s*"([^"]+)"', re.MULTILINE)

logger = get_logger("analyzers.manifests")


class ProbeStatus(str, Enum):
    """Outcome of probing one manifest file name."""

    PARSED = "parsed"
    UNPARSABLE = "unparsable"
    ABSENT = "absent"


@dataclass(frozen=True)
class ManifestProbe:
    """Result of probing a manifest: parsed record, unparsable file, or nothing."""

    file_name: str
    status: ProbeStatus
    manifest: Optional[DependencyManifest] = None
    reason: Optional[str] = None


class ManifestParseError(ValueError):
    """Raised by a manifest parser when file contents cannot be interpreted."""


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def load_package_json(path: Path) -> Dict[str, Any]:
    """Parse a package.json file, requiring a JSON object at the top level."""
    try:
        data = json.loads(_read_text(path))
    except json.JSONDecodeError as exc:
        raise ManifestParseError(f"invalid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise ManifestParseError("top-level value is not an object")
    return data


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _parse_npm(path: Path, fallback_name: str) -> DependencyManifest:
    data = load_package_json(path)
    dependencies = data.get("dependencies")
    license_value = data.get("license")
    return DependencyManifest(
        type=ManifestType.NPM,
        file_path=str(path),
        project_name=_as_text(data.get("name")) or fallback_name,
        description=_as_text(data.get("description")),
        dependencies=tuple(dependencies.keys()) if isinstance(dependencies, dict) else (),
        license=license_value if isinstance(license_value, str) and license_value else None,
    )


def _parse_pip(path: Path, fallback_name: str) -> DependencyManifest:
    packages: List[str] = []
    for line in _read_text(path).splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        packages.append(stripped)
    return DependencyManifest(
        type=ManifestType.PIP,
        file_path=str(path),
        project_name=fallback_name,
        description="",
        dependencies=tuple(packages),
    )


def _parse_cargo(path: Path, fallback_name: str) -> DependencyManifest:
    content = _read_text(path)
    name_match = _CARGO_NAME.search(content)
    description_match = _CARGO_DESCRIPTION.search(content)
    license_match = _CARGO_LICENSE.search(content)
    return DependencyManifest(
        type=ManifestType.CARGO,
        file_path=str(path),
        project_name=name_match.group(1) if name_match else fallback_name,
        description=description_match.group(1) if description_match else "",
        dependencies=(),
        license=license_match.group(1) if license_match else None,
    )


_Parser = Callable[[Path, str], DependencyManifest]

# Probe order also fixes the order of the returned manifests.
MANIFEST_PARSERS: Tuple[Tuple[str, _Parser], ...] = (
    (PACKAGE_JSON, _parse_npm),
    (REQUIREMENTS_TXT, _parse_pip),
    (CARGO_TOML, _parse_cargo),
)


class ManifestDetector:
    """Probes the fixed manifest file names at a project root."""

    def probe(self, root: str | Path, file_name: str, parser: _Parser) -> ManifestProbe:
        root_path = Path(root)
        path = root_path / file_name
        if not path.is_file():
            return ManifestProbe(file_name=file_name, status=ProbeStatus.ABSENT)
        fallback_name = os.path.basename(os.path.normpath(str(root_path)))
        try:
            manifest = parser(path, fallback_name)
        except (ManifestParseError, OSError, UnicodeDecodeError) as exc:
            return ManifestProbe(
                file_name=file_name,
                status=ProbeStatus.UNPARSABLE,
                reason=str(exc),
            )
        return ManifestProbe(file_name=file_name, status=ProbeStatus.PARSED, manifest=manifest)

    def probe_all(self, root: str | Path) -> List[ManifestProbe]:
        """Return one probe result per known manifest file name, in probe order."""
        return [self.probe(root, file_name, parser) for file_name, parser in MANIFEST_PARSERS]

    def find_manifests(self, root: str | Path) -> List[DependencyManifest]:
        """Return parsed manifests; absent and unparsable files contribute nothing."""
        manifests: List[DependencyManifest] = []
        for result in self.probe_all(root):
            if result.status == ProbeStatus.UNPARSABLE:
                logger.debug("Ignoring %s: %s", result.file_name, result.reason)
            if result.manifest is not None:
                manifests.append(result.manifest)
        return manifests


__all__ = [
    "CARGO_TOML",
    "MANIFEST_PARSERS",
    "ManifestDetector",
    "ManifestParseError",
    "ManifestProbe",
    "PACKAGE_JSON",
    "ProbeStatus",
    "REQUIREMENTS_TXT",
    "load_package_json",
]
