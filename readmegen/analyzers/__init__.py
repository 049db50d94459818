"""Analyzers that turn a scanned project into ProjectMetadata."""

from __future__ import annotations

from .language import LANGUAGE_BY_SUFFIX, UNKNOWN_LANGUAGE, detect_language
from .manifests import ManifestDetector, ManifestProbe, ProbeStatus
from .project import ProjectAnalyzer
from .structure import DirectoryClassification, classify

__all__ = [
    "DirectoryClassification",
    "LANGUAGE_BY_SUFFIX",
    "ManifestDetector",
    "ManifestProbe",
    "ProbeStatus",
    "ProjectAnalyzer",
    "UNKNOWN_LANGUAGE",
    "classify",
    "detect_language",
]
