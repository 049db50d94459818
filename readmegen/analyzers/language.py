"""Primary language detection from file extensions."""

from __future__ import annotations

import os
from typing import Dict, Iterable

UNKNOWN_LANGUAGE = "Unknown"

LANGUAGE_BY_SUFFIX: Dict[str, str] = {
    ".ts": "TypeScript",
    ".js": "JavaScript",
    ".py": "Python",
    ".rs": "Rust",
    ".go": "Go",
    ".java": "Java",
    ".cpp": "C++",
    ".c": "C",
    ".rb": "Ruby",
    ".php": "PHP",
}


def file_extension(file_name: str) -> str:
    """Return the lower-cased trailing extension, or an empty string."""
    return os.path.splitext(os.path.basename(file_name))[1].lower()


def detect_language(file_names: Iterable[str]) -> str:
    """Return the language label of the most common file extension.

    Every non-empty extension is tallied. A tie keeps the extension that was
    seen first in ``file_names``. When the winning extension has no entry in
    ``LANGUAGE_BY_SUFFIX`` the result is ``UNKNOWN_LANGUAGE``.
    """
    counts: Dict[str, int] = {}
    for name in file_names:
        suffix = file_extension(name)
        if suffix:
            counts[suffix] = counts.get(suffix, 0) + 1

    primary = ""
    best = 0
    # dicts keep insertion order, i.e. first-encountered order
    for suffix, count in counts.items():
        if count > best:
            best = count
            primary = suffix

    return LANGUAGE_BY_SUFFIX.get(primary, UNKNOWN_LANGUAGE)


__all__ = ["LANGUAGE_BY_SUFFIX", "UNKNOWN_LANGUAGE", "detect_language", "file_extension"]
