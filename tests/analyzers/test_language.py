"""Tests for readmegen.analyzers.language."""

from __future__ import annotations

import pytest

from readmegen.analyzers.language import (
    LANGUAGE_BY_SUFFIX,
    UNKNOWN_LANGUAGE,
    detect_language,
    file_extension,
)


@pytest.mark.parametrize(
    ("files", "expected"),
    [
        (["src/a.ts", "src/b.ts", "index.js"], "TypeScript"),
        (["main.py", "util.py", "lib.rs"], "Python"),
        (["main.go"], "Go"),
        (["App.JAVA", "Util.Java"], "Java"),
        (["core.cpp", "core.c", "more.cpp"], "C++"),
        (["Gemfile", "app.rb"], "Ruby"),
        (["index.php"], "PHP"),
    ],
)
def test_detect_language_picks_most_common_extension(files: list[str], expected: str) -> None:
    assert detect_language(files) == expected


def test_detect_language_tie_goes_to_first_seen_extension() -> None:
    assert detect_language(["b.py", "a.js", "c.js", "d.py"]) == "Python"
    assert detect_language(["a.js", "b.py", "c.js", "d.py"]) == "JavaScript"


def test_detect_language_unrecognised_winner_is_unknown() -> None:
    assert detect_language(["a.md", "b.md", "c.md", "x.py"]) == UNKNOWN_LANGUAGE
    assert detect_language(["package.json", "a.ts"]) == UNKNOWN_LANGUAGE


def test_detect_language_counts_extensionless_files_as_nothing() -> None:
    assert detect_language(["Makefile", "Dockerfile", "LICENSE", "main.go"]) == "Go"


def test_detect_language_recognised_extension_wins_when_seen_first() -> None:
    assert detect_language(["a.ts", "package.json"]) == "TypeScript"


@pytest.mark.parametrize(
    "files",
    [
        [],
        ["README.md", "LICENSE"],
        [".gitignore", "Makefile"],
    ],
)
def test_detect_language_returns_unknown_sentinel(files: list[str]) -> None:
    assert detect_language(files) == UNKNOWN_LANGUAGE


def test_detect_language_is_repeatable() -> None:
    files = ["x.rb", "y.go", "z.rb", "w.go", "v.c"]
    results = {detect_language(files) for _ in range(5)}
    assert results == {"Ruby"}


def test_detect_language_label_is_known_or_unknown() -> None:
    for files in (["a.xyz"], ["a.rs", "b.rs"], ["noext"]):
        label = detect_language(files)
        assert label
        assert label in set(LANGUAGE_BY_SUFFIX.values()) | {UNKNOWN_LANGUAGE}


def test_file_extension_uses_last_suffix_lowercased() -> None:
    assert file_extension("src/App.test.TS") == ".ts"
    assert file_extension("/tmp/project/.gitignore") == ""
    assert file_extension("Makefile") == ""
