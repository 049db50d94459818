"""Tests for readmegen.analyzers.structure."""

from __future__ import annotations

from readmegen.analyzers.structure import classify
from readmegen.models import DirectoryNode, NodeType
from tests._fixtures.repo_builder import RepoBuilder


def _dir(name: str, path: str, *children: DirectoryNode) -> DirectoryNode:
    return DirectoryNode(name=name, type=NodeType.DIRECTORY, path=path, children=children)


def _file(name: str, path: str) -> DirectoryNode:
    return DirectoryNode(name=name, type=NodeType.FILE, path=path)


def test_classify_buckets_directories_by_name() -> None:
    tree = _dir(
        "root",
        "/p",
        _dir("SRC", "/p/SRC", _dir("lib", "/p/SRC/lib")),
        _dir("__tests__", "/p/__tests__"),
        _dir(".config", "/p/.config"),
        _dir("docs", "/p/docs"),
        _file("app", "/p/app"),
    )

    result = classify(tree)

    assert result.source == ["/p/SRC", "/p/SRC/lib"]
    assert result.test == ["/p/__tests__"]
    assert result.config == ["/p/.config"]


def test_classify_ignores_files_named_like_patterns() -> None:
    tree = _dir("root", "/p", _file("test", "/p/test"), _file("config", "/p/config"))

    result = classify(tree)

    assert result.as_dict() == {"source": [], "test": [], "config": []}


def test_classify_scanned_project(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "app/main.py": "\n",
            "tests/test_main.py": "\n",
            "spec/main_spec.rb": "\n",
            "configuration/settings.yaml": "\n",
        }
    )
    root = repo_builder.path()

    first = classify(repo_builder.scan())
    second = classify(repo_builder.scan())

    assert first == second
    assert first.source == [str(root / "app")]
    assert first.test == [str(root / "spec"), str(root / "tests")]
    assert first.config == [str(root / "configuration")]
