"""Tests for readmegen.postproc.markdown."""

from __future__ import annotations

import itertools

import pytest

from readmegen.models import DirectoryNode, NodeType, SectionKey
from readmegen.postproc.markdown import MarkdownFormatter


def _chain(depth: int) -> DirectoryNode:
    """Build root/d1/d2/.../d<depth> with a file inside the deepest directory."""
    node = DirectoryNode(
        name=f"leaf{depth + 1}.txt", type=NodeType.FILE, path=f"/r/leaf{depth + 1}.txt"
    )
    for level in range(depth, 0, -1):
        node = DirectoryNode(
            name=f"d{level}", type=NodeType.DIRECTORY, path=f"/r/d{level}", children=(node,)
        )
    return DirectoryNode(name="r", type=NodeType.DIRECTORY, path="/r", children=(node,))


@pytest.mark.parametrize("level", [1, 2, 3, 6])
def test_format_heading(level: int) -> None:
    heading = MarkdownFormatter().format_heading("Title", level)
    assert heading == "#" * level + " Title\n"


def test_format_heading_clamps_level() -> None:
    formatter = MarkdownFormatter()
    assert formatter.format_heading("x", 0) == "# x\n"
    assert formatter.format_heading("x", 9) == "###### x\n"


def test_format_code_block() -> None:
    formatter = MarkdownFormatter()
    assert formatter.format_code_block("npm test", "bash") == "```bash\nnpm test\n```\n"
    assert formatter.format_code_block("plain") == "```\nplain\n```\n"


def test_format_list() -> None:
    formatter = MarkdownFormatter()
    assert formatter.format_list(["a", "b"]) == "- a\n- b\n"
    assert formatter.format_list([]) == ""


def test_render_tree_marks_directories_and_indents() -> None:
    text = MarkdownFormatter().render_tree(_chain(2), 0, 5)

    assert text == "  d1/\n    d2/\n      leaf3.txt\n"


def test_render_tree_depth_bound() -> None:
    text = MarkdownFormatter().render_tree(_chain(5), 0, 2)

    lines = text.splitlines()
    assert lines == ["  d1/", "    d2/"]
    assert all(len(line) - len(line.lstrip(" ")) <= 2 * 2 for line in lines)


def test_render_tree_of_empty_directory_is_empty() -> None:
    root = DirectoryNode(name="r", type=NodeType.DIRECTORY, path="/r")
    assert MarkdownFormatter().render_tree(root) == ""


def test_assemble_orders_sections() -> None:
    sections = {
        SectionKey.LICENSE: "LICENSE_6",
        SectionKey.STRUCTURE: "STRUCT_5",
        SectionKey.USAGE: "USAGE_4",
        SectionKey.INSTALLATION: "INSTALL_3",
        SectionKey.DESCRIPTION: "DESC_2",
        SectionKey.TITLE: "TITLE_1",
    }

    result = MarkdownFormatter().assemble(sections)

    assert result == "TITLE_1DESC_2INSTALL_3USAGE_4STRUCT_5LICENSE_6\n"


def test_assemble_preserves_order_for_every_subset() -> None:
    formatter = MarkdownFormatter()
    markers = {key: f"<{key.value}>" for key in SectionKey}
    keys = list(SectionKey)

    for size in range(1, len(keys) + 1):
        for subset in itertools.combinations(keys, size):
            shuffled = {key: markers[key] for key in reversed(subset)}
            result = formatter.assemble(shuffled)
            offsets = [result.index(markers[key]) for key in subset]
            assert offsets == sorted(offsets)


def test_assemble_skips_empty_and_missing_sections() -> None:
    result = MarkdownFormatter().assemble(
        {SectionKey.TITLE: "# T\n", SectionKey.DESCRIPTION: "", SectionKey.USAGE: "\n## Usage\n\n"}
    )

    assert result == "# T\n\n## Usage\n"


def test_assemble_accepts_string_keys_and_ignores_unknown() -> None:
    result = MarkdownFormatter().assemble({"usage": "U", "title": "T", "footer": "F"})

    assert result == "TU\n"


def test_assemble_trims_and_ends_with_single_newline() -> None:
    result = MarkdownFormatter().assemble({SectionKey.TITLE: "\n\n# T\n\n\n"})

    assert result == "# T\n"
    assert MarkdownFormatter().assemble({}) == "\n"
