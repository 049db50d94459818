"""Markdown helpers and the README assembler."""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from ..models import DEFAULT_MAX_DEPTH, DirectoryNode, NodeType, SectionKey

INDENT_UNIT = "  "


class MarkdownFormatter:
    """Formats headings, code fences, lists and trees, and assembles sections."""

    def format_heading(self, text: str, level: int = 1) -> str:
        level = min(max(level, 1), 6)
        return f"{'#' * level} {text}\n"

    def format_code_block(self, code: str, language: str = "") -> str:
        return f"```{language}\n{code}\n```\n"

    def format_list(self, items: Sequence[str]) -> str:
        if not items:
            return ""
        return "\n".join(f"- {item}" for item in items) + "\n"

    def render_tree(
        self,
        node: DirectoryNode,
        depth: int = 0,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> str:
        """Render descendants of ``node`` one per line, indented by depth.

        The node passed at depth 0 is not rendered itself. Nodes deeper than
        ``max_depth`` are left out without a marker.
        """
        if depth > max_depth:
            return ""

        lines: List[str] = []
        if depth > 0:
            suffix = "/" if node.type == NodeType.DIRECTORY else ""
            lines.append(f"{INDENT_UNIT * depth}{node.name}{suffix}\n")

        for child in node.children:
            lines.append(self.render_tree(child, depth + 1, max_depth))
        return "".join(lines)

    def assemble(self, sections: Mapping[SectionKey | str, str]) -> str:
        """Join sections in document order, ending with a single newline."""
        by_key: Dict[SectionKey, str] = {}
        for raw_key, text in sections.items():
            key = SectionKey.parse(raw_key)
            if key is not None:
                by_key[key] = text

        parts = [by_key[key] for key in SectionKey if by_key.get(key)]
        return "".join(parts).strip() + "\n"


__all__ = ["INDENT_UNIT", "MarkdownFormatter"]
