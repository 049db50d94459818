"""Markdown formatting and document assembly."""

from .markdown import MarkdownFormatter

__all__ = ["MarkdownFormatter"]
