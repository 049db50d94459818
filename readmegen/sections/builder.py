"""Section generators that turn ProjectMetadata into README fragments."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import (
    DEFAULT_MAX_DEPTH,
    DependencyManifest,
    DirectoryNode,
    ProjectMetadata,
    SectionKey,
    Sections,
)
from ..postproc.markdown import MarkdownFormatter

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")

# Scripts and entry points only come from package.json.
_RUN_COMMAND = "npm run"
_RUNTIME = "node"


class ContentGenerator:
    """Builds each README section; an empty string means "nothing to add"."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        formatter: MarkdownFormatter | None = None,
    ) -> None:
        self.formatter = formatter or MarkdownFormatter()
        self._env = self._create_env(templates_dir)

    def generate_title(self, metadata: ProjectMetadata) -> str:
        return self.formatter.format_heading(metadata.name, 1)

    def generate_description(self, metadata: ProjectMetadata) -> str:
        if not metadata.description:
            return ""
        return f"\n{metadata.description}\n"

    def generate_installation(self, manifests: Sequence[DependencyManifest]) -> str:
        if not manifests:
            return ""
        return self._render(SectionKey.INSTALLATION, manifests=list(manifests))

    def generate_usage(self, metadata: ProjectMetadata) -> str:
        return self._render(
            SectionKey.USAGE,
            scripts=dict(metadata.scripts),
            entry_point=metadata.entry_point,
            run_command=_RUN_COMMAND,
            runtime=_RUNTIME,
        )

    def generate_structure(self, tree: DirectoryNode, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
        rendered = self.formatter.render_tree(tree, 0, max_depth)
        return self._render(SectionKey.STRUCTURE, tree=rendered)

    def generate_license(self, metadata: ProjectMetadata) -> str:
        if not metadata.license and not metadata.license_file:
            return ""
        return self._render(
            SectionKey.LICENSE,
            license=metadata.license,
            license_file=metadata.license_file,
        )

    def generate_sections(
        self,
        metadata: ProjectMetadata,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> Sections:
        """Return every generated section keyed by SectionKey."""
        return {
            SectionKey.TITLE: self.generate_title(metadata),
            SectionKey.DESCRIPTION: self.generate_description(metadata),
            SectionKey.INSTALLATION: self.generate_installation(metadata.dependencies),
            SectionKey.USAGE: self.generate_usage(metadata),
            SectionKey.STRUCTURE: self.generate_structure(metadata.structure, max_depth),
            SectionKey.LICENSE: self.generate_license(metadata),
        }

    def _render(self, key: SectionKey, **context: Any) -> str:
        template = self._env.get_template(f"sections/{key.value}.j2")
        return template.render(**context)

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(DEFAULT_TEMPLATES_DIR))
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = ["ContentGenerator", "DEFAULT_TEMPLATES_DIR"]
