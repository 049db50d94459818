"""Pipeline orchestration: config → analysis → sections → README."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .analyzers import ProjectAnalyzer
from .config import apply_config, load_config
from .logging import get_logger
from .models import DEFAULT_MAX_DEPTH, GeneratorConfig, ProjectMetadata, Sections
from .postproc.markdown import MarkdownFormatter
from .sections import ContentGenerator
from .tree_scanner import TreeScanner

README_FILENAME = "README.md"


@dataclass(frozen=True)
class GenerationResult:
    """Everything produced by one generation run."""

    root: Path
    config: GeneratorConfig
    metadata: ProjectMetadata
    sections: Sections
    content: str

    @property
    def readme_path(self) -> Path:
        return self.root / README_FILENAME


class Orchestrator:
    """Coordinates README generation for a single project directory."""

    def __init__(
        self,
        analyzer: ProjectAnalyzer | None = None,
        generator: ContentGenerator | None = None,
        formatter: MarkdownFormatter | None = None,
    ) -> None:
        self._analyzer_override = analyzer
        self.formatter = formatter or MarkdownFormatter()
        self.generator = generator or ContentGenerator(formatter=self.formatter)
        self.logger = get_logger("orchestrator")

    def generate(self, path: str | Path) -> GenerationResult:
        """Analyze ``path`` and build the README text without writing it."""
        root = self._resolve_root(path)
        self.logger.info("Analyzing project at %s", root)

        config = load_config(root)
        analyzer = self._analyzer_for(config)
        # Never scan shallower than the default; deeper when maxDepth asks for it.
        scan_depth = max(DEFAULT_MAX_DEPTH, config.max_depth)
        metadata = analyzer.analyze(root, max_depth=scan_depth)
        self.logger.info("Project: %s", metadata.name)
        self.logger.info("Language: %s", metadata.language)

        generated = self.generator.generate_sections(metadata, max_depth=config.max_depth)
        sections = apply_config(generated, config)
        if config.exclude_sections:
            self.logger.debug(
                "Excluded sections: %s",
                ", ".join(sorted(key.value for key in config.exclude_sections)),
            )

        content = self.formatter.assemble(sections)
        return GenerationResult(
            root=root,
            config=config,
            metadata=metadata,
            sections=sections,
            content=content,
        )

    def write(self, result: GenerationResult, *, overwrite: bool = False) -> Path:
        """Write a generated README, refusing to clobber one unless asked."""
        readme_path = result.readme_path
        if readme_path.exists() and not overwrite:
            raise FileExistsError(
                f"{README_FILENAME} already exists at {readme_path}. Pass overwrite to replace it."
            )
        readme_path.write_text(result.content, encoding="utf-8")
        self.logger.info("README written to %s", readme_path)
        return readme_path

    def run_init(self, path: str | Path, *, overwrite: bool = False) -> Path:
        """Generate and write the README for ``path``."""
        return self.write(self.generate(path), overwrite=overwrite)

    def _analyzer_for(self, config: GeneratorConfig) -> ProjectAnalyzer:
        if self._analyzer_override is not None:
            return self._analyzer_override
        return ProjectAnalyzer(scanner=TreeScanner(include_hidden=config.include_hidden_files))

    @staticmethod
    def _resolve_root(path: str | Path) -> Path:
        root = Path(path).expanduser().resolve()
        if not root.exists():
            raise FileNotFoundError(f"Directory not found: {path}")
        if not root.is_dir():
            raise NotADirectoryError(f"Not a directory: {path}")
        return root


__all__ = ["GenerationResult", "Orchestrator", "README_FILENAME"]
