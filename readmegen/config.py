"""Configuration loading (.readmerc.json) and section override rules."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import yaml

from .logging import get_logger
from .models import DEFAULT_MAX_DEPTH, GeneratorConfig, SectionKey, Sections

CONFIG_FILENAME = ".readmerc.json"
YAML_CONFIG_FILENAMES = (".readmerc.yml", ".readmerc.yaml")

logger = get_logger("config")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be read or parsed."""


def load_config(root: str | Path) -> GeneratorConfig:
    """Load configuration for a project root, falling back to defaults.

    A missing, unreadable or malformed file yields the default config; the
    problem is logged and never raised.
    """
    config_file = find_config_file(Path(root))
    if config_file is None:
        return GeneratorConfig()

    try:
        data = read_config(config_file)
    except ConfigError as exc:
        logger.warning("Ignoring %s: %s", config_file.name, exc)
        return GeneratorConfig()

    return merge_with_defaults(data)


def find_config_file(root: Path) -> Optional[Path]:
    """Return the config file for ``root``; JSON wins over the YAML variants."""
    for name in (CONFIG_FILENAME, *YAML_CONFIG_FILENAMES):
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}

    if path.suffix == ".json":
        try:
            loaded = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    else:
        try:
            loaded = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def merge_with_defaults(data: Mapping[str, Any] | None) -> GeneratorConfig:
    """Build a complete GeneratorConfig from a possibly partial mapping.

    Every field that is missing or of the wrong type takes its default, so any
    input produces a valid config.
    """
    values = _as_dict(data)

    exclude_sections = frozenset(
        key
        for key in (SectionKey.parse(item) for item in _as_str_list(_lookup(values, "excludeSections")))
        if key is not None
    )

    custom_content: Dict[SectionKey, str] = {}
    for raw_key, text in _as_dict(_lookup(values, "customContent")).items():
        key = SectionKey.parse(raw_key)
        if key is not None and isinstance(text, str):
            custom_content[key] = text

    max_depth = _as_positive_int(_lookup(values, "maxDepth"))
    include_hidden = _as_bool(_lookup(values, "includeHiddenFiles"))

    return GeneratorConfig(
        exclude_sections=exclude_sections,
        custom_content=custom_content,
        max_depth=max_depth if max_depth is not None else DEFAULT_MAX_DEPTH,
        include_hidden_files=include_hidden if include_hidden is not None else False,
    )


def exclude(sections: Mapping[SectionKey, str], exclude_keys: Iterable[Any]) -> Sections:
    """Return a copy of ``sections`` without the excluded keys.

    Unknown names in ``exclude_keys`` are ignored.
    """
    excluded = {
        key for key in (SectionKey.parse(item) for item in exclude_keys) if key is not None
    }
    return {
        key: text
        for key, text in _normalise_sections(sections).items()
        if key not in excluded
    }


def override(sections: Mapping[SectionKey, str], custom_content: Mapping[Any, str]) -> Sections:
    """Return a copy of ``sections`` with non-empty custom text substituted.

    Keys absent from ``sections`` are added, which lets custom content
    reinstate a section that was excluded earlier.
    """
    result = _normalise_sections(sections)
    for raw_key, text in custom_content.items():
        key = SectionKey.parse(raw_key)
        if key is not None and text:
            result[key] = text
    return result


def apply_config(sections: Mapping[SectionKey, str], config: GeneratorConfig) -> Sections:
    """Apply exclusion, then overrides, as the generation pipeline does."""
    return override(exclude(sections, config.exclude_sections), config.custom_content)


def _normalise_sections(sections: Mapping[Any, str]) -> Sections:
    result: Sections = {}
    for raw_key, text in sections.items():
        key = SectionKey.parse(raw_key)
        if key is not None:
            result[key] = text
    return result


def _lookup(values: Mapping[str, Any], camel_name: str) -> Any:
    if camel_name in values:
        return values[camel_name]
    snake_name = "".join(f"_{char.lower()}" if char.isupper() else char for char in camel_name)
    return values.get(snake_name)


def _as_dict(value: Any) -> Dict[Any, Any]:
    return dict(value) if isinstance(value, Mapping) else {}


def _as_positive_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        try:
            parsed = int(value)
        except ValueError:
            return None
        return parsed if parsed > 0 else None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [item for item in value if isinstance(item, str)]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "YAML_CONFIG_FILENAMES",
    "apply_config",
    "exclude",
    "find_config_file",
    "load_config",
    "merge_with_defaults",
    "override",
    "read_config",
]
