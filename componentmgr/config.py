"""Project configuration and the catalogue of supported options."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import tomli_w

CONFIG_FILE = ".component-manager.toml"
DEFAULT_COMPONENTS_DIR = Path("./components")

SUPPORTED_EXTENSIONS: tuple[str, ...] = (
    "svelte", "vue", "tsx", "jsx", "js", "ts",
    "html", "css", "scss", "dart", "java", "py", "rb", "php",
    "swift", "go", "rs", "c", "cpp", "cs", "clj",
    "lua", "elixir", "scala",
)

SUPPORTED_FRAMEWORKS: tuple[str, ...] = (
    "none", "vue", "nuxt", "angular", "react", "svelte", "php",
    "vanilla", "ember", "jquery", "laravel", "django", "flask",
    "rails", "spring", "express", "fastapi", "nextjs", "remix",
    "solidjs", ".net",
)

SUPPORTED_STYLES: tuple[str, ...] = (
    "none", "tailwind", "bootstrap", "scss",
)

SUPPORTED_LANGUAGES: tuple[str, ...] = (
    "none", "javascript", "typescript", "python", "ruby",
    "php", "java", "csharp", "go", "rust",
    "swift", "kotlin", "dart", "elixir", "scala",
    "lua", "perl",
)


def _string_list(data: Mapping[str, Any], key: str) -> list[str]:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"field `{key}` must be a list of strings")
    return list(value)


@dataclass
class ProjectConfig:
    """The frameworks, styles and languages a project works with."""

    framework: list[str]
    style: list[str]
    language: list[str]
    components_dir: Path = field(default_factory=lambda: DEFAULT_COMPONENTS_DIR)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ProjectConfig:
        """Build a configuration from parsed TOML, raising ValueError if malformed."""
        components_dir = data.get("components_dir", str(DEFAULT_COMPONENTS_DIR))
        if not isinstance(components_dir, str):
            raise ValueError("field `components_dir` must be a string")
        return cls(
            framework=_string_list(data, "framework"),
            style=_string_list(data, "style"),
            language=_string_list(data, "language"),
            components_dir=Path(components_dir),
        )

    @classmethod
    def load_from_file(cls, path: str | Path = CONFIG_FILE) -> ProjectConfig | None:
        """Read the configuration file, or return None if it is missing or invalid."""
        try:
            content = Path(path).read_text(encoding="utf-8")
            return cls.from_mapping(tomllib.loads(content))
        except (OSError, ValueError):
            return None

    def to_toml(self) -> str:
        """Serialise the configuration as TOML."""
        return tomli_w.dumps(
            {
                "framework": list(self.framework),
                "style": list(self.style),
                "language": list(self.language),
                "components_dir": str(self.components_dir),
            }
        )


def get_config(path: str | Path = CONFIG_FILE) -> ProjectConfig:
    """Load the project configuration, falling back to the defaults."""
    loaded = ProjectConfig.load_from_file(path)
    if loaded is not None:
        return loaded
    return ProjectConfig(
        framework=["vue"],
        style=["css"],
        language=["javascript"],
        components_dir=DEFAULT_COMPONENTS_DIR,
    )


def load_project_config(path: str | Path = CONFIG_FILE) -> ProjectConfig | None:
    """Load the project configuration without any fallback."""
    return ProjectConfig.load_from_file(path)