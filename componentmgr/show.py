"""Listing the components in the library."""

from __future__ import annotations

import json
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

from componentmgr.config import (
    SUPPORTED_FRAMEWORKS,
    SUPPORTED_STYLES,
    ProjectConfig,
    get_config,
)
from componentmgr.export import METADATA_FILE

Grouped = dict[str, dict[str, list[str]]]

_REQUIRED_FIELDS = ("name", "version", "framework", "style", "language")
_OPTIONAL_FIELDS = ("description", "author", "created_at", "updated_at")


def _optional_string_list(data: Mapping[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"field `{key}` must be a list of strings")
    return list(value)


@dataclass
class ShowMetadata:
    """The parts of a `component.toml` needed to list a component."""

    name: str
    version: str
    framework: str
    style: str
    language: str
    description: str | None = None
    author: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    tags: list[str] | None = None
    dependencies: list[str] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ShowMetadata:
        """Build metadata from parsed TOML, raising ValueError if malformed."""
        values: dict[str, Any] = {}
        for key in _REQUIRED_FIELDS:
            if key not in data:
                raise ValueError(f"missing field `{key}`")
            if not isinstance(data[key], str):
                raise ValueError(f"field `{key}` must be a string")
            values[key] = data[key]
        for key in _OPTIONAL_FIELDS:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"field `{key}` must be a string")
            values[key] = value
        values["tags"] = _optional_string_list(data, "tags")
        values["dependencies"] = _optional_string_list(data, "dependencies")
        return cls(**values)

    @classmethod
    def from_toml(cls, text: str) -> ShowMetadata:
        """Parse metadata from TOML text, raising ValueError if malformed."""
        return cls.from_mapping(tomllib.loads(text))


def get_component_config(component_path: str | Path) -> ShowMetadata | None:
    """Read a component's metadata; report and return None if it cannot be used."""
    config_path = Path(component_path) / METADATA_FILE
    if not config_path.exists():
        return None
    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        print(f"Failed to read component config: {config_path}")
        return None
    try:
        return ShowMetadata.from_toml(content)
    except ValueError as exc:
        print(f"Error parsing component config {config_path}: {exc}")
        return None


def is_compatible(component: ShowMetadata, project: ProjectConfig) -> bool:
    """Whether the component's framework, style and language suit the project."""
    framework_match = not project.framework or component.framework in project.framework
    style_match = not project.style or component.style in project.style
    language_match = not project.language or component.language in project.language
    return framework_match and style_match and language_match


def _subdirectories(path: Path) -> list[os.DirEntry[str]]:
    with os.scandir(path) as entries:
        return sorted(
            (entry for entry in entries if entry.is_dir(follow_symlinks=False)),
            key=lambda entry: entry.name,
        )


def _gather(components_dir: Path, grouped: Grouped) -> None:
    for framework in _subdirectories(components_dir):
        for style in _subdirectories(Path(framework.path)):
            for component in _subdirectories(Path(style.path)):
                if get_component_config(component.path) is not None:
                    grouped.setdefault(framework.name, {}).setdefault(style.name, []).append(
                        component.name
                    )


def _rank(catalogue: Sequence[str]) -> Callable[[str], tuple[int, str]]:
    def key(name: str) -> tuple[int, str]:
        position = catalogue.index(name) if name in catalogue else len(catalogue)
        return position, name

    return key


def _ordered(grouped: Grouped) -> Grouped:
    return {
        framework: {
            style: grouped[framework][style]
            for style in sorted(grouped[framework], key=_rank(SUPPORTED_STYLES))
        }
        for framework in sorted(grouped, key=_rank(SUPPORTED_FRAMEWORKS))
    }


def collect_components(components_dir: str | Path) -> Grouped:
    """Components with valid metadata, grouped by framework and then style.

    Known frameworks and styles come first in catalogue order, others follow
    alphabetically. Raises OSError if the library cannot be read.
    """
    grouped: Grouped = {}
    _gather(Path(components_dir), grouped)
    return _ordered(grouped)


def _debug_list(items: Sequence[str]) -> str:
    return "[" + ", ".join(json.dumps(item, ensure_ascii=False) for item in items) + "]"


def _show_matching(config: ProjectConfig, components_dir: Path) -> None:
    print("Available components (matching project configuration):")
    print(f"Framework: {_debug_list(config.framework)}")
    print(f"Style: {_debug_list(config.style)}")
    print(f"Language: {_debug_list(config.language)}")
    print("-" * 40 + " -")

    has_components = False
    for framework in config.framework:
        framework_dir = components_dir / framework
        if not framework_dir.exists():
            continue
        for style in config.style:
            style_dir = framework_dir / style
            if not style_dir.exists():
                continue
            try:
                component_dirs = _subdirectories(style_dir)
            except OSError:
                continue
            for component_dir in component_dirs:
                label = f"{framework}/{style}/{component_dir.name}"
                component_path = Path(component_dir.path)
                if (component_path / METADATA_FILE).exists():
                    component = get_component_config(component_path)
                    if component is None:
                        print(f"⚠️  Invalid component config in {label}")
                    elif is_compatible(component, config):
                        print(f"- {label}")
                        has_components = True
                else:
                    print(f"- {label}")
                    has_components = True

    if not has_components:
        print("No compatible components found.")


def _show_all(components_dir: Path) -> None:
    print(f"All available components in {components_dir}:\n")
    grouped: Grouped = {}
    try:
        _gather(components_dir, grouped)
    except OSError as exc:
        print(f"Error processing components directory: {exc}")
    for framework, styles in _ordered(grouped).items():
        print(f"{framework}:")
        for style, components in styles.items():
            if components:
                print(f"  - {style} ({len(components)}):")
                for component in components:
                    print(f"    • {component}")
        print()


def show_components(show_all: bool = False) -> None:
    """Print the components that suit the project, or every component."""
    config = get_config()
    components_dir = Path(config.components_dir)
    if not components_dir.exists():
        print(f"Components directory not found at: {components_dir}")
        return
    if show_all:
        _show_all(components_dir)
    else:
        _show_matching(config, components_dir)