"""Exporting a component file into the component library."""

from __future__ import annotations

import getpass
import shutil
import sys
import tomllib
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

import tomli_w

from componentmgr.config import SUPPORTED_EXTENSIONS, load_project_config
from componentmgr.dependencies import ComponentDependencies, Dependency
from componentmgr.prompts import PromptError, Prompter

LIBRARY_DIR = Path("components")
METADATA_FILE = "component.toml"
INITIAL_VERSION = "0.1.0"

_STRING_FIELDS = (
    "name",
    "version",
    "framework",
    "style",
    "language",
    "description",
    "author",
    "created_at",
    "updated_at",
)


def _error(message: str) -> None:
    print(message, file=sys.stderr)


@dataclass
class ExportMetadata:
    """The `component.toml` written next to an exported component."""

    name: str
    version: str
    framework: str
    style: str
    language: str
    description: str
    author: str
    created_at: str
    updated_at: str
    tags: list[str] = field(default_factory=list)
    dependencies: ComponentDependencies = field(default_factory=ComponentDependencies)

    def to_toml(self) -> str:
        """Serialise the metadata as TOML."""
        data: dict[str, Any] = {key: getattr(self, key) for key in _STRING_FIELDS}
        data["tags"] = list(self.tags)
        data["dependencies"] = self.dependencies.to_toml_value()
        return tomli_w.dumps(data)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ExportMetadata:
        """Build metadata from parsed TOML, raising ValueError if malformed."""
        values: dict[str, str] = {}
        for key in _STRING_FIELDS:
            if key not in data:
                raise ValueError(f"missing field `{key}`")
            if not isinstance(data[key], str):
                raise ValueError(f"field `{key}` must be a string")
            values[key] = data[key]
        if "tags" not in data:
            raise ValueError("missing field `tags`")
        tags = data["tags"]
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise ValueError("field `tags` must be a list of strings")
        if "dependencies" in data:
            dependencies = ComponentDependencies.from_toml_value(data["dependencies"])
        else:
            dependencies = ComponentDependencies()
        return cls(**values, tags=list(tags), dependencies=dependencies)

    @classmethod
    def from_toml(cls, text: str) -> ExportMetadata:
        """Parse metadata from TOML text, raising ValueError if malformed."""
        return cls.from_mapping(tomllib.loads(text))


def framework_dependencies(framework: str, style: str) -> ComponentDependencies:
    """The packages a component needs because of its framework and style."""
    deps = ComponentDependencies()
    if framework == "vue":
        deps.add_dependency(Dependency.npm("vue@^3.0.0"))
    elif framework == "react":
        deps.add_dependency(Dependency.npm("react@^18.0.0"))
        deps.add_dependency(Dependency.npm("react-dom@^18.0.0"))
    if style == "tailwind":
        deps.add_dependency(Dependency.npm("tailwindcss@^3.0.0"))
    return deps


def build_metadata(
    name: str,
    framework: str,
    style: str,
    language: str,
    description: str,
    author: str,
    now: datetime | None = None,
) -> ExportMetadata:
    """Metadata for a freshly exported component."""
    stamp = (now if now is not None else datetime.now(timezone.utc)).isoformat()
    return ExportMetadata(
        name=name,
        version=INITIAL_VERSION,
        framework=framework,
        style=style,
        language=language,
        description=description,
        author=author,
        created_at=stamp,
        updated_at=stamp,
        tags=[],
        dependencies=framework_dependencies(framework, style),
    )


def destination_for(name: str, ext: str, framework: str, style: str) -> tuple[Path, Path]:
    """The library directory for a component and the file it is copied to."""
    directory = LIBRARY_DIR / framework / style / name
    suffix = f".{ext}"
    stem = name
    while stem.endswith(suffix):
        stem = stem[: -len(suffix)]
    return directory, directory / f"{stem}.{ext}"


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        return "unknown"


def export_component(prompter: Prompter | None = None) -> Path | None:
    """Copy a component file into the library and describe it; return where it went."""
    if prompter is None:
        prompter = Prompter()
    name = prompter.text("Component name (e.g., Button):")
    source = Path(prompter.text("Path to the existing component file:"))

    if not source.is_file():
        _error("❌ The path does not exist or is not a file.")
        return None

    ext = source.suffix[1:].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        _error(f"❌ Unsupported file type: .{ext}")
        return None

    config = load_project_config()
    if config is None:
        _error("❌ Failed to load or parse `.component-manager.toml`.")
        return None

    framework = prompter.select("Select framework:", config.framework)
    style = prompter.select("Select style:", config.style)
    destination_dir, destination = destination_for(name, ext, framework, style)
    try:
        destination_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        _error(f"❌ Failed to create destination directory: {exc}")
        return None

    if destination.exists():
        answer = prompter.select("File already exists. Overwrite?", ["Yes", "No"])
        if answer == "No":
            print("❌ Export cancelled.")
            return None

    try:
        shutil.copyfile(source, destination)
    except OSError as exc:
        _error(f"❌ Error exporting component: {exc}")
        return None

    try:
        description = prompter.text(
            "Enter a short description for the component:",
            help_message="This will be shown in the component list",
        )
    except PromptError:
        description = ""

    metadata = build_metadata(
        name=name,
        framework=framework,
        style=style,
        language=config.language[0] if config.language else "",
        description=description,
        author=_current_user(),
    )

    metadata_path = destination_dir / METADATA_FILE
    try:
        metadata_path.write_text(metadata.to_toml(), encoding="utf-8")
    except OSError as exc:
        _error(f"⚠️  Warning: Failed to create component metadata: {exc}")
    else:
        print(f"✅ Created component metadata at: {metadata_path}")

    print(f"✅ Successfully exported component to: {destination}")
    return destination