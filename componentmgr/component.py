"""Components stored on disk with an optional metadata file beside them."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import tomli_w


@dataclass
class ComponentMetadata:
    """Optional descriptive fields of a component."""

    description: str | None = None
    version: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ComponentMetadata:
        """Build metadata from parsed TOML, raising ValueError on wrong types."""
        values: dict[str, str | None] = {}
        for key in ("description", "version"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"field `{key}` must be a string")
            values[key] = value
        return cls(**values)

    @classmethod
    def from_toml(cls, text: str) -> ComponentMetadata:
        """Parse metadata from TOML text."""
        return cls.from_mapping(tomllib.loads(text))

    def to_toml(self) -> str:
        """Serialise the fields that are set."""
        data = {
            key: value
            for key, value in (("description", self.description), ("version", self.version))
            if value is not None
        }
        return tomli_w.dumps(data)


def _parse_or_none(text: str) -> ComponentMetadata | None:
    try:
        return ComponentMetadata.from_toml(text)
    except ValueError:
        return None


@dataclass
class Component:
    """A named component living in a directory."""

    name: str
    path: str
    metadata: ComponentMetadata | None = None

    @property
    def metadata_path(self) -> Path:
        return Path(f"{self.path}/{self.name}.metadata.toml")

    def load_metadata(self) -> None:
        """Read the metadata file if it can be read; leave metadata alone otherwise."""
        try:
            content = self.metadata_path.read_text(encoding="utf-8")
        except OSError:
            return
        self.metadata = _parse_or_none(content)

    def save_metadata(self) -> None:
        """Write the metadata file when there is metadata to write."""
        if self.metadata is not None:
            self.metadata_path.write_text(self.metadata.to_toml(), encoding="utf-8")

    @classmethod
    def load_from_path(cls, path: str | os.PathLike[str]) -> Component:
        """Create a component named after the last segment of its path."""
        path = os.fspath(path)
        name = path.split("/")[-1]
        metadata_path = Path(f"{path}/{name}.metadata.toml")
        metadata = None
        if metadata_path.exists():
            try:
                content = metadata_path.read_text(encoding="utf-8")
            except OSError:
                content = ""
            metadata = _parse_or_none(content)
        return cls(name=name, path=path, metadata=metadata)