"""Dependencies declared by components and how to install them."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterator, Mapping

from componentmgr.config import SUPPORTED_EXTENSIONS


class DependencyKind(Enum):
    """Where a dependency comes from."""

    NPM = "Npm"
    INTERNAL = "Internal"


_KIND_ORDER = {DependencyKind.NPM: 0, DependencyKind.INTERNAL: 1}


@functools.total_ordering
@dataclass(frozen=True)
class Dependency:
    """A single dependency: an npm package spec or a path to another component."""

    kind: DependencyKind
    value: str

    @classmethod
    def npm(cls, package: str) -> Dependency:
        return cls(DependencyKind.NPM, package)

    @classmethod
    def internal(cls, path: str) -> Dependency:
        return cls(DependencyKind.INTERNAL, path)

    def _key(self) -> tuple[int, str]:
        return (_KIND_ORDER[self.kind], self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Dependency):
            return NotImplemented
        return self._key() < other._key()

    def to_toml_value(self) -> dict[str, str]:
        return {self.kind.value: self.value}

    @classmethod
    def from_toml_value(cls, value: Any) -> Dependency:
        if not isinstance(value, Mapping) or len(value) != 1:
            raise ValueError("a dependency must be a table with exactly one key")
        ((tag, payload),) = value.items()
        try:
            kind = DependencyKind(tag)
        except ValueError:
            raise ValueError(f"unknown dependency kind `{tag}`") from None
        if not isinstance(payload, str):
            raise ValueError(f"dependency `{tag}` must hold a string")
        return cls(kind, payload)


_IMPORT_RE = re.compile(
    r"""(?:\bfrom\s+|\bimport\s+|\brequire\s*\(\s*|\bimport\s*\(\s*)(['"])([^'"\n]+)\1"""
)


def _dependency_for(specifier: str) -> Dependency | None:
    if specifier.startswith((".", "/")):
        return Dependency.internal(specifier)
    if specifier.startswith("node:"):
        return None
    parts = specifier.split("/")
    name = "/".join(parts[:2]) if specifier.startswith("@") else parts[0]
    return Dependency.npm(name) if name else None


@dataclass
class ComponentDependencies:
    """An ordered, duplicate-free set of dependencies."""

    dependencies: set[Dependency] = field(default_factory=set)

    def __iter__(self) -> Iterator[Dependency]:
        return iter(sorted(self.dependencies))

    def __len__(self) -> int:
        return len(self.dependencies)

    def add_dependency(self, dep: Dependency) -> None:
        """Add a dependency; adding one twice has no effect."""
        self.dependencies.add(dep)

    def detect_from_component(self, component_path: str | Path) -> None:
        """Add dependencies found in the import statements of a component's files."""
        root = Path(component_path)
        if root.is_file():
            files = [root]
        elif root.is_dir():
            files = sorted(
                p for p in root.rglob("*")
                if p.is_file() and p.suffix.lstrip(".").lower() in SUPPORTED_EXTENSIONS
            )
        else:
            raise FileNotFoundError(f"component path not found: {root}")
        for file in files:
            text = file.read_text(encoding="utf-8", errors="replace")
            for match in _IMPORT_RE.finditer(text):
                dep = _dependency_for(match.group(2))
                if dep is not None:
                    self.add_dependency(dep)

    def check_conflicts(self, other: ComponentDependencies) -> list[tuple[Dependency, Dependency]]:
        """Pair npm packages of the same name whose version specs differ."""
        own = {
            dep.value.split("@")[0]: dep.value
            for dep in self
            if dep.kind is DependencyKind.NPM
        }
        conflicts = []
        for dep in other:
            if dep.kind is not DependencyKind.NPM:
                continue
            own_spec = own.get(dep.value.split("@")[0])
            if own_spec is not None and own_spec != dep.value:
                conflicts.append((Dependency.npm(own_spec), dep))
        return conflicts

    def generate_install_commands(self, base_path: str | Path) -> list[str]:
        """Shell commands that would install these dependencies."""
        npm_packages = [d.value for d in self if d.kind is DependencyKind.NPM]
        commands = [
            f"# Internal component: {d.value}"
            for d in self
            if d.kind is DependencyKind.INTERNAL
        ]
        if npm_packages:
            commands.insert(0, f"npm install --save {' '.join(npm_packages)}")
        return commands

    def to_toml_value(self) -> dict[str, list[dict[str, str]]]:
        return {"dependencies": [dep.to_toml_value() for dep in self]}

    @classmethod
    def from_toml_value(cls, value: Any) -> ComponentDependencies:
        if not isinstance(value, Mapping) or "dependencies" not in value:
            raise ValueError("missing field `dependencies`")
        items = value["dependencies"]
        if not isinstance(items, list):
            raise ValueError("field `dependencies` must be an array")
        return cls({Dependency.from_toml_value(item) for item in items})