"""Gathering component dependencies and the commands that install them."""

from __future__ import annotations

import os
from pathlib import Path

import click

from componentmgr.config import get_config
from componentmgr.dependencies import ComponentDependencies
from componentmgr.export import METADATA_FILE, ExportMetadata


class InstallError(Exception):
    """Raised when a component's dependencies cannot be found or read."""


def load_component_dependencies(component_path: str | Path) -> ComponentDependencies:
    """Read the dependencies listed in a component's metadata file."""
    component_path = Path(component_path)
    config_path = component_path / METADATA_FILE
    if not config_path.exists():
        raise InstallError(f'No {METADATA_FILE} found in "{component_path}"')
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InstallError(f"Failed to read {METADATA_FILE}: {exc}") from exc
    try:
        metadata = ExportMetadata.from_toml(content)
    except ValueError as exc:
        raise InstallError(f"Failed to parse {METADATA_FILE}: {exc}") from exc
    return metadata.dependencies


def install_dependencies_for(deps: ComponentDependencies, base_path: str | Path) -> list[str]:
    """Show the commands that would install the dependencies and return them."""
    commands = deps.generate_install_commands(base_path)
    info = click.style("ℹ", fg="blue", bold=True)
    if not commands:
        click.echo(f"{click.style('✓', fg='green', bold=True)} No dependencies to install")
        return commands
    click.echo(f"{info} The following commands will be executed:")
    for command in commands:
        click.echo(f"  {command}")
    click.echo(f"\n{info} Run the above commands to install dependencies")
    return commands


def install_dependencies(component_name: str | None = None) -> list[str]:
    """Show install commands for one component, or for every component in the library."""
    config = get_config()
    components_dir = Path(config.components_dir)

    if component_name is not None:
        component_path = components_dir / component_name
        if not component_path.exists():
            raise InstallError(f"Component '{component_name}' not found")
        deps = load_component_dependencies(component_path)
        return install_dependencies_for(deps, components_dir)

    all_deps = ComponentDependencies()
    try:
        entries = sorted(os.scandir(components_dir), key=lambda e: e.name)
    except OSError:
        entries = []
    for entry in entries:
        if not entry.is_dir(follow_symlinks=False):
            continue
        try:
            deps = load_component_dependencies(entry.path)
        except InstallError:
            continue
        all_deps.dependencies.update(deps.dependencies)
    return install_dependencies_for(all_deps, components_dir)