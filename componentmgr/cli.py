"""Command-line interface for managing frontend components."""

from __future__ import annotations

import sys
from typing import Sequence

import click

from componentmgr.export import export_component
from componentmgr.importer import import_component
from componentmgr.initialize import init_config
from componentmgr.install import InstallError, install_dependencies
from componentmgr.show import show_components

VERSION = "0.1.0"


@click.group(name="Component CLI", help="Manage frontend components")
@click.version_option(VERSION, prog_name="Component CLI")
def cli() -> None:
    """Manage frontend components"""


@cli.command(name="export")
def export_command() -> None:
    """Export a component to the component library"""
    export_component()


@cli.command(name="import")
def import_command() -> None:
    """Import a component from the component library"""
    import_component()


@cli.command(name="init")
def init_command() -> None:
    """Initialize component manager configuration"""
    init_config()


@cli.command(name="show")
@click.option(
    "-a",
    "--all",
    "show_all",
    is_flag=True,
    help="Show all components, regardless of project configuration",
)
def show_command(show_all: bool) -> None:
    """List available components"""
    show_components(show_all)


@cli.command(name="install")
@click.argument("component", required=False)
def install_command(component: str | None) -> None:
    """Install dependencies for components"""
    try:
        install_dependencies(component)
    except InstallError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def main(argv: Sequence[str] | None = None) -> None:
    """Run the command line; always ends by raising SystemExit."""
    cli.main(args=list(argv) if argv is not None else None, prog_name="component-manager")