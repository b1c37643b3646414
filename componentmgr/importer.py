"""Importing a component from the library into a project."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path

from componentmgr.config import ProjectConfig, load_project_config
from componentmgr.export import LIBRARY_DIR
from componentmgr.prompts import PromptError, Prompter


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def extract_framework_and_style(path: str | Path) -> tuple[str, str] | None:
    """The framework and style of a file stored as components/<framework>/<style>/..."""
    parts = Path(path).parts
    if not parts or parts[0] != LIBRARY_DIR.name:
        return None
    if len(parts) >= 4:
        return parts[1], parts[2]
    return None


def find_importable(config: ProjectConfig, root: str | Path = LIBRARY_DIR) -> list[Path]:
    """Files in the library whose framework and style the project uses."""
    root = Path(root)
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath, filename)
            if not path.is_file():
                continue
            layout = extract_framework_and_style(LIBRARY_DIR / path.relative_to(root))
            if layout is None:
                continue
            framework, style = layout
            if framework in config.framework and style in config.style:
                found.append(path)
    return found


def import_component(prompter: Prompter | None = None) -> Path | None:
    """Copy a chosen library component into a project directory; return where it went."""
    if prompter is None:
        prompter = Prompter()
    config = load_project_config()
    if config is None:
        _error("❌ Could not load `.component-manager.toml`. Make sure you run init first.")
        return None

    paths = find_importable(config)
    if not paths:
        print("No components matching your project config.")
        return None

    selected = prompter.select("Select a component to import:", [p.name for p in paths])
    source = next(p for p in paths if p.name == selected)

    target_dir = prompter.text("Target project directory:")
    destination = Path(target_dir) / source.name

    if destination.exists():
        try:
            overwrite = prompter.confirm(
                f'File "{destination.name}" already exists. Overwrite?', default=False
            )
        except PromptError:
            _error("Prompt failed, aborting.")
            return None
        if not overwrite:
            print("Import cancelled.")
            return None

    try:
        shutil.copyfile(source, destination)
    except OSError as exc:
        _error(f"❌ Error importing component: {exc}")
        return None
    print(f'✅ Imported to "{destination}"')
    return destination