"""Creation of the project configuration file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from componentmgr.config import (
    CONFIG_FILE,
    DEFAULT_COMPONENTS_DIR,
    SUPPORTED_FRAMEWORKS,
    SUPPORTED_LANGUAGES,
    SUPPORTED_STYLES,
    ProjectConfig,
)
from componentmgr.prompts import PromptError, Prompter


def prompt_with_validation(prompter: Prompter, prompt_text: str, options: Sequence[str]) -> list[str]:
    """Ask until at least one option is chosen; exit with status 1 if prompting fails."""
    while True:
        try:
            selection = prompter.multi_select(prompt_text, options)
        except PromptError as exc:
            print(f"❌ Prompt failed: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
        if selection:
            return selection
        print("❌ You must select at least one option. Please try again.")


def init_config(prompter: Prompter | None = None) -> ProjectConfig:
    """Ask for frameworks, styles and languages and write the configuration file."""
    prompter = prompter if prompter is not None else Prompter()
    config = ProjectConfig(
        framework=prompt_with_validation(prompter, "Select a framework:", SUPPORTED_FRAMEWORKS),
        style=prompt_with_validation(prompter, "Select a styling library:", SUPPORTED_STYLES),
        language=prompt_with_validation(prompter, "Select a language:", SUPPORTED_LANGUAGES),
        components_dir=DEFAULT_COMPONENTS_DIR,
    )
    try:
        Path(CONFIG_FILE).write_text(config.to_toml(), encoding="utf-8")
    except OSError as exc:
        print(f"❌ Failed to write config: {exc}", file=sys.stderr)
    else:
        print("✅ Created `.component-manager.toml` in current directory.")
    return config