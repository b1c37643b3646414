import io
import sys

import pytest

from componentmgr.cli import main
from componentmgr.config import ProjectConfig
from componentmgr.export import ExportMetadata

PROJECT_TOML = """
framework = ["react"]
style = ["tailwind"]
language = ["typescript"]
components_dir = "components"
"""

BUTTON_TOML = """
name = "Button"
version = "0.1.0"
framework = "react"
style = "tailwind"
language = "typescript"
description = "A test button component"
author = "Test User"
created_at = "2025-05-27T00:00:00Z"
updated_at = "2025-05-27T00:00:00Z"
tags = ["button", "ui", "test"]
"""

BUTTON_SOURCE = "import React from 'react';\n\nexport const Button = () => <button>Test</button>;\n"


@pytest.fixture
def project(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".component-manager.toml").write_text(PROJECT_TOML, encoding="utf-8")
    return tmp_path


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_show_lists_component(project, capsys):
    component_dir = project / "components" / "react" / "tailwind" / "Button"
    component_dir.mkdir(parents=True)
    (component_dir / "component.toml").write_text(BUTTON_TOML, encoding="utf-8")

    assert _run(["show"]) == 0
    captured = capsys.readouterr()
    assert "Available components" in captured.out
    assert "Button" in captured.out
    assert "react/tailwind/Button" in captured.out
    assert captured.err == ""


def test_show_all_flag(project, capsys):
    component_dir = project / "components" / "react" / "tailwind" / "Button"
    component_dir.mkdir(parents=True)
    (component_dir / "component.toml").write_text(BUTTON_TOML, encoding="utf-8")

    assert _run(["show", "--all"]) == 0
    out = capsys.readouterr().out
    assert "All available components in components:" in out
    assert "    • Button" in out


def test_install_missing_component_fails(project, capsys):
    (project / "components").mkdir()
    assert _run(["install", "Nope"]) == 1
    assert "Error: Component 'Nope' not found" in capsys.readouterr().err


def test_install_without_components(project, capsys):
    (project / "components").mkdir()
    assert _run(["install"]) == 0
    assert "No dependencies to install" in capsys.readouterr().out


def test_version(capsys):
    assert _run(["--version"]) == 0
    assert "0.1.0" in capsys.readouterr().out


def test_unknown_command_is_usage_error(capsys):
    assert _run(["frobnicate"]) == 2


def test_init_writes_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("react\ntailwind\ntypescript\n"))
    assert _run(["init"]) == 0
    config = ProjectConfig.load_from_file(tmp_path / ".component-manager.toml")
    assert config.framework == ["react"]
    assert config.style == ["tailwind"]
    assert config.language == ["typescript"]


def test_export_copies_component(project, monkeypatch):
    source_dir = project / "source"
    source_dir.mkdir()
    (source_dir / "Button.tsx").write_text(BUTTON_SOURCE, encoding="utf-8")
    answers = "Button\nsource/Button.tsx\nreact\ntailwind\nA button\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(answers))

    assert _run(["export"]) == 0
    target = project / "components" / "react" / "tailwind" / "Button"
    assert (target / "Button.tsx").read_text(encoding="utf-8") == BUTTON_SOURCE
    metadata = ExportMetadata.from_toml((target / "component.toml").read_text(encoding="utf-8"))
    assert metadata.name == "Button"
    assert metadata.framework == "react"
    assert metadata.description == "A button"


def test_import_copies_component(project, monkeypatch):
    style_dir = project / "components" / "react" / "tailwind"
    style_dir.mkdir(parents=True)
    (style_dir / "Button.tsx").write_text(BUTTON_SOURCE, encoding="utf-8")
    (project / "target").mkdir()
    monkeypatch.setattr(sys, "stdin", io.StringIO("Button.tsx\ntarget\n"))

    assert _run(["import"]) == 0
    assert (project / "target" / "Button.tsx").read_text(encoding="utf-8") == BUTTON_SOURCE


def test_import_without_config(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert _run(["import"]) == 0
    assert "Could not load `.component-manager.toml`" in capsys.readouterr().err