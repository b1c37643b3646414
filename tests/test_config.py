from pathlib import Path

from componentmgr.config import (
    DEFAULT_COMPONENTS_DIR,
    SUPPORTED_FRAMEWORKS,
    SUPPORTED_LANGUAGES,
    SUPPORTED_STYLES,
    ProjectConfig,
    get_config,
    load_project_config,
)

SAMPLE = """
framework = ["react"]
style = ["tailwind"]
language = ["typescript"]
components_dir = "components"
"""


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / ".component-manager.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_from_file_reads_fields(tmp_path):
    config = ProjectConfig.load_from_file(write(tmp_path, SAMPLE))
    assert config == ProjectConfig(
        framework=["react"],
        style=["tailwind"],
        language=["typescript"],
        components_dir=Path("components"),
    )


def test_missing_file_gives_none(tmp_path):
    assert ProjectConfig.load_from_file(tmp_path / "absent.toml") is None
    assert load_project_config(tmp_path / "absent.toml") is None


def test_invalid_toml_gives_none(tmp_path):
    assert ProjectConfig.load_from_file(write(tmp_path, "framework = [")) is None


def test_missing_required_field_gives_none(tmp_path):
    text = 'framework = ["react"]\nstyle = ["tailwind"]\n'
    assert ProjectConfig.load_from_file(write(tmp_path, text)) is None


def test_wrong_type_gives_none(tmp_path):
    text = 'framework = "react"\nstyle = ["tailwind"]\nlanguage = ["typescript"]\n'
    assert ProjectConfig.load_from_file(write(tmp_path, text)) is None


def test_components_dir_defaults(tmp_path):
    text = 'framework = ["vue"]\nstyle = ["css"]\nlanguage = ["javascript"]\n'
    config = ProjectConfig.load_from_file(write(tmp_path, text))
    assert config.components_dir == DEFAULT_COMPONENTS_DIR


def test_get_config_falls_back_to_defaults(tmp_path):
    config = get_config(tmp_path / "absent.toml")
    assert config.framework == ["vue"]
    assert config.style == ["css"]
    assert config.language == ["javascript"]
    assert config.components_dir == DEFAULT_COMPONENTS_DIR


def test_get_config_prefers_file(tmp_path):
    config = get_config(write(tmp_path, SAMPLE))
    assert config.framework == ["react"]


def test_to_toml_round_trip(tmp_path):
    original = ProjectConfig(
        framework=list(SUPPORTED_FRAMEWORKS[:2]),
        style=list(SUPPORTED_STYLES[1:3]),
        language=list(SUPPORTED_LANGUAGES[2:3]),
    )
    loaded = ProjectConfig.load_from_file(write(tmp_path, original.to_toml()))
    assert loaded == original


def test_load_project_config_matches_loader(tmp_path):
    path = write(tmp_path, SAMPLE)
    assert load_project_config(path) == ProjectConfig.load_from_file(path)