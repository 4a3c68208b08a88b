from __future__ import annotations

from pathlib import Path

import pytest

from pipeline.settings import DEFAULT_CONFIG_FILENAME, SettingsError, ToolSettings, load_settings


def test_defaults(tmp_path: Path) -> None:
    assert load_settings(cwd=tmp_path, environ={}) == ToolSettings()


def test_implicit_yaml_file(tmp_path: Path) -> None:
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("package_manager: yarnpkg\nproject_name: Probe\n", encoding="utf-8")

    settings = load_settings(cwd=tmp_path, environ={})

    assert settings.package_manager == "yarnpkg"
    assert settings.project_name == "Probe"
    assert settings.npx == "npx"


def test_environment_beats_yaml(tmp_path: Path) -> None:
    config = tmp_path / "custom.yaml"
    config.write_text("npx: /opt/node/bin/npx\npackage_manager: yarnpkg\n", encoding="utf-8")

    settings = load_settings(config, environ={"BUNDLE_SIZE_PACKAGE_MANAGER": "/usr/bin/yarn"})

    assert settings.npx == "/opt/node/bin/npx"
    assert settings.package_manager == "/usr/bin/yarn"


def test_empty_yaml_is_defaults(tmp_path: Path) -> None:
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("", encoding="utf-8")
    assert load_settings(cwd=tmp_path, environ={}) == ToolSettings()


@pytest.mark.parametrize(
    "content, message",
    [
        ("bundler: metro\n", "Unknown settings"),
        ("- npx\n", "must contain a mapping"),
        ("npx: [unclosed\n", "Invalid YAML"),
    ],
)
def test_bad_yaml(tmp_path: Path, content: str, message: str) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text(content, encoding="utf-8")
    with pytest.raises(SettingsError, match=message):
        load_settings(config, environ={})


def test_explicit_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="not found"):
        load_settings(tmp_path / "nope.yaml", environ={})
