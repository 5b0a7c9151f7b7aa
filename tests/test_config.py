from pathlib import Path

import pytest

from guidmanifest.utils.config import AppConfig, RunSettings, deep_merge


def test_deep_merge_overrides_nested():
    merged = deep_merge({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1}


def test_app_config_merges_files_in_order(tmp_path: Path):
    base = tmp_path / "base.yaml"
    base.write_text("display_name: Base\nnon_sorted: false\n", encoding="utf-8")
    local = tmp_path / "local.yaml"
    local.write_text("display_name: Local\n", encoding="utf-8")
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")

    cfg = AppConfig.from_files(base, local, empty)
    assert cfg.raw == {"display_name": "Local", "non_sorted": False}


def test_run_settings_overrides_and_defaults():
    settings = RunSettings.resolve(
        {"display_name": "Cfg", "installed_base_directory": "assets", "output_file": "out.txt", "extension": "info"},
        {"display_name": "Cli", "non_sorted": None, "log_level": "debug"},
    )
    assert settings.display_name == "Cli"
    assert settings.installed_base_directory == Path("assets")
    assert settings.non_sorted is False
    assert settings.url is None
    assert settings.extension == ".info"
    assert settings.log_level == "DEBUG"


def test_run_settings_requires_paths():
    with pytest.raises(ValueError, match="output_file"):
        RunSettings.resolve({"display_name": "X", "installed_base_directory": "a"}, {})


def test_run_settings_rejects_unknown_log_level():
    with pytest.raises(ValueError):
        RunSettings.resolve(
            {"display_name": "X", "installed_base_directory": "a", "output_file": "o", "log_level": "chatty"}, {}
        )


def test_run_settings_rejects_string_flag():
    with pytest.raises(ValueError, match="non_sorted"):
        RunSettings.resolve(
            {"display_name": "X", "installed_base_directory": "a", "output_file": "o", "non_sorted": "false"}, {}
        )


def test_run_settings_override_can_clear_flag():
    settings = RunSettings.resolve(
        {"display_name": "X", "installed_base_directory": "a", "output_file": "o", "non_sorted": True},
        {"non_sorted": False},
    )
    assert settings.non_sorted is False
