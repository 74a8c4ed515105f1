"""Tests for configuration discovery, merging and validation."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from simplemenu.config import DEFAULTS, AppConfig, load_config
from simplemenu.errors import ConfigError


class TestDefaults:
    def test_defaults_without_files_or_env(self, tmp_path: Path) -> None:
        cfg = load_config(tmp_path, environ={})
        assert cfg.workspace_path == tmp_path.resolve()
        assert cfg.log_file_path is None
        assert cfg.log_level == "WARNING"
        assert cfg.app_name == "simple-menu"
        assert cfg.colored_prompt and cfg.show_suggestions and cfg.show_banner
        assert cfg.enable_completion
        assert not cfg.show_boot_log
        assert cfg.max_list_items == 50
        assert cfg.history_size == DEFAULTS["HISTORY_SIZE"] == 100
        assert cfg.extra == {}

    def test_config_is_frozen(self, tmp_path: Path) -> None:
        cfg = load_config(tmp_path, environ={})
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.app_name = "other"  # type: ignore[misc]

    @pytest.mark.usefixtures("_isolated_env")
    def test_defaults_to_cwd(self, tmp_path: Path) -> None:
        assert isinstance(load_config(), AppConfig)
        assert load_config().workspace_path == tmp_path.resolve()


class TestFileSources:
    def test_env_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text(
            '# comment\nAPP_NAME="from env file"\n\nLOG_LEVEL = info\nnot a pair\n',
            encoding="utf-8",
        )
        cfg = load_config(tmp_path, environ={})
        assert cfg.app_name == "from env file"
        assert cfg.log_level == "INFO"

    def test_ini_file(self, tmp_path: Path) -> None:
        (tmp_path / "config.ini").write_text("[ui]\nshow_banner = no\nmax_list_items = 7\n")
        cfg = load_config(tmp_path, environ={})
        assert cfg.show_banner is False
        assert cfg.max_list_items == 7

    def test_json_file(self, tmp_path: Path) -> None:
        (tmp_path / "config.json").write_text('{"HISTORY_SIZE": 5, "COLORED_PROMPT": false}')
        cfg = load_config(tmp_path, environ={})
        assert cfg.history_size == 5
        assert cfg.colored_prompt is False

    def test_toml_file_with_unknown_keys(self, tmp_path: Path) -> None:
        (tmp_path / "config.toml").write_text(
            'app_name = "demo"\nshow_boot_log = true\n[theme]\naccent = "green"\n')
        cfg = load_config(tmp_path, environ={})
        assert cfg.app_name == "demo"
        assert cfg.show_boot_log is True
        assert cfg.extra == {"THEME_ACCENT": "green"}

    def test_later_files_win(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("APP_NAME=env\n")
        (tmp_path / "config.toml").write_text('APP_NAME = "toml"\n')
        assert load_config(tmp_path, environ={}).app_name == "toml"

    def test_workspace_and_log_file_paths(self, tmp_path: Path) -> None:
        (tmp_path / "config.toml").write_text(
            'WORKSPACE_PATH = "ws"\nLOG_FILE_PATH = "logs/menu.log"\n')
        cfg = load_config(tmp_path, environ={})
        assert cfg.workspace_path == (tmp_path / "ws").resolve()
        assert cfg.log_file_path == (tmp_path / "ws" / "logs" / "menu.log").resolve()


class TestEnvironment:
    def test_prefixed_variables_override_files(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("LOG_LEVEL=ERROR\n")
        cfg = load_config(tmp_path, environ={"SIMPLE_MENU_LOG_LEVEL": "debug"})
        assert cfg.log_level == "DEBUG"

    def test_unprefixed_variables_are_ignored(self, tmp_path: Path) -> None:
        cfg = load_config(tmp_path, environ={"LOG_LEVEL": "DEBUG", "SIMPLE_MENU_": "x"})
        assert cfg.log_level == "WARNING"
        assert cfg.extra == {}

    def test_process_environment_is_read(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIMPLE_MENU_APP_NAME", "from-process")
        assert load_config(tmp_path).app_name == "from-process"


class TestValidation:
    @pytest.mark.parametrize("key, value, fragment", [
        ("SIMPLE_MENU_COLORED_PROMPT", "maybe", "COLORED_PROMPT"),
        ("SIMPLE_MENU_MAX_LIST_ITEMS", "0", "MAX_LIST_ITEMS"),
        ("SIMPLE_MENU_MAX_LIST_ITEMS", "many", "MAX_LIST_ITEMS"),
        ("SIMPLE_MENU_HISTORY_SIZE", "-1", "HISTORY_SIZE"),
        ("SIMPLE_MENU_LOG_LEVEL", "LOUD", "LOG_LEVEL"),
        ("SIMPLE_MENU_APP_NAME", "   ", "APP_NAME"),
    ])
    def test_invalid_values(self, tmp_path: Path, key: str, value: str, fragment: str) -> None:
        with pytest.raises(ConfigError, match=fragment):
            load_config(tmp_path, environ={key: value})

    def test_boolean_is_not_an_integer(self, tmp_path: Path) -> None:
        (tmp_path / "config.json").write_text('{"MAX_LIST_ITEMS": true}')
        with pytest.raises(ConfigError):
            load_config(tmp_path, environ={})

    def test_malformed_toml(self, tmp_path: Path) -> None:
        (tmp_path / "config.toml").write_text("this is = = not toml")
        with pytest.raises(ConfigError, match="config.toml"):
            load_config(tmp_path, environ={})

    def test_json_must_be_an_object(self, tmp_path: Path) -> None:
        (tmp_path / "config.json").write_text("[1, 2]")
        with pytest.raises(ConfigError):
            load_config(tmp_path, environ={})

    def test_config_error_is_a_value_error(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            load_config(tmp_path, environ={"SIMPLE_MENU_HISTORY_SIZE": "x"})
