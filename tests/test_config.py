import subprocess
import tomllib
from unittest import mock

import pytest

from sonyhpclient.config import AppConfig


def test_defaults():
    config = AppConfig("unused.toml")
    assert config.show_disclaimers is True
    assert config.auto_connect_device_mac == ""
    assert config.headphone_interaction_shell_commands == []
    assert config.imgui_font_size == -1.0


def test_missing_file_keeps_values(tmp_path):
    config = AppConfig(tmp_path / "absent.toml")
    config.show_disclaimers = False
    config.load_settings()
    assert config.show_disclaimers is False


def test_round_trip(tmp_path):
    path = tmp_path / "cfg.toml"
    config = AppConfig(path)
    config.show_disclaimers = False
    config.auto_connect_device_mac = "00:00:5E:00:53:01"
    config.imgui_font_file = "font.ttf"
    config.imgui_font_size = 18.5
    config.headphone_interaction_shell_commands = [("key-a", "echo a"), ("key-b", "echo b")]
    config.save_settings()

    loaded = AppConfig(path)
    loaded.load_settings()
    assert loaded.show_disclaimers is False
    assert loaded.auto_connect_device_mac == "00:00:5E:00:53:01"
    assert loaded.imgui_font_file == "font.ttf"
    assert loaded.imgui_font_size == 18.5
    assert loaded.headphone_interaction_shell_commands == [
        ("key-a", "echo a"),
        ("key-b", "echo b"),
    ]


def test_saved_file_uses_source_keys(tmp_path):
    path = tmp_path / "cfg.toml"
    config = AppConfig(path)
    config.headphone_interaction_shell_commands = [("tap", "ls")]
    config.save_settings()
    table = tomllib.loads(path.read_text(encoding="utf-8"))
    assert table["showDisclaimers"] is True
    assert table["shellCommands"] == {"tap": "ls"}
    assert table["autoConnectDeviceMac"] == ""


def test_duplicate_event_first_wins(tmp_path):
    path = tmp_path / "cfg.toml"
    config = AppConfig(path)
    config.headphone_interaction_shell_commands = [("tap", "first"), ("tap", "second")]
    config.save_settings()
    loaded = AppConfig(path)
    loaded.load_settings()
    assert loaded.headphone_interaction_shell_commands == [("tap", "first")]


def test_load_wrong_types_use_defaults(tmp_path):
    path = tmp_path / "cfg.toml"
    path.write_text(
        'showDisclaimers = "no"\nimguiFontSize = 12\nimguiFontFile = 3\n'
        "[shellCommands]\nx = 5\n",
        encoding="utf-8",
    )
    config = AppConfig(path)
    config.load_settings()
    assert config.show_disclaimers is True
    assert config.imgui_font_size == 12.0
    assert config.imgui_font_file == ""
    assert config.headphone_interaction_shell_commands == [("x", "")]


def test_load_without_shell_commands_keeps_list(tmp_path):
    path = tmp_path / "cfg.toml"
    path.write_text("showDisclaimers = false\n", encoding="utf-8")
    config = AppConfig(path)
    config.headphone_interaction_shell_commands = [("tap", "ls")]
    config.load_settings()
    assert config.headphone_interaction_shell_commands == [("tap", "ls")]
    assert config.imgui_font_size == -1.0


def test_invalid_toml_raises(tmp_path):
    path = tmp_path / "cfg.toml"
    path.write_text("this is = = not toml", encoding="utf-8")
    with pytest.raises(tomllib.TOMLDecodeError):
        AppConfig(path).load_settings()


def test_save_to_directory_does_not_raise(tmp_path):
    config = AppConfig(tmp_path)
    config.save_settings()
    assert tmp_path.is_dir()


def test_find_shell_command():
    config = AppConfig("unused.toml")
    config.headphone_interaction_shell_commands = [("a", "one"), ("b", "two"), ("a", "three")]
    assert config.find_shell_command("a") == "one"
    assert config.find_shell_command("b") == "two"
    assert config.find_shell_command("c") is None


def test_run_shell_command_unbound_returns_none():
    config = AppConfig("unused.toml")
    assert config.run_shell_command("nothing") is None


def test_run_shell_command_runs_bound_command():
    config = AppConfig("unused.toml")
    config.headphone_interaction_shell_commands = [("tap", "echo hi")]
    done = subprocess.CompletedProcess("echo hi", 0)
    with mock.patch("sonyhpclient.config.subprocess.run", return_value=done) as run:
        result = config.run_shell_command("tap")
    assert result is done
    run.assert_called_once_with("echo hi", shell=True, check=False)