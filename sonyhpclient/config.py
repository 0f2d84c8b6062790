"""Persistent application settings stored as TOML."""

from __future__ import annotations

import logging
import os
import subprocess
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

from .constants import APP_CONFIG_NAME

_log = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 15.0


@dataclass
class AppConfig:
    """User settings, loaded from and saved to a TOML file at ``path``."""

    path: str | os.PathLike = APP_CONFIG_NAME
    show_disclaimers: bool = True
    auto_connect_device_mac: str = ""
    headphone_interaction_shell_commands: list[tuple[str, str]] = field(default_factory=list)
    imgui_settings: str = ""
    imgui_font_file: str = ""
    imgui_font_size: float = -1.0

    def load_settings(self) -> None:
        """Read settings from the file; a missing or unreadable file is only logged."""
        try:
            with open(self.path, "rb") as fh:
                table = tomllib.load(fh)
        except OSError:
            _log.warning("cannot open config file for reading: %s", self.path)
            return

        self.show_disclaimers = _typed(table, "showDisclaimers", bool, True)
        self.imgui_settings = _typed(table, "imguiSettings", str, "")
        self.auto_connect_device_mac = _typed(table, "autoConnectDeviceMac", str, "")
        self.imgui_font_file = _typed(table, "imguiFontFile", str, "")
        size = table.get("imguiFontSize")
        if isinstance(size, (int, float)) and not isinstance(size, bool):
            self.imgui_font_size = float(size)
        else:
            self.imgui_font_size = -1.0

        commands = table.get("shellCommands")
        if isinstance(commands, dict):
            self.headphone_interaction_shell_commands = [
                (str(event), cmd if isinstance(cmd, str) else "")
                for event, cmd in commands.items()
            ]

    def save_settings(self) -> None:
        """Write settings to the file; failure to open it is only logged."""
        commands: dict[str, str] = {}
        for event, cmd in self.headphone_interaction_shell_commands:
            # The first binding of an event wins.
            commands.setdefault(event, cmd)
        table = {
            "showDisclaimers": self.show_disclaimers,
            "imguiSettings": self.imgui_settings,
            "imguiFontSize": float(self.imgui_font_size),
            "imguiFontFile": self.imgui_font_file,
            "autoConnectDeviceMac": self.auto_connect_device_mac,
            "shellCommands": commands,
        }
        data = tomli_w.dumps(table)
        try:
            Path(self.path).write_text(data, encoding="utf-8")
        except OSError:
            _log.warning("cannot open config file for writing: %s", self.path)

    def find_shell_command(self, event: str) -> str | None:
        """Return the shell command bound to ``event``, if any."""
        return next(
            (cmd for name, cmd in self.headphone_interaction_shell_commands if name == event),
            None,
        )

    def run_shell_command(self, event: str) -> subprocess.CompletedProcess | None:
        """Run the shell command bound to ``event``; returns None if there is none."""
        cmd = self.find_shell_command(event)
        if cmd is None:
            return None
        return subprocess.run(cmd, shell=True, check=False)


def _typed(table: dict, key: str, kind: type, default):
    value = table.get(key)
    return value if isinstance(value, kind) else default