"""SortySettings: which sort commands are available, persisted as JSON."""

import json
import os
from typing import Dict

from sorty.commands.registry import SORT_COMMANDS, get_command


DEFAULT_SETTINGS_FILE = os.path.join("~", ".config", "sorty", "settings.json")


def default_commands_enabled() -> Dict[str, bool]:
    return {command.id: command.enabled_by_default for command in SORT_COMMANDS}


class SortySettings:
    """Owns load/save of the per-command enabled flags."""

    def __init__(self, settings_file: str, commands_enabled: Dict[str, bool]):
        self._settings_file = settings_file
        self._commands_enabled = commands_enabled

    @classmethod
    def load(cls, settings_file: str) -> "SortySettings":
        """Load settings, with defaults for a missing file or missing keys."""
        commands_enabled = default_commands_enabled()
        if os.path.isfile(settings_file):
            with open(settings_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            commands_enabled.update(data.get("commands_enabled", {}))
        return cls(settings_file, commands_enabled)

    def save(self) -> None:
        os.makedirs(os.path.dirname(os.path.abspath(self._settings_file)), exist_ok=True)
        with open(self._settings_file, "w", encoding="utf-8") as f:
            json.dump({"commands_enabled": self._commands_enabled}, f, indent=2)

    @property
    def commands_enabled(self) -> Dict[str, bool]:
        return dict(self._commands_enabled)

    def is_enabled(self, command_id: str) -> bool:
        command = get_command(command_id)
        return self._commands_enabled.get(command.id, command.enabled_by_default)

    def set_enabled(self, command_id: str, enabled: bool) -> None:
        command = get_command(command_id)
        self._commands_enabled[command.id] = enabled
