"""
Project Settings - Configuration Manager

Two-layer config:
- System: ui_guidelines/conf/settings.yaml (packaged defaults)
- User:   $PRJ_CONFIG_HOME/ui-guidelines/settings.yaml (overrides)
- CLI flag `--conf DIR` sets PRJ_CONFIG_HOME for a run.

get_setting() returns merged effective values. User layer overrides system layer.
"""

from __future__ import annotations

import os
import sys
import threading
from pathlib import Path
from typing import Any

import yaml

APP_DIR_NAME = "ui-guidelines"
SETTINGS_FILE = "settings.yaml"

DEFAULTS_PATH = Path(__file__).resolve().parent.parent.parent / "conf" / SETTINGS_FILE


def config_home() -> Path:
    """Resolve PRJ_CONFIG_HOME (defaults to ./.config)."""
    return Path(os.environ.get("PRJ_CONFIG_HOME", ".config"))


class Settings:
    """
    Unified Settings Manager.

    Logic:
    1. Parse `--conf` flag -> updates PRJ_CONFIG_HOME.
    2. Load packaged defaults.
    3. Load user overrides from `$PRJ_CONFIG_HOME/ui-guidelines/settings.yaml`.
    4. Merge User > Defaults.
    """

    _instance: Settings | None = None
    _instance_lock = threading.Lock()
    _loaded: bool = False

    def __new__(cls) -> Settings:
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        # __init__ runs on every Settings() call; keep loaded data
        if not hasattr(self, "_data"):
            self._data: dict[str, Any] = {}

    def _ensure_loaded(self) -> None:
        """Ensure settings are loaded (Thread-Safe)."""
        if not self._loaded:
            with self._instance_lock:
                if not self._loaded:
                    self._load()
                    self._loaded = True

    def _parse_cli_conf(self) -> str | None:
        """
        Extract --conf argument from sys.argv manually.
        Done here so typer never has to know about it.
        """
        args = sys.argv
        for i, arg in enumerate(args):
            if arg == "--conf" and i + 1 < len(args):
                return args[i + 1]
            if arg.startswith("--conf="):
                return arg.split("=", 1)[1]
        return None

    def _load(self) -> None:
        """Execute the two-layer loading strategy."""
        cli_conf_dir = self._parse_cli_conf()
        if cli_conf_dir:
            os.environ["PRJ_CONFIG_HOME"] = cli_conf_dir

        defaults = self._read_yaml(DEFAULTS_PATH)

        user_config: dict[str, Any] = {}
        user_settings_path = self.user_settings_path
        if user_settings_path.exists():
            user_config = self._read_yaml(user_settings_path)

        self._data = self._deep_merge(defaults, user_config)

    def _read_yaml(self, path: os.PathLike) -> dict[str, Any]:
        """Read a YAML mapping; a missing or empty file yields {}."""
        p = Path(path)
        if not p.exists():
            return {}
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file must contain a mapping: {p}")
        return data

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """
        Recursive deep merge of two dictionaries.
        Override values replace base values.
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value using dot notation (e.g., 'docs.url')."""
        self._ensure_loaded()
        value: Any = self._data
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def reload(self) -> None:
        """Force reload settings."""
        with self._instance_lock:
            self._loaded = False
            self._load()
            self._loaded = True

    def get_section(self, section: str) -> dict[str, Any]:
        """Get an entire settings section."""
        self._ensure_loaded()
        return self._data.get(section, {})

    @property
    def user_settings_path(self) -> Path:
        """Path of the user override file for the active config home."""
        return config_home() / APP_DIR_NAME / SETTINGS_FILE


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value directly."""
    return Settings().get(key, default)


def get_settings() -> Settings:
    """Get the Settings singleton."""
    return Settings()


__all__ = [
    "Settings",
    "get_setting",
    "get_settings",
]
