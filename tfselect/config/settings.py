"""
Settings management for tfselect.

Handles loading and accessing application configuration.
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from .defaults import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

APP_NAME = "tfselect"
LOG_LEVEL_ENV = "TFSELECT_LOG_LEVEL"


class Settings:
    """
    Application settings manager.

    Settings are optional and stored as JSON. A missing or unreadable
    file falls back to the defaults.

    Path:
        Linux/macOS: ~/.config/tfselect/settings.json
        Windows: %APPDATA%\\tfselect\\settings.json
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            config_dir: Override for the configuration directory
        """
        self.config_dir = Path(config_dir) if config_dir else self._get_config_dir()
        self.config_file = self.config_dir / "settings.json"
        self._settings: Dict[str, Any] = {}
        self.load()

    @staticmethod
    def _get_config_dir() -> Path:
        """
        Get platform-specific configuration directory.

        Returns:
            Path to configuration directory
        """
        if os.name == 'nt':  # Windows
            base = os.environ.get('APPDATA', os.path.expanduser('~'))
        else:  # Linux/macOS
            base = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(base) / APP_NAME

    def load(self):
        """
        Load settings from file.

        If file doesn't exist or is invalid, uses default settings.
        """
        self._settings = copy.deepcopy(DEFAULT_SETTINGS)

        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    loaded_settings = json.load(f)

                if isinstance(loaded_settings, dict):
                    self._deep_update(self._settings, loaded_settings)
                    logger.debug(f"Loaded settings from {self.config_file}")
                else:
                    logger.error(f"Ignoring settings in {self.config_file}: not a JSON object")

            except (json.JSONDecodeError, IOError) as e:
                logger.error(f"Failed to load settings: {e}, using defaults")
                self._settings = copy.deepcopy(DEFAULT_SETTINGS)

        env_level = os.environ.get(LOG_LEVEL_ENV)
        if env_level:
            self._settings["log_level"] = env_level

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get setting value.

        Supports nested keys with dot notation.

        Args:
            key: Setting key (use dots for nested values)
            default: Default value if key not found

        Returns:
            Setting value or default
        """
        value = self._settings

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @property
    def terraform_binary(self) -> str:
        return self.get("terraform_binary", "terraform")

    @property
    def check_module_dir(self) -> bool:
        return bool(self.get("check_module_dir", False))

    @property
    def reserved_environment_dirs(self) -> tuple:
        return tuple(self.get("reserved_environment_dirs", []))

    @staticmethod
    def _deep_update(base: dict, updates: dict):
        """
        Recursively update base dict with values from updates dict.

        Args:
            base: Dictionary to update
            updates: Dictionary with new values
        """
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                Settings._deep_update(base[key], value)
            else:
                base[key] = value
