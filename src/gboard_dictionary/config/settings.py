"""Configuration manager: load/save YAML config with defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from gboard_dictionary.utils.constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_ENCODING,
    DICTIONARY_PATH_ENV,
    USER_DATA_DIR,
)
from gboard_dictionary.utils.exceptions import ConfigurationError
from gboard_dictionary.utils.logging_config import get_logger

logger = get_logger("config.settings")


@dataclass
class StorageConfig:
    default_path: str = ""
    encoding: str = DEFAULT_ENCODING
    atomic_writes: bool = True


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppSettings:
    """Top-level application settings."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class SettingsManager:
    """Singleton configuration manager.

    Loads settings from YAML files, merging with defaults.
    Persists user overrides to ``~/.gboard_dictionary/config.yaml``.
    """

    _instance: SettingsManager | None = None

    def __new__(cls, *args: Any, **kwargs: Any) -> SettingsManager:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, user_config_path: Path | None = None) -> None:
        if hasattr(self, "_initialized") and self._initialized:
            return
        self._settings = AppSettings()
        self._user_config_path = user_config_path or (USER_DATA_DIR / "config.yaml")
        self._initialized = True

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def user_config_path(self) -> Path:
        return self._user_config_path

    def load(self) -> AppSettings:
        """Load settings from default config, then overlay user config.

        ``GBOARD_DICTIONARY_PATH`` in the environment wins over both files
        for the default dictionary path.

        Returns:
            Merged :class:`AppSettings`.
        """
        self._settings = AppSettings()

        if DEFAULT_CONFIG_PATH.exists():
            self._merge_from_yaml(DEFAULT_CONFIG_PATH)

        if self._user_config_path.exists():
            self._merge_from_yaml(self._user_config_path)

        env_path = os.environ.get(DICTIONARY_PATH_ENV)
        if env_path:
            self._settings.storage.default_path = env_path

        logger.info(
            "Settings loaded (default_path=%s, atomic_writes=%s)",
            self._settings.storage.default_path or "-",
            self._settings.storage.atomic_writes,
        )
        return self._settings

    def save(self) -> None:
        """Persist current settings to user config file."""
        try:
            self._user_config_path.parent.mkdir(parents=True, exist_ok=True)
            data = self._to_dict()
            with open(self._user_config_path, "w", encoding="utf-8") as fh:
                yaml.dump(data, fh, default_flow_style=False, sort_keys=False)
            logger.info("Settings saved to %s", self._user_config_path)
        except OSError as exc:
            raise ConfigurationError(f"Failed to save settings: {exc}") from exc

    def _merge_from_yaml(self, path: Path) -> None:
        """Merge settings from a YAML file into current settings."""
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Could not load config from %s: %s", path, exc)
            return

        if not isinstance(data, dict):
            return

        # Storage
        if "storage" in data:
            s = data["storage"]
            if isinstance(s, dict):
                self._settings.storage.default_path = str(
                    s.get("default_path", self._settings.storage.default_path) or ""
                )
                self._settings.storage.encoding = s.get(
                    "encoding", self._settings.storage.encoding
                )
                self._settings.storage.atomic_writes = bool(
                    s.get("atomic_writes", self._settings.storage.atomic_writes)
                )

        # Logging
        if "logging" in data:
            lg = data["logging"]
            if isinstance(lg, dict):
                self._settings.logging.level = str(
                    lg.get("level", self._settings.logging.level)
                )

    def _to_dict(self) -> dict[str, Any]:
        s = self._settings
        return {
            "storage": {
                "default_path": s.storage.default_path,
                "encoding": s.storage.encoding,
                "atomic_writes": s.storage.atomic_writes,
            },
            "logging": {"level": s.logging.level},
        }
