"""Configuration management for WistiaDL."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir, user_data_dir
from pydantic import ValidationError

from .core.models import AppConfig

logger = logging.getLogger(__name__)

APP_NAME = "wistiadl"
CONFIG_FILE = Path(user_config_dir(APP_NAME)) / "config.json"
DATA_DIR = Path(user_data_dir(APP_NAME))

# Directories that resolve under DATA_DIR when given as relative paths
PATH_FIELDS = ("download_dir", "logs_dir")


def resolve_paths(config: AppConfig) -> AppConfig:
    """Anchor relative directories in the user data directory."""
    relative = {
        name: DATA_DIR / getattr(config, name)
        for name in PATH_FIELDS
        if not getattr(config, name).is_absolute()
    }
    return config.model_copy(update=relative) if relative else config


class ConfigManager:
    """Loads and saves the JSON configuration file.

    A missing, unreadable or invalid file yields the defaults rather than
    an error.
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: Optional[AppConfig] = None

    def load(self) -> AppConfig:
        if self._config is not None:
            return self._config

        config = AppConfig()
        if self.config_path.exists():
            try:
                config = AppConfig(**json.loads(self.config_path.read_text(encoding="utf-8")))
                logger.info(f"Loaded configuration from {self.config_path}")
            except (json.JSONDecodeError, TypeError, ValidationError) as e:
                logger.warning(f"Invalid config file {self.config_path}, using defaults: {e}")

        self._config = resolve_paths(config)
        return self._config

    def save(self, config: Optional[AppConfig] = None) -> None:
        """Write the configuration, logging instead of raising on failure."""
        config = config or self.load()
        self._config = config

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(
                json.dumps(config.model_dump(mode="json"), indent=2), encoding="utf-8"
            )
            logger.info(f"Saved configuration to {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to write config file: {e}")

    def reset(self) -> AppConfig:
        self._config = resolve_paths(AppConfig())
        return self._config


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load configuration (convenience function)."""
    return ConfigManager(config_path).load()
