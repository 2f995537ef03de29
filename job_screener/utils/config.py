"""
Configuration management for Job Screener.
"""

from pathlib import Path
from typing import Optional
import copy
import json
import logging
import os


class Config:
    """Manages matching thresholds, storage paths and logging settings."""

    DEFAULT_CONFIG = {
        "matching": {
            "keyword_threshold": 2,
            "min_shared_words": 2,
            "company_placeholder": "{company}",
        },
        "storage": {
            "answer_bank_path": "./answer_bank.json",
            "profile_path": "./requirement_profile.json",
        },
        "logging": {
            "level": "WARNING",
        },
    }

    LOG_LEVEL_ENV = "JOB_SCREENER_LOG_LEVEL"

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to config file (default: ~/.job_screener/config.json)
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path.home() / ".job_screener" / "config.json"

        self.config = self._load_config()

    def _load_config(self) -> dict:
        """Load configuration from file or fall back to defaults."""
        defaults = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                user_config = json.load(f)

            # Merge with defaults
            return self._deep_merge(defaults, user_config)

        return defaults

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Deep merge two dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def save(self) -> None:
        """Save current configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get(self, key: str, default=None):
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "matching.keyword_threshold")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value) -> None:
        """Set a configuration value using dot notation."""
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def get_log_level(self) -> int:
        """
        Get the logging level.

        The JOB_SCREENER_LOG_LEVEL environment variable takes precedence
        over the config file.
        """
        name = os.environ.get(self.LOG_LEVEL_ENV) or self.get("logging.level", "WARNING")
        level = logging.getLevelName(str(name).upper())
        return level if isinstance(level, int) else logging.WARNING

    def get_answer_bank_path(self) -> str:
        return self.get("storage.answer_bank_path", "./answer_bank.json")

    def get_profile_path(self) -> str:
        return self.get("storage.profile_path", "./requirement_profile.json")

    def get_matching_options(self) -> dict:
        """Keyword arguments for building a classifier and matcher."""
        return {
            "keyword_threshold": int(self.get("matching.keyword_threshold", 2)),
            "min_shared_words": int(self.get("matching.min_shared_words", 2)),
            "placeholder": self.get("matching.company_placeholder", "{company}"),
        }

    def print_config(self) -> None:
        """Print current configuration."""
        print(json.dumps(self.config, indent=2))
