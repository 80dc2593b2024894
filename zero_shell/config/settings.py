"""
Configuration settings for the shell.
"""

import logging
import os

from dotenv import load_dotenv

from zero_shell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_BANNER = "0-Shell v0.1.0 - Minimalist Unix-like shell"


class Settings:
    """Shell settings loaded from environment variables."""

    def __init__(self):
        self.prompt: str = self._get_env("ZERO_SHELL_PROMPT", "$ ")
        self.banner: str = self._get_env("ZERO_SHELL_BANNER", DEFAULT_BANNER)
        self.log_level: int = self._get_log_level("ZERO_SHELL_LOG_LEVEL", "WARNING")
        self.mv_cross_device_dirs: bool = self._get_flag(
            "ZERO_SHELL_MV_CROSS_DEVICE_DIRS", False
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_flag(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable ('1', 'true', 'yes', 'on' enable it)."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip().lower() in ("1", "true", "yes", "on")

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level by name, raise error if the name is unknown."""
        return parse_log_level(self._get_env(key, default), key)


def parse_log_level(name: str, source: str = "log level") -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Invalid {source}: {name}")
    return level
