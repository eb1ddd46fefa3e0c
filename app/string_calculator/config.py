"""
Configuration Module

Loads settings from environment variables and config/.env.
The calculator itself never reads this; callers pass it in explicitly.
"""

import os
from dataclasses import dataclass
from typing import List, Optional
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv
PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / "config" / ".env"
load_dotenv(dotenv_path=ENV_PATH)

from .errors import ConfigError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class Config:
    """
    Application configuration.

    See config/.env.example for available options.
    """

    # === Calculator Settings ===
    upper_limit: int = 1000          # Values above this count as zero

    # === Logging Settings ===
    log_level: str = "WARNING"
    json_logs: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """
        Load configuration from environment variables.

        Environment variables override defaults.
        """
        def get_bool(key: str, default: bool) -> bool:
            """Helper to parse boolean env vars."""
            value = os.getenv(key, str(default)).lower()
            return value in ("true", "1", "yes")

        def get_int(key: str, default: int) -> int:
            """Helper to parse int env vars."""
            try:
                return int(os.getenv(key, default))
            except ValueError:
                return default

        return cls(
            upper_limit=get_int("CALCULATOR_UPPER_LIMIT", 1000),
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
            json_logs=get_bool("LOG_JSON", False),
            log_file=os.getenv("LOG_FILE") or None,
        )

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.upper_limit < 0:
            errors.append("CALCULATOR_UPPER_LIMIT must not be negative")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of: {', '.join(VALID_LOG_LEVELS)}")

        return errors

    def __post_init__(self):
        """Validate after initialization."""
        errors = self.validate()
        if errors:
            raise ConfigError(f"Configuration errors: {errors}")


def load_config() -> Config:
    """
    Load configuration from environment.

    Usage:
        from string_calculator.config import load_config
        config = load_config()
    """
    return Config.from_env()
