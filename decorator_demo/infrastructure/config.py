"""
Configuration Module

Centralized configuration and logging setup for the demonstration.
"""

import os
import sys
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass
class AppConfig:
    """Main application configuration."""
    log_level: str = "WARNING"
    debug: bool = False
    default_chain: str = "A,B"  # Innermost decorator first

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            default_chain=os.getenv("DECORATOR_CHAIN", "A,B")
        )

    def effective_log_level(self) -> str:
        """Debug mode forces DEBUG logging."""
        return "DEBUG" if self.debug else self.log_level


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """Reload configuration from environment."""
    global _config
    _config = AppConfig.from_env()
    return _config


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging.

    Logs go to stderr so that the demonstration output on stdout
    stays exactly as printed by the client.

    Args:
        level: Log level name. Uses the configured level if None.

    Raises:
        ValueError: If the level name is not a standard logging level
    """
    if level is None:
        level = get_config().effective_log_level()

    level_value = logging.getLevelName(level.upper())
    if not isinstance(level_value, int):
        raise ValueError(
            f"Unknown log level: {level}. "
            "Available: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )

    logging.basicConfig(
        level=level_value,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True
    )
