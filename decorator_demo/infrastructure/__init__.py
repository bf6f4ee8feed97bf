"""
Infrastructure Layer

Configuration loading and logging setup.
"""

from decorator_demo.infrastructure.config import (
    AppConfig,
    get_config,
    reload_config,
    setup_logging,
)
