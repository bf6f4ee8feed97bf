"""pytest configuration - isolate the global configuration between tests"""
import pytest

from decorator_demo.infrastructure import config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Start every test without a cached AppConfig or inherited env overrides."""
    for name in ("LOG_LEVEL", "DEBUG", "DECORATOR_CHAIN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_config", None)
    yield
