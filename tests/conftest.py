"""Shared fixtures for agent config manager tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from agentconfig.core.config import default_config
from agentconfig.store import ConfigStore


@pytest.fixture
def temp_config_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for config files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def config_path(temp_config_dir: Path) -> Path:
    """Config file location inside a not-yet-existing subdirectory."""
    return temp_config_dir / "agent" / "config.json"


@pytest.fixture
def store(config_path: Path) -> ConfigStore:
    """Config store pointing at the temporary location."""
    return ConfigStore(config_path)


@pytest.fixture
def sample_config():
    """Default document with monitoring keys filled in."""
    config = default_config()
    config.api_keys.etherscan = "E1"
    config.api_keys.basescan = "B1"
    config.monitoring.webhook_url = "https://x"
    return config


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, temp_config_dir: Path):
    """Keep ACM_* variables from the developer's shell out of tests."""
    for name in ("ACM_CONFIG_PATH", "ACM_LENIENT_NUMBERS", "ACM_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(temp_config_dir / "home"))
