"""
Runtime settings for the agent config manager.

These control how the tool itself behaves (where the document lives, how
strictly numbers are parsed) and are separate from the AgentConfig document
it manages.

Configuration Sources (in order of precedence):
1. Runtime parameters (CLI flags)
2. Environment variables (ACM_*)
3. Default values

Environment Variable Examples:
    ACM_CONFIG_PATH=/tmp/agent/config.json
    ACM_LENIENT_NUMBERS=true
    ACM_VERBOSE=true
"""

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_config_path() -> Path:
    """Return the conventional per-user config location."""
    return Path.home() / ".config" / "agent" / "config.json"


class ManagerSettings(BaseSettings):
    """Settings for a single acm invocation."""

    model_config = SettingsConfigDict(
        env_prefix='ACM_',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
        env_file=None,
    )

    config_path: Path = Field(
        default_factory=default_config_path,
        description="Path to the unified config document"
    )

    lenient_numbers: bool = Field(
        default=False,
        description="Store zero for unparsable numbers instead of failing"
    )

    verbose: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    @classmethod
    def load(cls, **override_values: Any) -> 'ManagerSettings':
        """
        Load settings from the environment with runtime overrides applied.

        Overrides whose value is None are ignored so unset CLI flags fall
        through to the environment.

        Args:
            **override_values: Runtime parameter overrides

        Returns:
            Loaded settings
        """
        overrides = {k: v for k, v in override_values.items() if v is not None}
        return cls(**overrides)
