"""
Configuration package for the agent config manager.

This package provides:
- The unified AgentConfig document model shared by all agent tools
- The default document used by ``acm init``
- Runtime settings for the manager itself (paths, parsing mode)
"""

from .agent_config import (
    CONFIG_VERSION,
    AgentConfig,
    AgentInfo,
    APIKeysConfig,
    MonitoringConfig,
    SecurityConfig,
    WalletConfig,
)
from .defaults import default_config
from .settings import ManagerSettings, default_config_path

__all__ = [
    "CONFIG_VERSION",
    "AgentConfig",
    "AgentInfo",
    "APIKeysConfig",
    "MonitoringConfig",
    "SecurityConfig",
    "WalletConfig",
    "default_config",
    "ManagerSettings",
    "default_config_path",
]
