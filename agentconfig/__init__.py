"""Agent Config Manager - unified configuration for agent tools."""

__version__ = "0.1.0"
__description__ = "Unified configuration manager for agent tools"

# Import modules only when needed to keep CLI startup light
__all__ = [
    "AgentConfig",
    "ConfigStore",
    "KeyAccessor",
    "Exporter",
    "validate_config",
]


def __getattr__(name: str):
    """Lazy import of the public API."""
    if name == "AgentConfig":
        from .core.config import AgentConfig
        return AgentConfig
    elif name == "ConfigStore":
        from .store import ConfigStore
        return ConfigStore
    elif name == "KeyAccessor":
        from .accessor import KeyAccessor
        return KeyAccessor
    elif name == "Exporter":
        from .exporter import Exporter
        return Exporter
    elif name == "validate_config":
        from .validator import validate_config
        return validate_config
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
