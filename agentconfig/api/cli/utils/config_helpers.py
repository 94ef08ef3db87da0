"""
Configuration helper utilities for CLI commands.

This module bridges parsed CLI arguments with the runtime settings and the
storage layer.
"""

import argparse

from agentconfig.core.config import ManagerSettings
from agentconfig.store import ConfigStore


def args_to_settings(args: argparse.Namespace) -> ManagerSettings:
    """
    Convert CLI arguments to runtime settings.

    Flags that were not given are left to the environment and defaults.

    Args:
        args: Parsed CLI arguments

    Returns:
        ManagerSettings instance
    """
    overrides = {}

    if getattr(args, 'config', None):
        overrides['config_path'] = args.config
    if getattr(args, 'lenient', False):
        overrides['lenient_numbers'] = True
    if getattr(args, 'verbose', False):
        overrides['verbose'] = True

    return ManagerSettings.load(**overrides)


def store_from_settings(settings: ManagerSettings) -> ConfigStore:
    """Create the config store for the configured path."""
    return ConfigStore(settings.config_path)
