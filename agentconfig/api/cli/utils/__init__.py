"""Shared utilities for acm CLI commands."""

from .config_helpers import args_to_settings, store_from_settings
from .output import OutputFormatter, print_banner, print_config

__all__ = [
    "OutputFormatter",
    "print_banner",
    "print_config",
    "args_to_settings",
    "store_from_settings",
]
