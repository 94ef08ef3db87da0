"""acm CLI commands package - command implementations."""

from .config import config_command
from .export import export_command

__all__ = [
    "config_command",
    "export_command",
]
