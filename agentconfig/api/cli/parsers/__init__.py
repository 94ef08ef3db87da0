"""Argument parser utilities for acm CLI commands."""

from .main_parser import create_main_parser, setup_subparsers
from .config_parser import add_config_subparsers, add_export_subparser

__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_config_subparsers",
    "add_export_subparser",
]
