"""Config command argument parsers for acm CLI."""

import argparse
from pathlib import Path

from .main_parser import add_common_arguments


def add_config_subparsers(subparsers) -> None:
    """Add the document commands (init, show, get, set, validate, version).

    Args:
        subparsers: Subparsers object from the main argument parser
    """
    init_parser = subparsers.add_parser(
        "init",
        help="Create initial configuration",
        description="Write the default configuration unless one already exists"
    )
    add_common_arguments(init_parser)

    show_parser = subparsers.add_parser(
        "show",
        help="Display current configuration"
    )
    add_common_arguments(show_parser)
    show_parser.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)"
    )
    show_parser.add_argument(
        "--reveal",
        action="store_true",
        help="Include API key values in json/yaml output"
    )

    get_parser = subparsers.add_parser(
        "get",
        help="Get specific value (e.g., 'wallet.address')"
    )
    add_common_arguments(get_parser)
    get_parser.add_argument(
        "key",
        help="Dotted key to read"
    )

    set_parser = subparsers.add_parser(
        "set",
        help="Set specific value"
    )
    add_common_arguments(set_parser)
    set_parser.add_argument(
        "key",
        help="Dotted key to write"
    )
    set_parser.add_argument(
        "value",
        help="New value"
    )
    set_parser.add_argument(
        "--lenient",
        action="store_true",
        default=None,
        help="Store zero for unparsable numbers instead of failing"
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate configuration"
    )
    add_common_arguments(validate_parser)

    version_parser = subparsers.add_parser(
        "version",
        help="Show version"
    )
    add_common_arguments(version_parser)


def add_export_subparser(subparsers) -> argparse.ArgumentParser:
    """Add export command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured export subparser
    """
    export_parser = subparsers.add_parser(
        "export",
        help="Export config for all tools",
        description="Write per-tool config files to <config-dir>/exports"
    )
    add_common_arguments(export_parser)
    export_parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory for exported files (default: <config-dir>/exports)"
    )
    return export_parser
