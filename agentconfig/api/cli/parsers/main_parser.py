"""Main argument parser for acm CLI."""

import argparse
import sys
from pathlib import Path

# Version imported dynamically to avoid early module loading


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def create_main_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from agentconfig import __version__

    parser = UsageArgumentParser(
        prog="acm",
        description="Agent Config Manager - unified configuration for agent tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  acm init
  acm show
  acm get wallet.address
  acm set api_keys.etherscan YOUR_KEY
  acm validate
  acm export

Config location: ~/.config/agent/config.json (override with --config or ACM_CONFIG_PATH)
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"agent-config-manager v{__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Set up subparsers for the main parser.

    Args:
        parser: Main argument parser

    Returns:
        Subparsers action for adding command parsers
    """
    return parser.add_subparsers(dest="command", help="Available commands")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments used across all commands.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file path (default: ~/.config/agent/config.json)",
    )


__all__ = [
    "UsageArgumentParser",
    "create_main_parser",
    "setup_subparsers",
    "add_common_arguments",
]
