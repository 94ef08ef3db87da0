"""Config command module - handles the unified config document."""

import argparse
import sys

from loguru import logger

from agentconfig.accessor import KeyAccessor
from agentconfig.core.config import ManagerSettings
from agentconfig.validator import validate_config
from ..utils.config_helpers import store_from_settings
from ..utils.output import OutputFormatter, print_config


def config_command(args: argparse.Namespace, settings: ManagerSettings) -> None:
    """Execute a document command.

    Args:
        args: Parsed command-line arguments
        settings: Runtime settings for this invocation
    """
    command_handlers = {
        "init": init_command,
        "show": show_command,
        "get": get_command,
        "set": set_command,
        "validate": validate_command,
        "version": version_command,
    }

    handler = command_handlers.get(args.command)
    if handler:
        handler(args, settings)
    else:
        logger.error(f"Unknown config command: {args.command}")
        sys.exit(1)


def init_command(args: argparse.Namespace, settings: ManagerSettings) -> None:
    """Handle init command."""
    formatter = OutputFormatter(verbose=settings.verbose)
    store = store_from_settings(settings)

    if not store.init():
        formatter.warning(f"Config already exists at {store.path}")
        formatter.detail("Use 'acm show' to view or 'acm set' to modify")
        return

    formatter.success(f"Config created at {store.path}")
    print()
    print("Next steps:")
    print("  1. Add API keys: acm set api_keys.etherscan YOUR_KEY")
    print("  2. View config:  acm show")
    print("  3. Validate:     acm validate")


def show_command(args: argparse.Namespace, settings: ManagerSettings) -> None:
    """Handle show command."""
    formatter = OutputFormatter(verbose=settings.verbose)
    config = store_from_settings(settings).load()

    output_format = getattr(args, 'format', 'text')
    if output_format == 'text':
        print_config(config)
        return

    data = config.to_dict() if getattr(args, 'reveal', False) else config.to_masked_dict()
    if output_format == 'json':
        formatter.json_output(data)
    else:
        formatter.yaml_output(data)


def get_command(args: argparse.Namespace, settings: ManagerSettings) -> None:
    """Handle get command."""
    config = store_from_settings(settings).load()
    print(KeyAccessor().get(config, args.key))


def set_command(args: argparse.Namespace, settings: ManagerSettings) -> None:
    """Handle set command."""
    formatter = OutputFormatter(verbose=settings.verbose)
    store = store_from_settings(settings)

    config = store.load()
    KeyAccessor(lenient=settings.lenient_numbers).set(config, args.key, args.value)
    store.save(config)

    formatter.success(f"Set {args.key}")


def validate_command(args: argparse.Namespace, settings: ManagerSettings) -> None:
    """Handle validate command.

    Findings are informational, so this never exits non-zero on issues.
    """
    formatter = OutputFormatter(verbose=settings.verbose)
    config = store_from_settings(settings).load()

    print("🔍 Validating configuration...")
    print()

    report = validate_config(config)
    if report.is_clean:
        formatter.success("Configuration is valid!")
        return

    for issue in report.issues:
        formatter.issue(issue)
    print()
    print(f"Found {len(report)} issue(s)")
    formatter.verbose_info(
        f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)"
    )


def version_command(args: argparse.Namespace, settings: ManagerSettings) -> None:
    """Handle version command."""
    from agentconfig import __version__

    print(f"agent-config-manager v{__version__}")
