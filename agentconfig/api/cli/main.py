"""CLI entry point for the agent config manager."""

import argparse
import sys
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from agentconfig.core.exceptions import AgentConfigError


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: Whether to enable verbose logging
    """
    logger.remove()

    if verbose:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
    else:
        # Command output goes to stdout; only problems are logged
        logger.add(
            sys.stderr,
            level="WARNING",
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
        )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the complete argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from .parsers import create_main_parser, setup_subparsers
    from .parsers.config_parser import add_config_subparsers, add_export_subparser

    parser = create_main_parser()
    subparsers = setup_subparsers(parser)

    add_config_subparsers(subparsers)
    add_export_subparser(subparsers)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI.

    Args:
        argv: Argument list, defaults to sys.argv[1:]
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    from .utils.config_helpers import args_to_settings
    from .utils.output import OutputFormatter

    formatter = OutputFormatter(verbose=getattr(args, "verbose", False))
    try:
        settings = args_to_settings(args)
    except ValidationError as e:
        formatter.error(f"Invalid ACM_* environment settings: {e}")
        sys.exit(1)

    setup_logging(settings.verbose)
    formatter.verbose = settings.verbose
    logger.debug(f"Using config at {settings.config_path}")

    try:
        if args.command == "export":
            from .commands.export import export_command
            export_command(args, settings)
        else:
            from .commands.config import config_command
            config_command(args, settings)

    except AgentConfigError as e:
        formatter.error(str(e))
        logger.opt(exception=True).debug("Full error details:")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command failed: {e}")
        logger.opt(exception=True).debug("Full error details:")
        sys.exit(1)


if __name__ == "__main__":
    main()
