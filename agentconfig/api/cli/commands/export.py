"""Export command module - writes per-tool config files."""

import argparse

from agentconfig.core.config import ManagerSettings
from agentconfig.exporter import Exporter
from ..utils.config_helpers import store_from_settings
from ..utils.output import OutputFormatter


def export_command(args: argparse.Namespace, settings: ManagerSettings) -> None:
    """Execute the export command.

    Args:
        args: Parsed command-line arguments
        settings: Runtime settings for this invocation
    """
    formatter = OutputFormatter(verbose=settings.verbose)
    store = store_from_settings(settings)
    config = store.load()

    export_dir = getattr(args, 'output_dir', None) or store.export_dir
    written = Exporter().write(config, export_dir)

    formatter.success(f"Exported tool configs to {export_dir}/")
    for path in written:
        print(f"   - {path.name}")
