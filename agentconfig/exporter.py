"""Per-tool export of the unified configuration.

Each downstream tool gets a flat JSON file holding only the settings it
reads. Values are copied as-is; unset fields come through as empty strings
or zero.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple, Union

from loguru import logger

from agentconfig.core.config import AgentConfig
from agentconfig.store import ensure_directory, write_private_file

FieldMap = Tuple[Tuple[str, Callable[[AgentConfig], Any]], ...]

EXPORTS: Dict[str, FieldMap] = {
    "wallet-monitor": (
        ("address", lambda c: c.wallet.address),
        ("etherscan_key", lambda c: c.api_keys.etherscan),
        ("basescan_key", lambda c: c.api_keys.basescan),
        ("check_interval", lambda c: c.monitoring.check_interval_minutes),
        ("alert_threshold", lambda c: c.wallet.alert_threshold),
        ("webhook_url", lambda c: c.monitoring.webhook_url),
    ),
    "reputation-scanner": (
        ("address", lambda c: c.wallet.address),
        ("etherscan_key", lambda c: c.api_keys.etherscan),
        ("basescan_key", lambda c: c.api_keys.basescan),
    ),
    "security-dashboard": (
        ("port", lambda c: c.monitoring.dashboard_port),
    ),
}


class Exporter:
    """Projects an AgentConfig into per-tool subset documents."""

    @staticmethod
    def names() -> List[str]:
        """Export names, in the order they are written."""
        return list(EXPORTS)

    @staticmethod
    def filename(name: str) -> str:
        return f"{name}.json"

    def build(self, config: AgentConfig) -> Dict[str, Dict[str, Any]]:
        """Build every subset document without touching the filesystem.

        Args:
            config: Source configuration

        Returns:
            Mapping of export name to its flat document
        """
        return {
            name: {key: source(config) for key, source in fields}
            for name, fields in EXPORTS.items()
        }

    def write(self, config: AgentConfig, export_dir: Union[str, Path]) -> List[Path]:
        """Write every subset document into ``export_dir``.

        Args:
            config: Source configuration
            export_dir: Directory to write into; created if missing

        Returns:
            Paths of the written files, in export order

        Raises:
            ConfigWriteError: If the directory or a file cannot be written
        """
        export_dir = Path(export_dir)
        ensure_directory(export_dir)

        written = []
        for name, document in self.build(config).items():
            path = export_dir / self.filename(name)
            write_private_file(path, json.dumps(document, indent=2))
            logger.debug(f"Exported {name} to {path}")
            written.append(path)
        return written
