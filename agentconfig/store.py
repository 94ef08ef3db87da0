"""Config file storage for the unified agent configuration.

The document lives in a single JSON file readable only by its owner. Each
invocation loads it at most once and saves it at most once; there is no
locking, so concurrent writers race and the last one wins.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Union

from loguru import logger
from pydantic import ValidationError

from agentconfig.core.config import AgentConfig, default_config
from agentconfig.core.exceptions import (
    ConfigNotFoundError,
    ConfigWriteError,
    MalformedConfigError,
)

FILE_MODE = 0o600
DIR_MODE = 0o755


def write_private_file(path: Path, text: str) -> None:
    """Replace ``path`` with ``text``, leaving it readable by the owner only.

    The content goes to a temporary sibling first and is moved into place, so
    a concurrent reader sees either the old file or the new one.

    Args:
        path: Destination file
        text: Content to write

    Raises:
        ConfigWriteError: If any filesystem operation fails
    """
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(text)
        os.chmod(tmp_path, FILE_MODE)
        os.replace(tmp_path, path)
        tmp_path = None
        # Enforced again in case the platform ignored the mode on replace
        os.chmod(path, FILE_MODE)
    except OSError as e:
        raise ConfigWriteError(path, e.strerror or str(e), cause=e) from e
    finally:
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                logger.debug(f"Could not remove temporary file {tmp_path}")


def ensure_directory(path: Path) -> None:
    """Create ``path`` and its parents if needed.

    Raises:
        ConfigWriteError: If the directory cannot be created
    """
    try:
        path.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigWriteError(path, e.strerror or str(e), cause=e) from e


class ConfigStore:
    """Loads and saves the AgentConfig document at a fixed path."""

    def __init__(self, path: Union[str, Path]):
        """Initialize the store.

        Args:
            path: Location of the config JSON file
        """
        self.path = Path(path).expanduser()

    @property
    def export_dir(self) -> Path:
        """Directory that receives per-tool export files."""
        return self.path.parent / "exports"

    def exists(self) -> bool:
        """Check whether the config file is present."""
        return self.path.is_file()

    def load(self) -> AgentConfig:
        """Read and parse the config document.

        Returns:
            The parsed configuration

        Raises:
            ConfigNotFoundError: If the file does not exist
            MalformedConfigError: If the file cannot be read or parsed
        """
        try:
            text = self.path.read_text(encoding='utf-8')
        except FileNotFoundError as e:
            raise ConfigNotFoundError(self.path) from e
        except OSError as e:
            raise MalformedConfigError(self.path, e.strerror or str(e), cause=e) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedConfigError(self.path, str(e), cause=e) from e

        try:
            config = AgentConfig.from_dict(data)
        except ValidationError as e:
            reason = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            )
            raise MalformedConfigError(self.path, reason, cause=e) from e

        logger.debug(f"Loaded config from {self.path}")
        return config

    def save(self, config: AgentConfig) -> None:
        """Write the config document with owner-only permissions.

        Args:
            config: Configuration to persist

        Raises:
            ConfigWriteError: If the directory or file cannot be written
        """
        ensure_directory(self.path.parent)
        write_private_file(self.path, config.to_json())
        logger.debug(f"Saved config to {self.path}")

    def init(self) -> bool:
        """Create the default document unless one already exists.

        Returns:
            True if a new file was written, False if one was already present
        """
        if self.path.exists():
            logger.debug(f"Config already exists at {self.path}, not overwriting")
            return False

        self.save(default_config())
        logger.debug(f"Initialized default config at {self.path}")
        return True

    def __repr__(self) -> str:
        return f"ConfigStore(path={self.path})"
