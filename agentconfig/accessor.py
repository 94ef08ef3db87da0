"""Dotted-key access to individual config fields.

Only a fixed set of keys is supported, and the gettable and settable sets
differ on purpose: identity and wallet address can be read but not written
from the command line, while API keys can be written but never echoed back.
Each key is an entry in an explicit table, so adding a key means adding a row.
"""

import math
import re
from typing import Callable, Dict, List, Tuple

from loguru import logger

from agentconfig.core.config import AgentConfig
from agentconfig.core.exceptions import BadValueError, UnknownKeyError

Getter = Callable[[AgentConfig], object]
Setter = Callable[[AgentConfig, object], None]

# Leading numeric prefix, as accepted by a scanf-style reader
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INT_PREFIX = re.compile(r"[+-]?\d+", re.ASCII)


GETTERS: Dict[str, Getter] = {
    "agent.name": lambda c: c.agent.name,
    "agent.id": lambda c: c.agent.id,
    "agent.erc8004_id": lambda c: c.agent.erc8004_id,
    "wallet.address": lambda c: c.wallet.address,
    "wallet.daily_limit": lambda c: c.wallet.daily_limit,
    "wallet.alert_threshold": lambda c: c.wallet.alert_threshold,
    "security.firewall_enabled": lambda c: c.security.firewall_enabled,
    "security.honeypot_enabled": lambda c: c.security.honeypot_enabled,
    "monitoring.dashboard_port": lambda c: c.monitoring.dashboard_port,
}


def _set_attr(section: str, field: str) -> Setter:
    def setter(config: AgentConfig, value: object) -> None:
        setattr(getattr(config, section), field, value)
    return setter


# key -> (value kind, setter)
SETTERS: Dict[str, Tuple[str, Setter]] = {
    "api_keys.etherscan": ("string", _set_attr("api_keys", "etherscan")),
    "api_keys.basescan": ("string", _set_attr("api_keys", "basescan")),
    "api_keys.openai": ("string", _set_attr("api_keys", "openai")),
    "api_keys.anthropic": ("string", _set_attr("api_keys", "anthropic")),
    "api_keys.discord": ("string", _set_attr("api_keys", "discord")),
    "wallet.daily_limit": ("float", _set_attr("wallet", "daily_limit")),
    "wallet.alert_threshold": ("float", _set_attr("wallet", "alert_threshold")),
    "monitoring.webhook_url": ("string", _set_attr("monitoring", "webhook_url")),
    "monitoring.check_interval": ("integer", _set_attr("monitoring", "check_interval_minutes")),
}


def format_value(value: object) -> str:
    """Render a field value in its canonical text form.

    Booleans print as ``true``/``false`` and floats use the shortest form
    that round-trips, without a trailing ``.0``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def parse_float(key: str, raw: str, lenient: bool = False) -> float:
    """Parse a float for ``key``.

    In lenient mode the leading numeric prefix is used and input without one
    becomes 0.0, matching how older releases stored such values.

    Raises:
        BadValueError: If the value is not a finite float and lenient is False
    """
    text = raw.strip()
    if lenient:
        match = _FLOAT_PREFIX.match(text)
        value = float(match.group(0)) if match else 0.0
        return value if math.isfinite(value) else 0.0
    if not _FLOAT_PREFIX.fullmatch(text):
        raise BadValueError(key, raw, "float")
    value = float(text)
    if not math.isfinite(value):
        raise BadValueError(key, raw, "float")
    return value


def parse_int(key: str, raw: str, lenient: bool = False) -> int:
    """Parse an integer for ``key``.

    In lenient mode the leading digits are used and input without any
    becomes 0.

    Raises:
        BadValueError: If the value is not an integer and lenient is False
    """
    text = raw.strip()
    if lenient:
        match = _INT_PREFIX.match(text)
        return int(match.group(0)) if match else 0
    if not _INT_PREFIX.fullmatch(text):
        raise BadValueError(key, raw, "integer")
    return int(text)


class KeyAccessor:
    """Reads and writes single config fields by dotted key."""

    def __init__(self, lenient: bool = False):
        """Initialize the accessor.

        Args:
            lenient: Store zero for unparsable numbers instead of raising
                BadValueError
        """
        self.lenient = lenient

    @staticmethod
    def gettable_keys() -> List[str]:
        """Keys accepted by get, in table order."""
        return list(GETTERS)

    @staticmethod
    def settable_keys() -> List[str]:
        """Keys accepted by set, in table order."""
        return list(SETTERS)

    def get(self, config: AgentConfig, key: str) -> str:
        """Return the text form of the field named by ``key``.

        Raises:
            UnknownKeyError: If ``key`` is not gettable
        """
        getter = GETTERS.get(key)
        if getter is None:
            raise UnknownKeyError(key, "get", GETTERS)
        return format_value(getter(config))

    def set(self, config: AgentConfig, key: str, raw_value: str) -> AgentConfig:
        """Assign ``raw_value`` to the field named by ``key``.

        The document is modified in place and returned; persisting it is up
        to the caller.

        Raises:
            UnknownKeyError: If ``key`` is not settable
            BadValueError: If a numeric value cannot be parsed in strict mode
        """
        entry = SETTERS.get(key)
        if entry is None:
            raise UnknownKeyError(key, "set", SETTERS)

        kind, setter = entry
        if kind == "float":
            value: object = parse_float(key, raw_value, self.lenient)
        elif kind == "integer":
            value = parse_int(key, raw_value, self.lenient)
        else:
            value = raw_value

        setter(config, value)
        logger.debug(f"Set {key} ({kind})")
        return config
