"""
Unified agent configuration model.

This module defines the single document that every agent tool reads its
settings from: identity, wallet, security, API keys and monitoring. Each
section is a fixed-shape pydantic model so the document round-trips through
JSON without loss.
"""

import json
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_serializer,
)

CONFIG_VERSION = "0.1.0"


def _none_as_empty_list(v: Any) -> Any:
    # Writers that serialize empty slices as null still produce loadable files
    return [] if v is None else v


class _Section(BaseModel):
    """Base for document sections: unknown keys are ignored."""

    model_config = ConfigDict(extra='ignore', validate_assignment=True)


class AgentInfo(_Section):
    """Agent identity metadata, set once at init."""

    name: StrictStr = Field(default="", description="Display name of the agent")

    id: StrictStr = Field(default="", description="Stable agent identifier")

    erc8004_id: StrictInt = Field(default=0, description="ERC-8004 on-chain registry id")

    website: StrictStr = Field(default="", description="Agent website URL")

    github: StrictStr = Field(default="", description="Agent GitHub URL")


class WalletConfig(_Section):
    """Wallet address and spending limits."""

    address: StrictStr = Field(default="", description="Wallet address")

    networks: list[StrictStr] = Field(
        default_factory=list,
        description="Networks the wallet operates on, in order"
    )

    daily_limit: StrictFloat = Field(
        default=0.0,
        description="Maximum daily spend in ETH (expected to be positive)"
    )

    alert_threshold: StrictFloat = Field(
        default=0.0,
        description="Transaction size in ETH that triggers an alert"
    )

    @field_validator('networks', mode='before')
    @classmethod
    def validate_networks(cls, v: Any) -> Any:
        """Treat a null network list as empty."""
        return _none_as_empty_list(v)


class SecurityConfig(_Section):
    """Security feature flags and address lists."""

    firewall_enabled: StrictBool = False
    honeypot_enabled: StrictBool = False
    prompt_guard_enabled: StrictBool = False
    simulator_enabled: StrictBool = False

    whitelisted_addresses: list[StrictStr] = Field(default_factory=list)
    blacklisted_addresses: list[StrictStr] = Field(default_factory=list)

    @field_validator('whitelisted_addresses', 'blacklisted_addresses', mode='before')
    @classmethod
    def validate_address_lists(cls, v: Any) -> Any:
        """Treat a null address list as empty."""
        return _none_as_empty_list(v)


class APIKeysConfig(_Section):
    """Third-party API keys. Empty keys are treated as unset."""

    etherscan: StrictStr = ""
    basescan: StrictStr = ""
    openai: StrictStr = ""
    anthropic: StrictStr = ""
    discord: StrictStr = ""

    @model_serializer(mode='wrap')
    def serialize_set_keys(self, handler):
        data = handler(self)
        return {k: v for k, v in data.items() if v != ""}

    def is_set(self, name: str) -> bool:
        """Check whether the named key has a value."""
        return bool(getattr(self, name))

    def masked(self) -> dict[str, str]:
        """Return the set keys with their values hidden."""
        return {k: "***" for k in self.model_dump()}

    def __repr__(self) -> str:
        """String representation hiding sensitive information."""
        keys = ", ".join(
            f"{name}={'***' if self.is_set(name) else None}"
            for name in type(self).model_fields
        )
        return f"APIKeysConfig({keys})"


class MonitoringConfig(_Section):
    """Dashboard and alerting configuration."""

    dashboard_enabled: StrictBool = False

    dashboard_port: StrictInt = Field(default=0, description="Port for the security dashboard")

    webhook_url: StrictStr = Field(default="", description="Alert webhook, empty when not configured")

    check_interval_minutes: StrictInt = Field(default=0, description="Wallet check interval in minutes")

    @model_serializer(mode='wrap')
    def serialize_without_empty_webhook(self, handler):
        data = handler(self)
        if not data.get('webhook_url'):
            data.pop('webhook_url', None)
        return data


class AgentConfig(_Section):
    """
    Unified configuration for all agent tools.

    The document is persisted as JSON with keys in declaration order. Fields
    missing from a loaded file take their zero values, and empty API keys and
    an empty webhook URL are left out when serializing. Scalars are not
    coerced: a quoted number, a non-boolean flag or a fractional integer is a
    schema error. Integers are accepted for float fields.
    """

    version: StrictStr = ""

    agent: AgentInfo = Field(default_factory=AgentInfo)

    wallet: WalletConfig = Field(default_factory=WalletConfig)

    security: SecurityConfig = Field(default_factory=SecurityConfig)

    api_keys: APIKeysConfig = Field(default_factory=APIKeysConfig)

    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'AgentConfig':
        """
        Build a configuration from decoded JSON.

        Args:
            data: Decoded JSON object

        Returns:
            Validated configuration

        Raises:
            pydantic.ValidationError: If the data does not match the schema
        """
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str) -> 'AgentConfig':
        """Parse a configuration from JSON text."""
        return cls.model_validate_json(text)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert configuration to dictionary format.

        Returns:
            Configuration as dictionary, unset optional strings omitted
        """
        return self.model_dump(mode='json')

    def to_json(self) -> str:
        """Serialize to indented JSON with stable field order."""
        return json.dumps(self.to_dict(), indent=2)

    def to_masked_dict(self) -> dict[str, Any]:
        """Same as to_dict but with API key values hidden."""
        data = self.to_dict()
        data['api_keys'] = self.api_keys.masked()
        return data

    def __repr__(self) -> str:
        """String representation hiding sensitive information."""
        return (
            f"AgentConfig("
            f"version={self.version}, "
            f"agent.id={self.agent.id}, "
            f"wallet.address={self.wallet.address}, "
            f"api_keys={self.api_keys!r})"
        )


__all__ = [
    "CONFIG_VERSION",
    "AgentConfig",
    "AgentInfo",
    "WalletConfig",
    "SecurityConfig",
    "APIKeysConfig",
    "MonitoringConfig",
]
