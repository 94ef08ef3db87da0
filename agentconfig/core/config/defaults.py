"""Default document written by ``acm init``."""

from .agent_config import (
    CONFIG_VERSION,
    AgentConfig,
    AgentInfo,
    APIKeysConfig,
    MonitoringConfig,
    SecurityConfig,
    WalletConfig,
)

DEFAULT_NETWORKS = ("ethereum", "base")


def default_config() -> AgentConfig:
    """
    Build the initial configuration document.

    A new instance is returned on every call, so callers may mutate it freely.

    Returns:
        AgentConfig populated with the stock identity and settings
    """
    return AgentConfig(
        version=CONFIG_VERSION,
        agent=AgentInfo(
            name="Arithmos",
            id="arithmos-quillsworth",
            erc8004_id=1941,
            website="https://arithmos.dev",
            github="https://github.com/arithmosquillsworth",
        ),
        wallet=WalletConfig(
            address="0x120e011fB8a12bfcB61e5c1d751C26A5D33Aae91",
            networks=list(DEFAULT_NETWORKS),
            daily_limit=0.5,
            alert_threshold=0.1,
        ),
        security=SecurityConfig(
            firewall_enabled=True,
            honeypot_enabled=True,
            prompt_guard_enabled=True,
            simulator_enabled=True,
            whitelisted_addresses=[],
            blacklisted_addresses=[],
        ),
        api_keys=APIKeysConfig(),
        monitoring=MonitoringConfig(
            dashboard_enabled=True,
            dashboard_port=8080,
            check_interval_minutes=5,
        ),
    )
