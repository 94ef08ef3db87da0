"""Output formatting utilities for acm CLI commands."""

import json
import sys
from typing import Any, Dict, Optional

import yaml

from agentconfig.core.config import AgentConfig
from agentconfig.validator import Issue

BANNER_WIDTH = 60


class OutputFormatter:
    """Handles consistent output formatting across CLI commands."""

    def __init__(self, verbose: bool = False):
        """Initialize output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose

    def info(self, message: str) -> None:
        """Print an info message.

        Args:
            message: Message to print
        """
        print(f"ℹ️  {message}")

    def success(self, message: str) -> None:
        """Print a success message.

        Args:
            message: Message to print
        """
        print(f"✅ {message}")

    def warning(self, message: str) -> None:
        """Print a warning message.

        Args:
            message: Message to print
        """
        print(f"⚠️  {message}")

    def error(self, message: str) -> None:
        """Print an error message to stderr.

        Args:
            message: Message to print
        """
        print(f"❌ {message}", file=sys.stderr)

    def detail(self, message: str) -> None:
        """Print an indented follow-up line."""
        print(f"   {message}")

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled.

        Args:
            message: Message to print
        """
        if self.verbose:
            print(f"🔍 {message}")

    def json_output(self, data: Dict[str, Any]) -> None:
        """Print data as formatted JSON.

        Args:
            data: Data to output as JSON
        """
        print(json.dumps(data, indent=2, default=str))

    def yaml_output(self, data: Dict[str, Any]) -> None:
        """Print data as YAML, keeping key order."""
        print(yaml.safe_dump(data, sort_keys=False, default_flow_style=False), end="")

    def issue(self, issue: Issue) -> None:
        """Print one validation issue with its severity marker."""
        marker = "❌" if issue.is_error else "⚠️ "
        print(f"{marker} {issue.message}")


def bool_status(enabled: bool) -> str:
    return "✅ enabled" if enabled else "❌ disabled"


def key_status(key: str) -> str:
    return "✅ set" if key else "❌ not set"


def webhook_status(url: str) -> str:
    return "✅ configured" if url else "not configured"


def format_networks(networks: list) -> str:
    """Format a network list as ``[ethereum base]``."""
    return "[" + " ".join(networks) + "]"


def print_banner(title: Optional[str] = None, char: str = "═") -> None:
    """Print a banner rule with an optional title.

    Args:
        title: Title text printed between two rules
        char: Rule character
    """
    print(char * BANNER_WIDTH)
    if title:
        print(f"  {title}")
        print(char * BANNER_WIDTH)
        print()


def print_config(config: AgentConfig) -> None:
    """Print the human-readable configuration summary.

    Args:
        config: Configuration to display
    """
    print_banner("AGENT CONFIGURATION")

    print(f"Version: {config.version}")
    print()

    agent = config.agent
    print("AGENT:")
    print(f"  Name:       {agent.name}")
    print(f"  ID:         {agent.id}")
    print(f"  ERC-8004:   #{agent.erc8004_id}")
    print(f"  Website:    {agent.website}")
    print(f"  GitHub:     {agent.github}")
    print()

    wallet = config.wallet
    print("WALLET:")
    print(f"  Address:    {wallet.address}")
    print(f"  Networks:   {format_networks(wallet.networks)}")
    print(f"  Daily Limit: {wallet.daily_limit:.2f} ETH")
    print(f"  Alert Threshold: {wallet.alert_threshold:.2f} ETH")
    print()

    security = config.security
    print("SECURITY:")
    print(f"  Firewall:   {bool_status(security.firewall_enabled)}")
    print(f"  Honeypot:   {bool_status(security.honeypot_enabled)}")
    print(f"  Prompt Guard: {bool_status(security.prompt_guard_enabled)}")
    print(f"  Simulator:  {bool_status(security.simulator_enabled)}")
    print(f"  Whitelist:  {len(security.whitelisted_addresses)} addresses")
    print(f"  Blacklist:  {len(security.blacklisted_addresses)} addresses")
    print()

    keys = config.api_keys
    print("API KEYS:")
    print(f"  Etherscan:  {key_status(keys.etherscan)}")
    print(f"  Basescan:   {key_status(keys.basescan)}")
    print(f"  OpenAI:     {key_status(keys.openai)}")
    print(f"  Anthropic:  {key_status(keys.anthropic)}")
    print(f"  Discord:    {key_status(keys.discord)}")
    print()

    monitoring = config.monitoring
    print("MONITORING:")
    print(f"  Dashboard:  {bool_status(monitoring.dashboard_enabled)} (port {monitoring.dashboard_port})")
    print(f"  Check Interval: {monitoring.check_interval_minutes} minutes")
    print(f"  Webhook:    {webhook_status(monitoring.webhook_url)}")
    print()
    print_banner()
