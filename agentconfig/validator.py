"""Configuration checks.

Validation is informational: it reports problems but never changes the
document. Checks always run in the same order so output is stable.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Tuple

from agentconfig.core.config import AgentConfig


class Severity(Enum):
    """How serious a validation issue is."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Issue:
    """A single validation finding."""
    severity: Severity
    code: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR


@dataclass
class ValidationReport:
    """Ordered validation findings for one document."""
    issues: List[Issue] = field(default_factory=list)

    @property
    def errors(self) -> List[Issue]:
        return [i for i in self.issues if i.severity is Severity.ERROR]

    @property
    def warnings(self) -> List[Issue]:
        return [i for i in self.issues if i.severity is Severity.WARNING]

    @property
    def is_valid(self) -> bool:
        """True when there are no errors; warnings are allowed."""
        return not self.errors

    @property
    def is_clean(self) -> bool:
        """True when there are no issues at all."""
        return not self.issues

    def __len__(self) -> int:
        return len(self.issues)


# (predicate, severity, code, message); order is part of the output contract
CHECKS: Tuple[Tuple[Callable[[AgentConfig], bool], Severity, str, str], ...] = (
    (
        lambda c: not c.wallet.address,
        Severity.ERROR,
        "wallet_address_missing",
        "Wallet address not set",
    ),
    (
        lambda c: c.wallet.daily_limit <= 0,
        Severity.WARNING,
        "daily_limit_not_positive",
        "Daily limit should be positive",
    ),
    (
        lambda c: not c.api_keys.etherscan,
        Severity.WARNING,
        "etherscan_key_missing",
        "Etherscan API key not set (needed for monitoring)",
    ),
    (
        lambda c: not c.api_keys.basescan,
        Severity.WARNING,
        "basescan_key_missing",
        "Basescan API key not set (needed for monitoring)",
    ),
    (
        lambda c: not c.security.firewall_enabled and not c.security.honeypot_enabled,
        Severity.WARNING,
        "security_disabled",
        "All security features disabled",
    ),
)


def validate_config(config: AgentConfig) -> ValidationReport:
    """Run every check against ``config``.

    Args:
        config: Configuration to inspect

    Returns:
        Report with one issue per failed check, in check order
    """
    issues = [
        Issue(severity, code, message)
        for predicate, severity, code, message in CHECKS
        if predicate(config)
    ]
    return ValidationReport(issues)
