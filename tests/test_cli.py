"""Tests for the acm command-line interface."""

import json
import os
import stat
import sys

import pytest
import yaml

from agentconfig.api.cli.main import create_parser, main
from agentconfig.store import ConfigStore


def run(*argv):
    """Run the CLI and return its exit code (0 when it returns normally)."""
    try:
        main(list(argv))
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    return 0


@pytest.fixture
def cfg(config_path):
    """``--config`` argument pointing at the temp config."""
    return ["--config", str(config_path)]


@pytest.fixture
def initialized(cfg, capsys):
    assert run("init", *cfg) == 0
    capsys.readouterr()
    return cfg


class TestUsage:
    """Test argument handling."""

    def test_no_command(self, capsys):
        """Test running without a command prints help and exits 1."""
        assert run() == 1
        assert "usage: acm" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        assert run("frobnicate") == 1
        assert "usage: acm" in capsys.readouterr().err

    def test_get_missing_key(self, capsys):
        assert run("get") == 1
        assert "usage:" in capsys.readouterr().err

    def test_set_missing_value(self, capsys):
        assert run("set", "wallet.daily_limit") == 1
        assert "usage:" in capsys.readouterr().err

    def test_version_command(self, capsys):
        assert run("version") == 0
        assert capsys.readouterr().out.strip() == "agent-config-manager v0.1.0"

    def test_version_accepts_common_arguments(self, cfg, config_path, capsys):
        """Test version takes --config and --verbose like every other command."""
        assert run("version", *cfg, "-v") == 0
        assert capsys.readouterr().out.strip() == "agent-config-manager v0.1.0"
        assert not config_path.exists()

    def test_version_flag(self, capsys):
        assert run("--version") == 0
        assert "agent-config-manager v0.1.0" in capsys.readouterr().out

    def test_parser_commands(self):
        parser = create_parser()
        args = parser.parse_args(["set", "api_keys.openai", "sk", "--lenient"])
        assert (args.command, args.key, args.value, args.lenient) == ("set", "api_keys.openai", "sk", True)


class TestInit:
    """Test the init command."""

    def test_creates_config(self, cfg, config_path, capsys):
        assert run("init", *cfg) == 0

        out = capsys.readouterr().out
        assert f"Config created at {config_path}" in out
        assert "Next steps:" in out
        assert ConfigStore(config_path).exists()

    def test_second_init_reports_existing(self, initialized, config_path, capsys):
        before = config_path.read_bytes()

        assert run("init", *initialized) == 0
        assert "already exists" in capsys.readouterr().out
        assert config_path.read_bytes() == before

    def test_uses_env_path(self, config_path, monkeypatch, capsys):
        """Test ACM_CONFIG_PATH selects the file when --config is absent."""
        monkeypatch.setenv("ACM_CONFIG_PATH", str(config_path))
        assert run("init") == 0
        assert config_path.exists()

    def test_default_path_under_home(self, temp_config_dir, capsys):
        assert run("init") == 0
        assert (temp_config_dir / "home" / ".config" / "agent" / "config.json").is_file()


class TestMissingConfig:
    """Test commands before init."""

    @pytest.mark.parametrize("argv", [
        ["show"],
        ["get", "agent.name"],
        ["set", "api_keys.openai", "x"],
        ["validate"],
        ["export"],
    ])
    def test_not_found(self, cfg, capsys, argv):
        assert run(*argv, *cfg) == 1
        err = capsys.readouterr().err
        assert "Config not found" in err
        assert "acm init" in err

    def test_malformed(self, cfg, config_path, capsys):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("{")

        assert run("show", *cfg) == 1
        assert "Invalid config" in capsys.readouterr().err


class TestShow:
    """Test the show command."""

    def test_text(self, initialized, capsys):
        assert run("show", *initialized) == 0
        out = capsys.readouterr().out

        assert "AGENT CONFIGURATION" in out
        assert "ERC-8004:   #1941" in out
        assert "Networks:   [ethereum base]" in out
        assert "Daily Limit: 0.50 ETH" in out
        assert "Firewall:   ✅ enabled" in out
        assert "Whitelist:  0 addresses" in out
        assert "Etherscan:  ❌ not set" in out
        assert "Dashboard:  ✅ enabled (port 8080)" in out
        assert "Check Interval: 5 minutes" in out
        assert "Webhook:    not configured" in out

    def test_json_masks_keys(self, initialized, capsys):
        run("set", "api_keys.etherscan", "secret-key", *initialized)
        capsys.readouterr()

        assert run("show", "--format", "json", *initialized) == 0
        out = capsys.readouterr().out
        data = json.loads(out)
        assert data["api_keys"] == {"etherscan": "***"}
        assert "secret-key" not in out

    def test_json_reveal(self, initialized, capsys):
        run("set", "api_keys.etherscan", "secret-key", *initialized)
        capsys.readouterr()

        assert run("show", "--format", "json", "--reveal", *initialized) == 0
        assert json.loads(capsys.readouterr().out)["api_keys"] == {"etherscan": "secret-key"}

    def test_yaml(self, initialized, capsys):
        assert run("show", "--format", "yaml", *initialized) == 0
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["wallet"]["networks"] == ["ethereum", "base"]
        assert data["monitoring"]["dashboard_port"] == 8080


class TestGetSet:
    """Test the get and set commands."""

    def test_get(self, initialized, capsys):
        assert run("get", "monitoring.dashboard_port", *initialized) == 0
        assert capsys.readouterr().out == "8080\n"

    def test_get_unknown_key(self, initialized, capsys):
        assert run("get", "wallet.networks", *initialized) == 1
        assert "Unknown key: wallet.networks" in capsys.readouterr().err

    def test_set_then_get(self, initialized, capsys):
        assert run("set", "wallet.daily_limit", "2.5", *initialized) == 0
        assert "Set wallet.daily_limit" in capsys.readouterr().out

        assert run("get", "wallet.daily_limit", *initialized) == 0
        assert capsys.readouterr().out == "2.5\n"

    def test_set_unknown_key(self, initialized, config_path, capsys):
        before = config_path.read_bytes()

        assert run("set", "wallet.address", "0xnew", *initialized) == 1
        assert "Unknown key: wallet.address" in capsys.readouterr().err
        assert config_path.read_bytes() == before

    def test_set_bad_number(self, initialized, config_path, capsys):
        """Test strict mode rejects unparsable numbers without saving."""
        before = config_path.read_bytes()

        assert run("set", "wallet.daily_limit", "not-a-number", *initialized) == 1
        assert "not a valid float" in capsys.readouterr().err
        assert config_path.read_bytes() == before

    def test_set_bad_number_lenient_flag(self, initialized, config_path, capsys):
        """Test --lenient stores zero for unparsable numbers."""
        assert run("set", "wallet.daily_limit", "not-a-number", "--lenient", *initialized) == 0
        assert ConfigStore(config_path).load().wallet.daily_limit == 0.0

    def test_set_bad_number_lenient_env(self, initialized, config_path, monkeypatch, capsys):
        monkeypatch.setenv("ACM_LENIENT_NUMBERS", "true")
        assert run("set", "monitoring.check_interval", "soon", *initialized) == 0
        assert ConfigStore(config_path).load().monitoring.check_interval_minutes == 0

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
    def test_set_keeps_permissions(self, initialized, config_path, capsys):
        run("set", "api_keys.openai", "sk", *initialized)
        assert stat.S_IMODE(os.stat(config_path).st_mode) == 0o600


class TestValidate:
    """Test the validate command."""

    def test_reports_issues_and_exits_zero(self, initialized, capsys):
        assert run("validate", *initialized) == 0
        out = capsys.readouterr().out

        assert "⚠️  Etherscan API key not set (needed for monitoring)" in out
        assert "⚠️  Basescan API key not set (needed for monitoring)" in out
        assert "Found 2 issue(s)" in out

    def test_valid(self, initialized, capsys):
        run("set", "api_keys.etherscan", "E1", *initialized)
        run("set", "api_keys.basescan", "B1", *initialized)
        capsys.readouterr()

        assert run("validate", *initialized) == 0
        assert "Configuration is valid!" in capsys.readouterr().out

    def test_error_marker(self, cfg, config_path, capsys):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("{}")

        assert run("validate", *cfg) == 0
        out = capsys.readouterr().out
        assert "❌ Wallet address not set" in out
        assert "Found 5 issue(s)" in out


class TestExport:
    """Test the export command."""

    def test_default_directory(self, initialized, config_path, capsys):
        assert run("export", *initialized) == 0
        out = capsys.readouterr().out

        export_dir = config_path.parent / "exports"
        assert f"Exported tool configs to {export_dir}/" in out
        for name in ("wallet-monitor.json", "reputation-scanner.json", "security-dashboard.json"):
            assert f"   - {name}" in out
            assert (export_dir / name).is_file()
        assert json.loads((export_dir / "security-dashboard.json").read_text()) == {"port": 8080}

    def test_output_dir(self, initialized, temp_config_dir, capsys):
        target = temp_config_dir / "elsewhere"
        assert run("export", "--output-dir", str(target), *initialized) == 0
        assert (target / "wallet-monitor.json").is_file()
