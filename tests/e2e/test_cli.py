"""End-to-end tests driving the command line entry point."""

import json

import pytest
import yaml

from patternkit.cli import main as cli_main
from patternkit.cli.main import main


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(yaml.safe_dump({
        "environment": "testing",
        "logging": {"level": "WARNING"},
        "storage": {"strategy": "sqlite", "sqlite_path": str(tmp_path / "data" / "cli.db")},
    }))
    return str(path)


def run(capsys, *argv):
    """Run the CLI and return (exit code, stdout, stderr)."""
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


@pytest.mark.e2e
class TestCli:
    """Test CLI commands and exit codes."""

    def test_variants_list(self, capsys, config_file):
        code, out, _ = run(capsys, "--config", config_file, "variants", "list")

        assert code == 0
        variants = json.loads(out)["variants"]
        assert {"capability": "notification", "discriminator": "sms"} in variants
        assert {"capability": "user_repository", "discriminator": "memory"} in variants

    def test_variants_list_for_one_capability(self, capsys, config_file):
        code, out, _ = run(capsys, "--config", config_file, "variants", "list", "--capability", "discount")

        assert code == 0
        assert [v["discriminator"] for v in json.loads(out)["variants"]] == ["fixed", "none", "percentage"]

    def test_unknown_capability(self, capsys, config_file):
        code, _, err = run(capsys, "--config", config_file, "variants", "list", "--capability", "shipping")

        assert code == 1
        assert "Unknown capability 'shipping'" in err

    def test_notify_send(self, capsys, config_file):
        code, out, _ = run(
            capsys, "--config", config_file, "notify", "send", "EMAIL", "ada@example.com", "Hi", "--subject", "Hello"
        )

        assert code == 0
        result = json.loads(out)
        assert result["channel"] == "email"
        assert result["delivered"] is True
        assert "subject: Hello" in result["detail"]

    def test_notify_unknown_channel(self, capsys, config_file):
        code, out, err = run(capsys, "--config", config_file, "notify", "send", "fax", "123", "Hi")

        assert code == 1
        assert out == ""
        assert "Unknown notification discriminator 'fax'" in err
        assert "email, push, sms" in err

    def test_pricing_quote(self, capsys, config_file):
        code, out, _ = run(capsys, "--config", config_file, "pricing", "quote", "percentage", "19.99")

        assert code == 0
        assert json.loads(out) == {
            "strategy": "percentage",
            "subtotal": "19.99",
            "discount": "2.00",
            "total": "17.99",
        }

    def test_pricing_invalid_amount(self, capsys, config_file):
        code, _, err = run(capsys, "--config", config_file, "pricing", "quote", "none", "-5")

        assert code == 1
        assert "must not be negative" in err

    def test_user_lifecycle(self, capsys, config_file):
        code, out, _ = run(capsys, "--config", config_file, "users", "create", "Ada Lovelace", "ada@example.com")
        assert code == 0
        user_id = json.loads(out)["id"]

        code, out, _ = run(capsys, "--config", config_file, "users", "list")
        assert code == 0
        assert [u["email"] for u in json.loads(out)["users"]] == ["ada@example.com"]

        code, out, _ = run(capsys, "--config", config_file, "users", "show", user_id)
        assert json.loads(out)["name"] == "Ada Lovelace"

        code, out, _ = run(capsys, "--config", config_file, "users", "delete", user_id)
        assert json.loads(out) == {"id": user_id, "message": "User deleted"}

        code, _, err = run(capsys, "--config", config_file, "users", "show", user_id)
        assert code == 1
        assert f"User with ID {user_id} not found" in err

    def test_pricing_amount_out_of_range(self, capsys, config_file):
        code, out, err = run(capsys, "--config", config_file, "pricing", "quote", "none", "1e30")

        assert code == 1
        assert out == ""
        assert "Error: Amount out of range" in err

    def test_pricing_negative_zero(self, capsys, config_file):
        code, out, _ = run(capsys, "--config", config_file, "pricing", "quote", "fixed", "-0")

        assert code == 0
        assert json.loads(out)["subtotal"] == "0.00"
        assert json.loads(out)["total"] == "0.00"

    def test_yaml_output(self, capsys, config_file):
        code, out, _ = run(capsys, "--config", config_file, "--format", "yaml", "pricing", "strategies")

        assert code == 0
        assert yaml.safe_load(out) == {"strategies": ["fixed", "none", "percentage"]}

    def test_output_file(self, capsys, config_file, tmp_path):
        target = tmp_path / "channels.json"

        code, out, _ = run(capsys, "--config", config_file, "--output", str(target), "notify", "channels")

        assert code == 0
        assert out.strip() == f"Output written to {target}"
        assert json.loads(target.read_text()) == {"channels": ["email", "push", "sms"]}

    def test_missing_config_file(self, capsys, tmp_path):
        code, _, err = run(capsys, "--config", str(tmp_path / "missing.yml"), "pricing", "strategies")

        assert code == 1
        assert "Configuration file not found" in err

    def test_environment_override(self, capsys, config_file, monkeypatch):
        monkeypatch.setenv("PATTERNKIT_PRICING__FIXED_AMOUNT", "1.25")

        code, out, _ = run(capsys, "--config", config_file, "pricing", "quote", "fixed", "10")

        assert code == 0
        assert json.loads(out)["total"] == "8.75"

    def test_unexpected_error_exit_code(self, capsys, config_file, monkeypatch):
        def boom(args, app):
            raise RuntimeError("boom")

        monkeypatch.setitem(cli_main.COMMAND_HANDLERS, ("pricing", "strategies"), boom)

        code, _, err = run(capsys, "--config", config_file, "pricing", "strategies")

        assert code == 2
        assert "Unexpected error: boom" in err

    def test_missing_resource(self, capsys):
        code, _, err = run(capsys)

        assert code == 1
        assert "No resource specified" in err

    def test_missing_action(self, capsys):
        code, _, err = run(capsys, "users")

        assert code == 1
        assert "No action specified for users" in err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert "patternkit 1.0.0" in capsys.readouterr().out


@pytest.mark.e2e
class TestCliLogging:
    """Test how much the CLI logs to stderr."""

    def _config(self, tmp_path, logging_section=None):
        data = {"storage": {"strategy": "memory"}}
        if logging_section is not None:
            data["logging"] = logging_section
        path = tmp_path / "config.yml"
        path.write_text(yaml.safe_dump(data))
        return str(path)

    def test_quiet_by_default(self, capsys, tmp_path):
        """Test startup events stay off stderr when no level is configured."""
        code, out, err = run(capsys, "--config", self._config(tmp_path), "pricing", "strategies")

        assert code == 0
        assert json.loads(out) == {"strategies": ["fixed", "none", "percentage"]}
        assert err == ""

    def test_configured_level_is_honored(self, capsys, tmp_path):
        code, _, err = run(capsys, "--config", self._config(tmp_path, {"level": "INFO"}), "notify", "channels")

        assert code == 0
        assert "Registered notification variant: email" in err
        assert "Application initialized" in err

    def test_quiet_flag_overrides_configured_level(self, capsys, tmp_path):
        config = self._config(tmp_path, {"level": "INFO"})

        code, _, err = run(capsys, "--config", config, "--quiet", "notify", "channels")

        assert code == 0
        assert err == ""

    def test_log_level_flag_wins(self, capsys, tmp_path):
        code, _, err = run(capsys, "--config", self._config(tmp_path), "--log-level", "DEBUG", "notify", "channels")

        assert code == 0
        assert "Logging configured" in err
        assert "Registered notification variant: sms" in err
