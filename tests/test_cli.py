"""Tests for the agent-browser-flags command."""

import json
import logging
from pathlib import Path

import pytest
from agent_browser_cli.cli import cli
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "AGENT_BROWSER_SESSION",
        "AGENT_BROWSER_EXECUTABLE_PATH",
        "AGENT_BROWSER_SESSION_NAME",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    """Tests for the cli command."""

    def test_json_output(self, runner):
        """Test --json prints flags and residual arguments."""
        result = runner.invoke(
            cli, ["--json", "--executable-path", "/path/to/chromium", "--headed", "open", "example.com"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["args"] == ["open", "example.com"]
        assert data["flags"]["headed"] is True
        assert data["flags"]["executable_path"] == "/path/to/chromium"
        assert data["flags"]["session"] == "default"

    def test_unknown_options_pass_through(self, runner):
        """Test subcommand flags reach the residual arguments."""
        result = runner.invoke(cli, ["click", "@e1", "--button", "right", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["args"] == ["click", "@e1", "--button", "right"]

    def test_invalid_session_name_exits(self, runner):
        """Test validation errors are reported with a non-zero exit."""
        result = runner.invoke(cli, ["--session-name", "../bad", "open", "example.com"])

        assert result.exit_code == 1
        assert "Invalid session name '../bad'" in result.output

    def test_invalid_env_session_name_exits(self, runner, monkeypatch):
        """Test an invalid environment session name fails the command."""
        monkeypatch.setenv("AGENT_BROWSER_SESSION_NAME", "a b")

        result = runner.invoke(cli, ["open"])

        assert result.exit_code == 1
        assert "Invalid AGENT_BROWSER_SESSION_NAME 'a b'" in result.output

    def test_env_defaults(self, runner, monkeypatch):
        """Test environment defaults show up in the flags."""
        monkeypatch.setenv("AGENT_BROWSER_SESSION", "agent1")
        monkeypatch.setenv("AGENT_BROWSER_SESSION_NAME", "twitter")

        result = runner.invoke(cli, ["--json", "snapshot"])

        assert result.exit_code == 0
        flags = json.loads(result.output)["flags"]
        assert flags["session"] == "agent1"
        assert flags["session_name"] == "twitter"

    def test_table_output(self, runner):
        """Test the human-readable output."""
        result = runner.invoke(cli, ["--cdp", "ws://localhost:9222", "open", "example.com"])

        assert result.exit_code == 0
        assert "ws://localhost:9222" in result.output
        assert "Command: open example.com" in result.output

    def test_no_command(self, runner):
        """Test output when only global flags are given."""
        result = runner.invoke(cli, ["--headed"])

        assert result.exit_code == 0
        assert "Command: (none)" in result.output

    def test_end_of_options_marker_kept(self, runner):
        """Test a literal -- reaches the residual arguments."""
        result = runner.invoke(cli, ["--json", "eval", "--", "-x"])

        assert result.exit_code == 0
        assert json.loads(result.output)["args"] == ["eval", "--", "-x"]

    def test_leading_end_of_options_marker_kept(self, runner):
        """Test a -- before any command token is kept too."""
        result = runner.invoke(cli, ["--json", "--", "--headed"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["args"] == ["--"]
        assert data["flags"]["headed"] is True

    def test_help_passes_through(self, runner):
        """Test --help is left for the subcommand."""
        result = runner.invoke(cli, ["--json", "open", "--help"])

        assert result.exit_code == 0
        assert json.loads(result.output)["args"] == ["open", "--help"]


class TestCliDebug:
    """Tests for --debug logging in the cli command."""

    def test_logs_state_file(self, runner, caplog, monkeypatch, tmp_path):
        """Test the session state file path is logged."""
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        caplog.set_level(logging.DEBUG, logger="agent_browser_cli")

        result = runner.invoke(cli, ["--debug", "--session-name", "twitter", "--json", "open"])

        assert result.exit_code == 0
        expected = tmp_path / ".agent-browser" / "sessions" / "twitter-default.json"
        assert f"Session state file: {expected}" in caplog.text

    def test_warns_on_unsafe_session_id(self, runner, caplog):
        """Test an unusable session ID is a warning, not a failure."""
        caplog.set_level(logging.DEBUG, logger="agent_browser_cli")

        result = runner.invoke(
            cli, ["--debug", "--session-name", "twitter", "--session", "../x", "--json", "open"]
        )

        assert result.exit_code == 0
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Invalid session ID '../x'" in warnings[0].getMessage()

    def test_no_state_file_without_debug(self, runner, caplog):
        """Test nothing is logged about state files without --debug."""
        caplog.set_level(logging.DEBUG, logger="agent_browser_cli")

        result = runner.invoke(cli, ["--session-name", "twitter", "--json", "open"])

        assert result.exit_code == 0
        assert "Session state file" not in caplog.text
