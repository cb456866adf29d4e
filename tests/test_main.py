"""Tests for the roslint command-line entry point."""

import pytest
from click.testing import CliRunner

from roslint.commands.lint import lint


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def device(monkeypatch, fake_transport):
    """Route the command's transport to a fake device."""
    transport = fake_transport(execute_output="PARSING_START\n\nPARSING_END\nFILE_REMOVED\n")
    connections = []

    def factory(connection):
        connections.append(connection)
        return transport

    monkeypatch.setattr("roslint.commands.lint.SSHService", factory)
    transport.connections = connections
    return transport


class TestUsage:
    """Argument parsing and usage errors."""

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help_prints_usage_and_exits_one(self, runner, flag):
        result = runner.invoke(lint, [flag])

        assert result.exit_code == 1
        assert "Usage: roslint [-v 0|1|2] [-i <identity_file>]" in result.output
        assert "Examples:" in result.output

    @pytest.mark.parametrize(
        "args",
        [
            [],
            ["router.local"],
            ["-v", "3", "router.local", "a.rsc"],
            ["-v"],
            ["-x", "router.local", "a.rsc"],
            ["router.local", "a.rsc", "extra"],
        ],
    )
    def test_bad_arguments_exit_one(self, runner, device, args):
        result = runner.invoke(lint, args)

        assert result.exit_code == 1
        assert "Usage: roslint" in result.output
        assert device.calls == 0

    def test_empty_host_is_usage_error(self, runner, device, script_file):
        result = runner.invoke(lint, ["admin@", str(script_file)])

        assert result.exit_code == 1
        assert "Invalid connection string" in result.output
        assert device.calls == 0

    def test_version(self, runner):
        result = runner.invoke(lint, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output


class TestValidation:
    """End-to-end runs against a fake device."""

    def test_clean_script(self, runner, device, script_file):
        result = runner.invoke(lint, ["admin@router.local:2222", str(script_file)])

        assert result.exit_code == 0
        assert "Syntax OK" in result.output
        assert device.uploads == [(str(script_file), "firewall.rsc")]
        assert device.connections[0].target.port == 2222

    def test_options_reach_the_transport(self, runner, device, script_file):
        result = runner.invoke(
            lint,
            [
                "-i",
                "/keys/id_router",
                "--connect-timeout",
                "4",
                "--settle-delay",
                "2",
                "router.local",
                str(script_file),
            ],
        )

        assert result.exit_code == 0
        connection = device.connections[0]
        assert connection.identity_file == "/keys/id_router"
        assert connection.connect_timeout == 4
        assert connection.target.username == "admin"
        assert ":delay 2s" in device.commands[0]

    def test_syntax_error(self, runner, device, script_file):
        device.execute_output = (
            "PARSING_START\nsyntax error (line 14 column 60)\nPARSING_END\nFILE_REMOVED\n"
        )

        result = runner.invoke(lint, ["router.local", str(script_file)])

        assert result.exit_code == 2
        assert "syntax error (line 14 column 60)" in result.output

    def test_missing_script(self, runner, device, tmp_path):
        result = runner.invoke(lint, ["router.local", str(tmp_path / "nope.rsc")])

        assert result.exit_code == 1
        assert device.calls == 0

    def test_cleanup_warning_depends_on_verbosity(self, runner, device, script_file):
        device.execute_output = "PARSING_START\n\nPARSING_END\n"

        quiet = runner.invoke(lint, ["router.local", str(script_file)])
        chatty = runner.invoke(lint, ["-v", "1", "router.local", str(script_file)])

        assert quiet.exit_code == chatty.exit_code == 0
        assert "Could not clean up temporary file" not in quiet.output
        assert "Could not clean up temporary file" in chatty.output
