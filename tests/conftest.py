"""Shared fixtures for roslint tests."""

import io

import pytest
from rich.console import Console

from roslint.models import ConnectionTarget, InvocationConfig, TransportResult
from roslint.services import Transport


class FakeTransport(Transport):
    """Transport that records calls and replays canned results."""

    def __init__(self, upload_result=None, execute_output="", execute_returncode=0):
        self.upload_result = upload_result or TransportResult(returncode=0)
        self.execute_output = execute_output
        self.execute_returncode = execute_returncode
        self.uploads = []
        self.commands = []

    @property
    def calls(self) -> int:
        return len(self.uploads) + len(self.commands)

    def upload(self, local_path, remote_name):
        self.uploads.append((local_path, remote_name))
        return self.upload_result

    def execute(self, command):
        self.commands.append(command)
        return TransportResult(
            returncode=self.execute_returncode,
            stdout=self.execute_output,
            command=command,
        )


class BufferConsoles:
    """Plain-text stdout/stderr consoles writing into buffers."""

    def __init__(self):
        self.out = Console(file=io.StringIO(), width=200, color_system=None, highlight=False)
        self.err = Console(file=io.StringIO(), width=200, color_system=None, highlight=False)

    @property
    def stdout(self) -> str:
        return self.out.file.getvalue()

    @property
    def stderr(self) -> str:
        return self.err.file.getvalue()


@pytest.fixture
def fake_transport():
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture
def consoles():
    return BufferConsoles()


@pytest.fixture
def script_file(tmp_path):
    """A small RouterOS script on disk."""
    path = tmp_path / "firewall.rsc"
    path.write_text('/ip firewall filter add chain=input action=accept comment="ok"\n')
    return path


@pytest.fixture
def make_config(script_file):
    """Build an InvocationConfig for the script fixture."""

    def _make(verbosity=0, path=None):
        return InvocationConfig(
            target=ConnectionTarget.parse("admin@router.local"),
            local_script_path=str(path or script_file),
            verbosity=verbosity,
        )

    return _make
