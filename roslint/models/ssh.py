"""
SSH Connection Models

Dataclass models describing the device login and the ssh/scp invocations.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from roslint.constants import DEFAULT_PORT, DEFAULT_USER, SSH_CONNECTION_TIMEOUT


def scp_local_source(local_path: str) -> str:
    """
    Make a local path unambiguous for scp.

    scp reads ``name:rest`` as ``host:path`` when the colon comes before any
    slash, so relative paths are anchored with ``./``.
    """
    if Path(local_path).is_absolute() or local_path.startswith("./"):
        return local_path
    return f"./{local_path}"


@dataclass
class ConnectionTarget:
    """Device login parsed from ``[user@]host[:port]``."""

    host: str
    username: str = DEFAULT_USER
    port: int = DEFAULT_PORT

    @classmethod
    def parse(cls, raw: str) -> "ConnectionTarget":
        """
        Split a connection string into its components.

        The username is everything before the first ``@`` and the port
        everything after the first ``:`` of the remainder. The host name
        itself is not validated; the transport reports unreachable hosts.

        Args:
            raw: Connection string, e.g. ``admin@router.local:2222``

        Returns:
            ConnectionTarget with defaults applied

        Raises:
            UsageError: If the host is empty or the port is not a number
        """
        from roslint.exceptions import UsageError

        if "@" in raw:
            username, host_port = raw.split("@", 1)
        else:
            username, host_port = DEFAULT_USER, raw

        if ":" in host_port:
            host, port_str = host_port.split(":", 1)
        else:
            host, port_str = host_port, str(DEFAULT_PORT)

        if not host:
            raise UsageError(
                f"Invalid connection string '{raw}'",
                context="Expected [user@]host[:port]",
            )

        try:
            port = int(port_str)
        except ValueError:
            raise UsageError(
                f"Invalid port '{port_str}' in connection string '{raw}'",
                context="Expected [user@]host[:port]",
            )

        return cls(host=host, username=username, port=port)

    @property
    def login(self) -> str:
        """Get SSH login string (user@host)."""
        return f"{self.username}@{self.host}"

    def __str__(self) -> str:
        return f"{self.login}:{self.port}"


@dataclass
class SSHConnection:
    """Options shared by the ssh and scp invocations for one device."""

    target: ConnectionTarget
    identity_file: Optional[str] = None
    connect_timeout: int = SSH_CONNECTION_TIMEOUT

    @property
    def identity_file_expanded(self) -> Optional[Path]:
        """Get expanded identity file path (resolves ~)."""
        if self.identity_file:
            return Path(self.identity_file).expanduser()
        return None

    def _common_options(self) -> list[str]:
        options = [
            "-o",
            "BatchMode=yes",
            "-o",
            f"ConnectTimeout={self.connect_timeout}",
            "-o",
            "StrictHostKeyChecking=accept-new",
        ]
        if self.identity_file_expanded:
            options += ["-i", str(self.identity_file_expanded)]
        return options

    @property
    def ssh_command_prefix(self) -> list[str]:
        """Get ssh command prefix for subprocess."""
        return (
            ["ssh"]
            + self._common_options()
            + ["-p", str(self.target.port), self.target.login]
        )

    def build_command(self, remote_command: str) -> list[str]:
        """Build full ssh command with remote command."""
        return self.ssh_command_prefix + [remote_command]

    def build_upload(self, local_path: str, remote_name: str) -> list[str]:
        """Build scp command copying a local file into the login directory."""
        return (
            ["scp"]
            + self._common_options()
            + [
                "-P",
                str(self.target.port),
                scp_local_source(local_path),
                f"{self.target.login}:{remote_name}",
            ]
        )

    def __repr__(self) -> str:
        return f"SSHConnection(target={self.target}, identity={self.identity_file})"
