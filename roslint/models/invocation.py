"""
Invocation Model

Resolved settings for one validation run, passed explicitly to every step.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from roslint.constants import REMOTE_SETTLE_DELAY, SSH_CONNECTION_TIMEOUT, VERBOSITY_RESULTS
from roslint.models.ssh import ConnectionTarget, SSHConnection


@dataclass
class InvocationConfig:
    """Configuration for validating one script on one device."""

    target: ConnectionTarget
    local_script_path: str
    verbosity: int = VERBOSITY_RESULTS
    identity_file: Optional[str] = None
    connect_timeout: int = SSH_CONNECTION_TIMEOUT
    settle_delay: int = REMOTE_SETTLE_DELAY

    @property
    def remote_filename(self) -> str:
        """Name of the uploaded file on the device (directories stripped)."""
        return Path(self.local_script_path).name

    @property
    def connection(self) -> SSHConnection:
        """Get ssh/scp options for the target device."""
        return SSHConnection(
            target=self.target,
            identity_file=self.identity_file,
            connect_timeout=self.connect_timeout,
        )
