"""SSH service for uploading files and executing commands on a RouterOS device."""

import subprocess
import time

from roslint.exceptions import SSHError
from roslint.models.results import TransportResult
from roslint.models.ssh import SSHConnection
from roslint.services.transport import Transport


class SSHService(Transport):
    """Transport backed by the system ssh and scp binaries."""

    def __init__(self, connection: SSHConnection):
        """
        Initialize SSH service.

        Args:
            connection: Target device and shared ssh/scp options
        """
        self.connection = connection

    def _run(self, argv: list[str], description: str, merge_stderr: bool = False) -> TransportResult:
        start_time = time.time()

        # Merged streams keep the device's output order (2>&1)
        streams = (
            {"stdout": subprocess.PIPE, "stderr": subprocess.STDOUT}
            if merge_stderr
            else {"capture_output": True}
        )

        try:
            result = subprocess.run(argv, text=True, **streams)
        except OSError as e:
            raise SSHError(
                f"{argv[0]} failed to start: {e}",
                context=f"Host: {self.connection.target}, {description}",
            )

        return TransportResult(
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            command=" ".join(argv),
            duration_seconds=time.time() - start_time,
        )

    def upload(self, local_path: str, remote_name: str) -> TransportResult:
        """
        Copy a file to the device via scp.

        Args:
            local_path: Local file to copy
            remote_name: Destination file name in the login directory

        Returns:
            TransportResult of the scp call
        """
        argv = self.connection.build_upload(local_path, remote_name)
        return self._run(argv, f"Upload: {local_path} -> {remote_name}")

    def execute(self, command: str) -> TransportResult:
        """
        Execute command on the device via ssh.

        Args:
            command: RouterOS command line

        Returns:
            TransportResult with stdout and stderr merged in arrival order
        """
        argv = self.connection.build_command(command)
        return self._run(argv, "Command: remote parse", merge_stderr=True)
