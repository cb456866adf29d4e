"""
Transport Interface

Capabilities the lint flow needs from a remote shell client.
"""

from abc import ABC, abstractmethod

from roslint.models.results import TransportResult


class Transport(ABC):
    """File upload and remote command execution on one device."""

    @abstractmethod
    def upload(self, local_path: str, remote_name: str) -> TransportResult:
        """
        Copy a local file to the device.

        Args:
            local_path: Path of the file on this machine
            remote_name: File name on the device

        Returns:
            TransportResult of the copy
        """
        pass

    @abstractmethod
    def execute(self, command: str) -> TransportResult:
        """
        Run a command on the device and capture its output.

        Args:
            command: Remote command line

        Returns:
            TransportResult with stdout and stderr
        """
        pass
