"""
roslint Services Layer

Transport, remote command construction and result interpretation.
"""

from .transport import Transport
from .ssh_service import SSHService
from .remote_command import build_parse_command, describe_parse_command
from .result_interpreter import interpret_output

__all__ = [
    "Transport",
    "SSHService",
    "build_parse_command",
    "describe_parse_command",
    "interpret_output",
]
