"""
Result Models

Dataclass models for transport calls and the interpreted remote session.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class LintStatus(IntEnum):
    """Process exit status of a validation run."""

    OK = 0
    USAGE_ERROR = 1
    SYNTAX_ERROR = 2


@dataclass
class TransportResult:
    """Result of an ssh or scp invocation."""

    returncode: int
    stdout: str = ""
    stderr: str = ""
    command: str = ""
    duration_seconds: float = 0.0

    @property
    def is_success(self) -> bool:
        """Check if the transport call succeeded."""
        return self.returncode == 0

    @property
    def is_failure(self) -> bool:
        """Check if the transport call failed."""
        return self.returncode != 0

    @property
    def output(self) -> str:
        """Get combined output (stdout + stderr)."""
        return f"{self.stdout}\n{self.stderr}".strip()

    def __repr__(self) -> str:
        return f"TransportResult(returncode={self.returncode}, duration={self.duration_seconds:.2f}s)"


@dataclass(frozen=True)
class RemoteSessionResult:
    """Classification of the captured output of one remote parse command."""

    raw_output: str
    succeeded: bool
    parse_markers_found: bool
    cleanup_confirmed: bool
    exit_status: LintStatus
    error_message: Optional[str] = None
    parse_result: str = ""
    filtered_output: str = ""

    @property
    def is_empty_script(self) -> bool:
        """Check if the device produced no parse output (empty or comment-only script)."""
        return self.parse_markers_found and not self.parse_result.strip()

    def __repr__(self) -> str:
        return (
            f"RemoteSessionResult(status={self.exit_status.name}, "
            f"markers={self.parse_markers_found}, cleanup={self.cleanup_confirmed})"
        )
