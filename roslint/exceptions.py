"""
roslint Exception Hierarchy

Each error carries the exit status the CLI terminates with.
"""

from typing import Optional

from roslint.models.results import LintStatus


class RosLintError(Exception):
    """Base exception for all roslint errors."""

    exit_code: LintStatus = LintStatus.USAGE_ERROR

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message}\nContext: {self.context}"
        return self.message


class UsageError(RosLintError):
    """Raised when command-line arguments cannot be used."""

    pass


class LocalFileNotFoundError(RosLintError):
    """Raised when the script to validate is not a readable file."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Script file not found: {path}")


class SSHError(RosLintError):
    """Raised when the ssh/scp client cannot be started."""

    pass


class UploadError(RosLintError):
    """Raised when copying the script to the device fails."""

    pass


class RemoteSessionIncompleteError(RosLintError):
    """Raised when the remote parse command could not be run at all."""

    exit_code = LintStatus.SYNTAX_ERROR
