"""
Base Command Class

Abstract base for roslint commands.
Provides consoles, logging and error-to-exit-status conversion.
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console

from roslint.exceptions import RosLintError
from roslint.logger import LintLogger
from roslint.models.results import LintStatus
from roslint.ui_components import print_failure, print_success, show_header


class BaseCommand(ABC):
    """
    Abstract base command class.

    Provides:
    - Logger initialization from an explicit verbosity
    - Header display
    - Error handling with classified exit statuses
    """

    def __init__(
        self,
        verbosity: int = 0,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        self.verbosity = verbosity
        self.console = console or Console(highlight=False)
        self.logger = LintLogger(verbosity, console=err_console)

    def show_header(self, title: str, details: Optional[dict] = None) -> None:
        """
        Show command header (verbosity >= 1, on the log console).

        Args:
            title: Header title
            details: Additional details dict
        """
        if self.logger.is_info:
            show_header(title=title, details=details, console=self.logger.console)

    def print_success(self, message: str) -> None:
        """Print success result line."""
        print_success(message, console=self.console)

    def print_error(self, message: str) -> None:
        """Print failure result line."""
        print_failure(message, console=self.console)

    def handle_error(self, error: RosLintError) -> LintStatus:
        """
        Log error with consistent formatting.

        Args:
            error: roslint exception

        Returns:
            Exit status for the error
        """
        self.logger.error(error.message, context=error.context)
        return error.exit_code

    @abstractmethod
    def execute(self) -> LintStatus:
        """
        Execute command logic.

        Must be implemented by subclasses.
        """
        pass

    def run(self) -> int:
        """
        Run command with error handling.

        Returns:
            Process exit status
        """
        try:
            return int(self.execute())
        except KeyboardInterrupt:
            self.logger.console.print("\n[yellow]⚠️  Operation cancelled by user[/yellow]")
            return 130
        except RosLintError as e:
            return int(self.handle_error(e))
