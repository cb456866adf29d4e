"""
Logging system for roslint
Diagnostics go to stderr, gated by the verbosity chosen on the command line
"""

from typing import Optional

from rich.console import Console
from rich.text import Text

from roslint.constants import VERBOSITY_DEBUG, VERBOSITY_INFO


class LintLogger:
    """
    Verbosity-aware console logger

    - 0: errors only
    - 1: info and warnings
    - 2: debug, including the remote command and its raw output
    """

    def __init__(self, verbosity: int = 0, console: Optional[Console] = None):
        """
        Initialize logger

        Args:
            verbosity: Verbosity level (0, 1 or 2)
            console: Console to write to (defaults to stderr)
        """
        self.verbosity = verbosity
        self.console = console or Console(stderr=True, highlight=False)

    @property
    def is_info(self) -> bool:
        return self.verbosity >= VERBOSITY_INFO

    @property
    def is_debug(self) -> bool:
        return self.verbosity >= VERBOSITY_DEBUG

    def _emit(self, label: str, style: str, message: str) -> None:
        line = Text()
        line.append(f"[{label}]", style=style)
        line.append(f" {message}")
        self.console.print(line, soft_wrap=True)

    def info(self, message: str):
        """Log an informational message (verbosity >= 1)"""
        if self.is_info:
            self._emit("INFO", "cyan", message)

    def debug(self, message: str):
        """Log a debug message (verbosity >= 2)"""
        if self.is_debug:
            self._emit("DEBUG", "dim", message)

    def warning(self, message: str):
        """Log a warning message (verbosity >= 1)"""
        if self.is_info:
            self._emit("WARN", "yellow", message)

    def error(self, error: str, context: Optional[str] = None):
        """
        Log an error with context

        Errors are always shown, whatever the verbosity.

        Args:
            error: Error message
            context: Additional context (e.g., command that failed)
        """
        self._emit("ERROR", "red", error)
        if context:
            self.console.print(Text(f"  Context: {context}", style="color(208)"))

    def log_output(self, output: str):
        """
        Log captured remote output, indented (verbosity >= 2)

        Args:
            output: Command output (single line or multiline)
        """
        if not self.is_debug or output is None:
            return
        for line in output.splitlines() or [""]:
            self.console.print(f"  {line}", markup=False, emoji=False, highlight=False, soft_wrap=True)
