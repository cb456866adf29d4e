#!/usr/bin/env python3
"""roslint - Main entry point"""

import functools
import sys

from rich.console import Console
from rich.markup import escape

from roslint.commands.lint import lint

console = Console(stderr=True)


def handle_cli_errors(func):
    """Decorator to handle CLI errors gracefully."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            console.print("\n\n[yellow]⚠️  Operation cancelled by user[/yellow]")
            sys.exit(130)
        except Exception as e:
            # Unexpected errors
            console.print(f"\n[bold red]✗ Unexpected error:[/bold red] {escape(str(e))}\n")
            console.print("[dim]If this persists, please report this issue.[/dim]\n")
            sys.exit(1)

    return wrapper


@handle_cli_errors
def main():
    """Main entry point with error handling."""
    lint()


if __name__ == "__main__":
    main()
