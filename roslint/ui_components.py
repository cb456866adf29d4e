"""
roslint - UI Components
Usage text, headers and result lines
"""

from typing import Optional

from rich.console import Console
from rich.text import Text

from roslint.constants import RELEASE_DATE, TOOL_NAME, VERSION

PROG_NAME = "roslint"

# Color scheme
BRAND_COLOR = "cyan"
SUCCESS_COLOR = "green"
ERROR_COLOR = "red"


def show_usage(console: Optional[Console] = None, prog_name: str = PROG_NAME):
    """
    Print the usage text.

    Args:
        console: Rich Console instance (creates new if None)
        prog_name: Program name shown in the usage lines
    """
    if console is None:
        console = Console(highlight=False)

    lines = [
        f"{TOOL_NAME} v{VERSION} ({RELEASE_DATE})",
        f"Usage: {prog_name} [-v 0|1|2] [-i <identity_file>] <[user@]host[:port]> <script.rsc>",
        "  -v, --verbosity <level>   Verbosity: 0=results only, 1=info, 2=debug (default: 0)",
        "  -i, --identity <file>     SSH identity file (private key)",
        "  --connect-timeout <sec>   SSH connect timeout (default: 10)",
        "  --settle-delay <sec>      Device delay before removing the upload (default: 1)",
        "  --version                 Show the version and exit",
        "  -h, --help                Show this help message",
        "",
        "Examples:",
        f"  {prog_name} -v 1 admin@router.local script.rsc",
        f"  {prog_name} -i ~/.ssh/router_id_rsa 192.168.1.1:2222 script.rsc",
    ]
    for line in lines:
        console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)


def show_header(
    title: str,
    details: Optional[dict] = None,
    console: Optional[Console] = None,
):
    """
    Display a minimal command header.

    Args:
        title: Main title (e.g., "Validate Script")
        details: Additional key-value pairs to display
        console: Rich Console instance (creates new if None)

    Example:
        show_header(
            title="Validate Script",
            details={"Target": "admin@router.local:22", "Script": "firewall.rsc"},
        )
    """
    if console is None:
        console = Console(stderr=True)

    prefix = f" [bold color(214)]{PROG_NAME}[/bold color(214)] [dim]›[/dim] "
    console.print(f"{prefix}[bold white]{title}[/bold white]")

    if details:
        for key, value in details.items():
            line = Text.from_markup(f"{prefix}{key}: ")
            line.append(str(value), style=BRAND_COLOR)
            console.print(line, soft_wrap=True)

    console.print()


def print_success(message: str, console: Optional[Console] = None):
    """Print a ✓ result line."""
    if console is None:
        console = Console()
    line = Text("✓", style=SUCCESS_COLOR)
    line.append(f" {message}")
    console.print(line, soft_wrap=True)


def print_failure(message: str, console: Optional[Console] = None):
    """Print a ✗ result line."""
    if console is None:
        console = Console()
    console.print(Text(f"✗ {message}", style=ERROR_COLOR), soft_wrap=True)


def print_raw_output(output: str, console: Optional[Console] = None):
    """Print device output verbatim (no markup interpretation)."""
    if console is None:
        console = Console()
    if output:
        console.print(output, markup=False, emoji=False, highlight=False, soft_wrap=True)
