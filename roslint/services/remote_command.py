"""
Remote Command Builder

Builds the single RouterOS command that parses an uploaded script without
running it and removes the file in the same session.
"""

from roslint.constants import FILE_REMOVED, PARSING_END, PARSING_START, REMOTE_SETTLE_DELAY


def quote_routeros(value: str) -> str:
    """Wrap a value in a RouterOS string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
    return f'"{escaped}"'


def build_parse_command(remote_filename: str, settle_delay: int = REMOTE_SETTLE_DELAY) -> str:
    """
    Build the remote parse command for an uploaded script.

    The device checks the file exists, prints the output of ``:parse`` for the
    file contents between the PARSING_START/PARSING_END sentinels, waits
    ``settle_delay`` seconds, deletes the file and prints FILE_REMOVED.

    Args:
        remote_filename: Name of the uploaded file on the device
        settle_delay: Seconds to wait before removing the file

    Returns:
        RouterOS command line
    """
    name = quote_routeros(remote_filename)
    not_found = quote_routeros(f"File not found: {remote_filename}")

    parse_steps = "; ".join(
        [
            f":local scriptContent [/file get {name} contents]",
            f':put "{PARSING_START}"',
            ":put [:parse $scriptContent]",
            f':put "{PARSING_END}"',
            f":delay {settle_delay}s",
            f"/file remove {name}",
            f':put "{FILE_REMOVED}"',
        ]
    )

    return (
        f':if ([/file find name={name}] = "") do={{ :error ({not_found}) }} '
        f"else={{ {parse_steps} }}"
    )


def describe_parse_command(remote_filename: str) -> list[str]:
    """Human-readable outline of the remote steps, shown in debug output."""
    name = quote_routeros(remote_filename)
    return [
        f"1. Check if file exists: /file find name={name}",
        f"2. Get file contents and parse: :local scriptContent [/file get {name} contents]",
        "   :put [:parse $scriptContent]",
        f"3. Clean up file: /file remove {name}",
    ]
