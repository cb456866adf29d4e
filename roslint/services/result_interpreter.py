"""
Result Interpreter

Classifies the captured output of the remote parse command. Everything here
is a pure function of the captured text so it can be tested without a device.
"""

import re
from typing import Optional

from roslint.constants import (
    ERROR_PARSING_FAILED,
    FILE_REMOVED,
    PARSING_END,
    PARSING_START,
    SUCCESS_SYNTAX_OK,
    SUCCESS_SYNTAX_OK_EMPTY,
)
from roslint.models.results import LintStatus, RemoteSessionResult

# Only these two RouterOS messages are treated as syntax errors
SYNTAX_ERROR_PATTERN = re.compile(
    r"syntax error \(line [0-9]+ column [0-9]+\)"
    r"|expected end of command \(line [0-9]+ column [0-9]+\)",
    re.IGNORECASE,
)

_SENTINEL_PATTERN = re.compile(r"PARSING_|" + FILE_REMOVED)


def filter_sentinels(raw_output: str) -> str:
    """Drop every line that carries one of the protocol sentinels."""
    return "\n".join(
        line for line in raw_output.splitlines() if not _SENTINEL_PATTERN.search(line)
    )


def extract_parse_result(raw_output: str) -> str:
    """
    Return the lines printed between the start and end sentinels.

    Sentinel lines themselves are excluded. Output after an end sentinel is
    ignored until another start sentinel appears.
    """
    collected = []
    inside = False

    for line in raw_output.splitlines():
        if not inside:
            if PARSING_START in line:
                inside = True
            continue
        if PARSING_END in line:
            inside = False
            continue
        if _SENTINEL_PATTERN.search(line):
            continue
        collected.append(line)

    return "\n".join(collected)


def find_syntax_error(parse_result: str) -> Optional[str]:
    """Return the first line reporting a syntax error, trimmed, or None."""
    for line in parse_result.splitlines():
        if SYNTAX_ERROR_PATTERN.search(line):
            return line.strip()
    return None


def interpret_output(raw_output: str, returncode: int = 0) -> RemoteSessionResult:
    """
    Classify the output of one remote parse command.

    Args:
        raw_output: Combined stdout/stderr captured from the device
        returncode: Exit status reported by the transport

    Returns:
        RemoteSessionResult with the derived exit status and message
    """
    cleanup_confirmed = FILE_REMOVED in raw_output

    if PARSING_END not in raw_output:
        return RemoteSessionResult(
            raw_output=raw_output,
            succeeded=returncode == 0,
            parse_markers_found=False,
            cleanup_confirmed=cleanup_confirmed,
            exit_status=LintStatus.SYNTAX_ERROR,
            error_message=ERROR_PARSING_FAILED,
            filtered_output=filter_sentinels(raw_output),
        )

    parse_result = extract_parse_result(raw_output)
    syntax_error = find_syntax_error(parse_result)

    return RemoteSessionResult(
        raw_output=raw_output,
        succeeded=returncode == 0,
        parse_markers_found=True,
        cleanup_confirmed=cleanup_confirmed,
        exit_status=LintStatus.SYNTAX_ERROR if syntax_error else LintStatus.OK,
        error_message=syntax_error,
        parse_result=parse_result,
        filtered_output=filter_sentinels(raw_output),
    )


def success_message(result: RemoteSessionResult) -> str:
    """Message printed for a script that parsed cleanly."""
    if result.is_empty_script:
        return SUCCESS_SYNTAX_OK_EMPTY
    return SUCCESS_SYNTAX_OK
