"""Tests for classification of remote parse output."""

import pytest

from roslint.models import LintStatus
from roslint.services.result_interpreter import (
    extract_parse_result,
    filter_sentinels,
    find_syntax_error,
    interpret_output,
    success_message,
)

OK_EMPTY = "PARSING_START\n\nPARSING_END\nFILE_REMOVED\n"
OK_CODE = "PARSING_START\n(evl /ip firewall filter add chain=input)\nPARSING_END\nFILE_REMOVED\n"
SYNTAX = (
    "PARSING_START\n"
    "   syntax error (line 14 column 60)  \n"
    "PARSING_END\n"
    "FILE_REMOVED\n"
)


def test_empty_parse_result_is_ok():
    result = interpret_output(OK_EMPTY)

    assert result.exit_status == LintStatus.OK
    assert result.error_message is None
    assert result.parse_markers_found
    assert result.cleanup_confirmed
    assert result.is_empty_script
    assert success_message(result) == "Syntax OK (empty script or only comments)"


def test_non_empty_parse_result_without_errors_is_ok():
    result = interpret_output(OK_CODE)

    assert result.exit_status == LintStatus.OK
    assert result.parse_result == "(evl /ip firewall filter add chain=input)"
    assert success_message(result) == "Syntax OK"


def test_syntax_error_line_is_reported_trimmed():
    result = interpret_output(SYNTAX)

    assert result.exit_status == LintStatus.SYNTAX_ERROR
    assert result.error_message == "syntax error (line 14 column 60)"


def test_expected_end_of_command_is_case_insensitive():
    raw = "PARSING_START\nExpected End Of Command (line 3 column 7)\nPARSING_END\nFILE_REMOVED"

    result = interpret_output(raw)

    assert result.exit_status == LintStatus.SYNTAX_ERROR
    assert result.error_message == "Expected End Of Command (line 3 column 7)"


def test_first_matching_line_wins():
    raw = (
        "PARSING_START\n"
        "syntax error (line 2 column 1)\n"
        "expected end of command (line 9 column 4)\n"
        "PARSING_END\n"
    )

    assert interpret_output(raw).error_message == "syntax error (line 2 column 1)"


@pytest.mark.parametrize(
    "line",
    [
        "syntax error",
        "syntax error (line x column 2)",
        "bad command name foo (line 1 column 1)",
        "failure: something went wrong",
    ],
)
def test_other_diagnostics_are_not_syntax_errors(line):
    result = interpret_output(f"PARSING_START\n{line}\nPARSING_END\nFILE_REMOVED")

    assert result.exit_status == LintStatus.OK


def test_errors_outside_sentinels_are_ignored():
    raw = "syntax error (line 1 column 1)\nPARSING_START\n\nPARSING_END\nFILE_REMOVED"

    assert interpret_output(raw).exit_status == LintStatus.OK


def test_missing_end_sentinel_is_fatal():
    raw = "PARSING_START\nConnection to router.local closed by remote host.\n"

    result = interpret_output(raw, returncode=255)

    assert result.exit_status == LintStatus.SYNTAX_ERROR
    assert not result.parse_markers_found
    assert not result.succeeded
    assert result.error_message == "Error during script parsing:"
    assert result.filtered_output == "Connection to router.local closed by remote host."


def test_remote_file_not_found_error_is_fatal():
    raw = "failure: File not found: firewall.rsc\n"

    result = interpret_output(raw, returncode=1)

    assert result.exit_status == LintStatus.SYNTAX_ERROR
    assert result.filtered_output == "failure: File not found: firewall.rsc"


def test_missing_cleanup_sentinel_does_not_change_status():
    result = interpret_output("PARSING_START\n\nPARSING_END\n")

    assert result.exit_status == LintStatus.OK
    assert not result.cleanup_confirmed


def test_carriage_returns_are_normalised():
    raw = "PARSING_START\r\nsyntax error (line 1 column 5)\r\nPARSING_END\r\nFILE_REMOVED\r\n"

    assert interpret_output(raw).error_message == "syntax error (line 1 column 5)"


def test_interpretation_is_pure():
    assert interpret_output(SYNTAX) == interpret_output(SYNTAX)
    assert interpret_output(OK_EMPTY) == interpret_output(OK_EMPTY)


def test_filter_sentinels_removes_marker_lines():
    raw = "PARSING_START\nfoo\nPARSING_END\nbar\nFILE_REMOVED"

    assert filter_sentinels(raw) == "foo\nbar"


def test_extract_parse_result_without_start_is_empty():
    assert extract_parse_result("junk\nPARSING_END\n") == ""


def test_find_syntax_error_none_when_clean():
    assert find_syntax_error("(evl /system identity print)") is None
