"""
roslint Constants

Centralized defaults, remote protocol literals and messages.
"""

TOOL_NAME = "RouterOS Script Linter and Syntax Validator"
VERSION = "1.0.0"
RELEASE_DATE = "2025-06-21"

# Connection defaults
DEFAULT_USER = "admin"
DEFAULT_PORT = 22

# SSH Timeout Configuration
SSH_CONNECTION_TIMEOUT = 10

# Seconds the device waits after parsing before removing the uploaded file
REMOTE_SETTLE_DELAY = 1

# Remote protocol sentinels
PARSING_START = "PARSING_START"
PARSING_END = "PARSING_END"
FILE_REMOVED = "FILE_REMOVED"

# Verbosity levels
VERBOSITY_RESULTS = 0
VERBOSITY_INFO = 1
VERBOSITY_DEBUG = 2

# Result messages
SUCCESS_SYNTAX_OK = "Syntax OK"
SUCCESS_SYNTAX_OK_EMPTY = "Syntax OK (empty script or only comments)"
ERROR_PARSING_FAILED = "Error during script parsing:"
WARNING_CLEANUP_UNCONFIRMED = "Could not clean up temporary file"
INFO_CLEANUP_CONFIRMED = "Cleaned up temporary file"
