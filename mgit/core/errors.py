"""Error codes for CLI exit status.

The values map directly to shell exit codes and should remain stable:
- 0: Success
- 1: User error (unreadable or invalid config file)
- 2: Usage error (reserved: raised by typer/click on bad arguments)
- 3: Command error (a git command failed, strict mode only)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the mgit CLI."""

    OK = 0
    USER_ERROR = 1
    USAGE_ERROR = 2
    COMMAND_ERROR = 3
