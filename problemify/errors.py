"""
Error definitions for problemify.

Error codes follow the pattern:
- INVALID_*: Invocation errors (user fix needed, nothing touched yet)
- FILESYSTEM_ERROR: Fatal I/O failure during discovery or processing

Malformed or unbalanced markers are never an error; they are left in the
output unmatched.
"""

from enum import Enum, IntEnum
from pathlib import Path
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for problemify runs."""

    INVALID_ARGUMENTS = "INVALID_ARGUMENTS"
    """Mode or path argument missing or invalid.
    Action: Re-run with -p/--problem or -s/--solution and a path."""

    FILESYSTEM_ERROR = "FILESYSTEM_ERROR"
    """A path could not be listed, read, decoded, deleted or written.
    Action: Check the path and permissions. Files processed before the
    failure stay transformed; there is no rollback."""


class ExitCode(IntEnum):
    """Process exit codes."""

    OK = 0
    USAGE_ERROR = 1
    FILESYSTEM_ERROR = 2


class ProblemifyError(Exception):
    """
    Base exception for problemify errors.

    Provides a structured representation for logging.
    """

    exit_code: ExitCode = ExitCode.USAGE_ERROR

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        *,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize error.

        Args:
            code: Error code from ErrorCode enum.
            message: Human-readable error message.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Convert error to a plain dictionary.

        Returns:
            Dictionary suitable for structured log output.
        """
        result: dict[str, Any] = {
            "ok": False,
            "error_code": self.code.value,
            "error": self.message,
        }

        if self.details:
            result["details"] = self.details

        return result


class UsageError(ProblemifyError):
    """Raised when command-line arguments are missing or invalid."""

    exit_code = ExitCode.USAGE_ERROR

    def __init__(
        self,
        message: str,
        *,
        param_name: str | None = None,
        received: Any = None,
    ):
        details = {}
        if param_name:
            details["param_name"] = param_name
        if received is not None:
            details["received"] = str(received)

        super().__init__(
            ErrorCode.INVALID_ARGUMENTS,
            message,
            details=details if details else None,
        )


class FilesystemError(ProblemifyError):
    """Raised when a filesystem operation fails. Always fatal for the run."""

    exit_code = ExitCode.FILESYSTEM_ERROR

    def __init__(
        self,
        path: str | Path,
        operation: str,
        *,
        reason: str | None = None,
    ):
        details: dict[str, Any] = {"path": str(path), "operation": operation}
        if reason:
            details["reason"] = reason

        message = f"Cannot {operation} {path}"
        if reason:
            message = f"{message}: {reason}"

        super().__init__(
            ErrorCode.FILESYSTEM_ERROR,
            message,
            details=details,
        )
        self.path = Path(path)
        self.operation = operation
