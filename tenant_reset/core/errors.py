"""
Domain-specific exceptions for the tenant reset tool.

Every failure that stops a run is raised as one of these and mapped to a
process exit status by the CLI.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class TenantResetError(Exception):
    """Base exception for all tenant reset errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class MissingDependencyError(TenantResetError):
    """
    Raised when required executables cannot be found on PATH.

    Raised before anything is written or deleted.

    Exit status: 1
    """

    def __init__(self, missing: Sequence[str], details: dict[str, Any] | None = None):
        self.missing = list(missing)
        super().__init__(f"Missing required executables: {', '.join(self.missing)}", details)


class CredentialsError(TenantResetError):
    """
    Raised when the credential file cannot be written or read back.

    An incomplete credential file is NOT an error: it triggers re-collection.

    Exit status: 1
    """

    pass


class ScaffoldError(TenantResetError):
    """
    Raised when the empty tenant tree cannot be created or removed.

    Examples:
    - base directory is read-only
    - a file sits where the scaffold directory should be created

    Exit status: 1
    """

    pass


class CommandError(TenantResetError):
    """
    Raised when an external command fails.

    Examples:
    - `auth0 roles list` exits non-zero
    - `auth0 roles list --json` prints something that is not a JSON array
    - `a0deploy import` exits non-zero

    Exit status: the command's own return code (1 when unknown)
    """

    def __init__(
        self,
        message: str,
        *,
        cmd: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            message,
            {"cmd": self.cmd, "returncode": returncode, "stderr": stderr},
        )


class ResetCancelled(TenantResetError):
    """
    Raised when the operator declines the destructive confirmation.

    Cancelling is a normal outcome.

    Exit status: 0
    """

    pass


# Exit status mapping
ERROR_EXIT_MAP = {
    MissingDependencyError: 1,
    CredentialsError: 1,
    ScaffoldError: 1,
    ResetCancelled: 0,
}


def get_exit_code(error: Exception) -> int:
    """
    Get the process exit status for a given exception.

    Args:
        error: The exception instance

    Returns:
        Exit status (defaults to 1 for unknown errors)
    """
    if isinstance(error, CommandError):
        return error.returncode or 1
    return ERROR_EXIT_MAP.get(type(error), 1)
