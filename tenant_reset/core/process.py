"""
External command execution.

All calls to the Auth0 CLI and the Auth0 Deploy CLI go through
`run_command`, which blocks until the process exits and raises
`CommandError` on a non-zero exit status.
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence

from tenant_reset.core.errors import CommandError
from tenant_reset.core.observability import get_logger

logger = get_logger(__name__)


def which(executable: str) -> str | None:
    """Resolve an executable on PATH."""
    return shutil.which(executable)


def run_command(cmd: Sequence[str], *, capture: bool = False) -> subprocess.CompletedProcess:
    """
    Run a command and return the completed process.

    Args:
        cmd: Command and arguments to execute
        capture: Capture stdout/stderr as text instead of streaming them to the terminal

    Raises:
        CommandError: If the executable cannot be started or exits non-zero
    """
    argv = [str(part) for part in cmd]
    print(f"  > {' '.join(argv)}")
    logger.debug("Running command", extra={"cmd": argv, "capture": capture})

    try:
        result = subprocess.run(
            argv,
            check=False,
            capture_output=capture,
            text=True,
            encoding="utf-8",
        )
    except FileNotFoundError as e:
        raise CommandError(f"Command not found: {argv[0]}", cmd=argv) from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip() if capture else ""
        logger.error(
            "Command failed",
            extra={"cmd": argv, "returncode": result.returncode, "stderr": stderr},
        )
        message = f"Command failed with exit status {result.returncode}: {' '.join(argv)}"
        if stderr:
            message = f"{message}\n{stderr}"
        raise CommandError(message, cmd=argv, returncode=result.returncode, stderr=stderr)

    return result
