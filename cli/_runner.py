"""
Shared runner for the development command wrappers.

Runs a command in the current (uv-managed) environment and exits with the
command's own status.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

# Source trees checked by the lint and format wrappers
SOURCE_DIRS = ("tenant_reset", "cli", "tests")


def run(cmd: Sequence[str]) -> None:
    """
    Run a command and propagate its exit status.

    Args:
        cmd: Command and arguments to execute

    Example:
        >>> run([sys.executable, "-m", "pytest", "-q"])
    """
    result = subprocess.run(cmd)
    raise SystemExit(result.returncode)
