"""Import a directory tree into the tenant with the Auth0 Deploy CLI."""

from __future__ import annotations

from pathlib import Path

from tenant_reset.core import process
from tenant_reset.core.config import Settings


def import_configuration(settings: Settings, *, input_dir: Path, config_file: Path) -> None:
    """
    Overwrite the remote tenant configuration with the contents of `input_dir`.

    The Deploy CLI output is streamed to the terminal. Its retry and diffing
    behaviour is its own business; only the exit status matters here.

    Raises:
        CommandError: If the Deploy CLI exits non-zero
    """
    process.run_command(
        [
            settings.deploy_cli,
            "import",
            "--input_file",
            str(input_dir),
            "--config_file",
            str(config_file),
        ]
    )
