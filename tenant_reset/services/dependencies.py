"""Check that the external CLIs the reset relies on are installed."""

from __future__ import annotations

from dataclasses import dataclass

from tenant_reset.core import process
from tenant_reset.core.config import Settings
from tenant_reset.core.errors import MissingDependencyError
from tenant_reset.core.observability import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Dependency:
    executable: str
    label: str
    install_hints: tuple[str, ...]


def required_dependencies(settings: Settings) -> list[Dependency]:
    """The Auth0 CLI (role purge) and the Auth0 Deploy CLI (import)."""
    return [
        Dependency(
            executable=settings.deploy_cli,
            label="Auth0 Deploy CLI",
            install_hints=("npm install -g auth0-deploy-cli",),
        ),
        Dependency(
            executable=settings.auth0_cli,
            label="Auth0 CLI",
            install_hints=(
                "On macOS: brew tap auth0/auth0-cli && brew install auth0",
                "On Linux: curl -sSfL https://raw.githubusercontent.com/auth0/auth0-cli/main/install.sh | sh -s -- -b /usr/local/bin",
                "On Windows: scoop bucket add auth0 https://github.com/auth0/scoop-auth0-cli.git && scoop install auth0",
            ),
        ),
    ]


def check_dependencies(settings: Settings) -> None:
    """
    Verify every required executable resolves on PATH.

    All missing executables are reported before giving up.

    Raises:
        MissingDependencyError: If at least one executable is missing
    """
    missing: list[Dependency] = []
    for dependency in required_dependencies(settings):
        path = process.which(dependency.executable)
        if path is None:
            print(f"[ERROR] {dependency.label} is not installed. Please install it first:")
            for hint in dependency.install_hints:
                print(f"  {hint}")
            missing.append(dependency)
        else:
            logger.debug(
                "Found dependency",
                extra={"executable": dependency.executable, "path": path},
            )

    if missing:
        raise MissingDependencyError(
            [d.executable for d in missing],
            {"labels": [d.label for d in missing]},
        )
