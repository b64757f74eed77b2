"""Tenant reset orchestration.

Runs the reset steps in a fixed order and stops at the first failure:

1. Check that the Auth0 CLI and the Auth0 Deploy CLI are installed
2. Reuse or collect Management API credentials
3. Scaffold an empty tenant configuration
4. Ask the operator to confirm
5. Delete every role
6. Import the empty configuration, overwriting the tenant
7. Remove the scaffold

Step 7 always runs once the scaffold exists, whether the run succeeded,
was cancelled or failed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from tenant_reset.core.config import ResetPaths, Settings
from tenant_reset.core.errors import ResetCancelled
from tenant_reset.core.observability import get_logger
from tenant_reset.services.credentials import resolve_credentials
from tenant_reset.services.deploy import import_configuration
from tenant_reset.services.dependencies import check_dependencies
from tenant_reset.services.roles import purge_roles
from tenant_reset.services.scaffold import build_scaffold, remove_scaffold

logger = get_logger(__name__)

CONFIRMATION_WARNING = """\
WARNING: This will reset your Auth0 tenant configuration.
This includes deleting all custom clients, APIs, connections, rules, hooks and roles.
This action cannot be undone."""


@dataclass
class ResetResult:
    domain: str
    scaffold_dir: Path
    credentials_file: Path
    deleted_roles: list[str] = field(default_factory=list)


def confirm_reset() -> bool:
    """Only an exact `y` or `Y` confirms."""
    print()
    print(CONFIRMATION_WARNING)
    print()
    answer = input("Are you sure you want to proceed? (y/N): ")
    return answer in ("y", "Y")


class TenantReset:
    def __init__(self, settings: Settings):
        self._settings = settings
        self._paths = ResetPaths.from_settings(settings)

    @property
    def paths(self) -> ResetPaths:
        return self._paths

    def run(self) -> ResetResult:
        """
        Run the full reset.

        Raises:
            MissingDependencyError: Before anything is touched
            ResetCancelled: When the operator does not confirm
            ScaffoldError: When the scaffold cannot be written or removed
            CommandError: When a role or import command fails
        """
        print("[1/7] Checking dependencies...")
        check_dependencies(self._settings)

        print("[2/7] Resolving Auth0 credentials...")
        credentials = resolve_credentials(self._paths.credentials_file)
        logger.info("Credentials resolved", extra={"domain": credentials.domain})

        result = ResetResult(
            domain=credentials.domain,
            scaffold_dir=self._paths.scaffold_dir,
            credentials_file=self._paths.credentials_file,
        )

        print("[3/7] Creating empty tenant configuration...")
        try:
            build_scaffold(self._paths.scaffold_dir, self._settings)

            print(f"\n[4/7] Confirming reset of {credentials.domain}...")
            if not confirm_reset():
                print("Operation cancelled.")
                raise ResetCancelled("Reset cancelled by operator")

            print("\n[5/7] Deleting existing roles...")
            result.deleted_roles = purge_roles(self._settings)

            print("[6/7] Deploying empty configuration to Auth0...")
            import_configuration(
                self._settings,
                input_dir=self._paths.scaffold_dir,
                config_file=self._paths.credentials_file,
            )
        finally:
            print("[7/7] Removing temporary tenant configuration...")
            if remove_scaffold(self._paths.scaffold_dir):
                logger.info("Scaffold removed", extra={"path": str(self._paths.scaffold_dir)})

        return result
