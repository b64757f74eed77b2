"""Delete every role in the tenant through the Auth0 CLI."""

from __future__ import annotations

import json

from tenant_reset.core import process
from tenant_reset.core.config import Settings
from tenant_reset.core.errors import CommandError
from tenant_reset.core.observability import get_logger

logger = get_logger(__name__)


def list_role_ids(settings: Settings) -> list[str]:
    """
    List role IDs with `auth0 roles list --json`.

    Raises:
        CommandError: If the CLI fails or its output is not a JSON array of roles
    """
    cmd = [
        settings.auth0_cli,
        "roles",
        "list",
        "--json",
        "--number",
        str(settings.role_list_limit),
    ]
    result = process.run_command(cmd, capture=True)

    output = (result.stdout or "").strip()
    if not output:
        return []

    try:
        roles = json.loads(output)
    except json.JSONDecodeError as e:
        raise CommandError("Could not parse role listing as JSON", cmd=cmd) from e

    if not isinstance(roles, list):
        raise CommandError("Role listing is not a JSON array", cmd=cmd)

    role_ids: list[str] = []
    for role in roles:
        role_id = role.get("id") if isinstance(role, dict) else None
        if not role_id:
            raise CommandError(f"Role listing entry without an id: {role!r}", cmd=cmd)
        role_ids.append(str(role_id))
    return role_ids


def delete_role(settings: Settings, role_id: str) -> None:
    """Delete one role without a confirmation prompt."""
    process.run_command([settings.auth0_cli, "roles", "delete", role_id, "--no-input"], capture=True)


def purge_roles(settings: Settings) -> list[str]:
    """
    Delete every role, one at a time.

    There is no retry and no rollback: a failure leaves the roles deleted so
    far gone and the rest in place.

    Returns:
        IDs of the deleted roles, in deletion order
    """
    role_ids = list_role_ids(settings)
    logger.info("Roles to delete", extra={"count": len(role_ids)})

    deleted: list[str] = []
    for role_id in role_ids:
        delete_role(settings, role_id)
        print(f"  Deleted role: {role_id}")
        deleted.append(role_id)

    return deleted
