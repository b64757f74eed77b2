"""Build the empty tenant configuration tree imported by the Deploy CLI."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from pydantic import BaseModel

from tenant_reset.core.config import SCAFFOLD_SUBDIRECTORIES, Settings
from tenant_reset.core.errors import ScaffoldError
from tenant_reset.core.observability import get_logger

from tenant_reset.domain.models import DatabaseConnection, TenantSettings

logger = get_logger(__name__)


def _write_json(path: Path, model: BaseModel) -> None:
    path.write_text(json.dumps(model.model_dump(), indent=2) + "\n", encoding="utf-8")


def build_scaffold(scaffold_dir: Path, settings: Settings) -> Path:
    """
    (Re)create the empty tenant tree at `scaffold_dir`.

    A tree left behind by an earlier run is removed first so that only the
    fixed content below is ever imported.

    Layout:
        tenant.json
        database-connections/<default connection>.json
        clients/ resource-servers/ rules/ hooks/ actions/ pages/  (empty)

    Raises:
        ScaffoldError: If the tree cannot be removed or written
    """
    if scaffold_dir.exists():
        logger.info("Removing stale scaffold", extra={"path": str(scaffold_dir)})
        remove_scaffold(scaffold_dir)

    connection = DatabaseConnection(name=settings.default_connection_name)
    try:
        scaffold_dir.mkdir(parents=True)
        for name in SCAFFOLD_SUBDIRECTORIES:
            (scaffold_dir / name).mkdir()

        _write_json(
            scaffold_dir / "tenant.json",
            TenantSettings(friendly_name=settings.tenant_friendly_name),
        )
        _write_json(
            scaffold_dir / "database-connections" / f"{connection.name}.json",
            connection,
        )
    except OSError as e:
        raise ScaffoldError(
            f"Could not create tenant scaffold: {scaffold_dir}", {"error": str(e)}
        ) from e

    logger.info("Scaffold created", extra={"path": str(scaffold_dir)})
    return scaffold_dir


def remove_scaffold(scaffold_dir: Path) -> bool:
    """
    Delete the scaffold tree. Returns False when there was nothing to delete.

    Raises:
        ScaffoldError: If the tree cannot be deleted
    """
    if not scaffold_dir.exists():
        return False
    try:
        if scaffold_dir.is_dir():
            shutil.rmtree(scaffold_dir)
        else:
            scaffold_dir.unlink()
    except OSError as e:
        raise ScaffoldError(
            f"Could not remove tenant scaffold: {scaffold_dir}", {"error": str(e)}
        ) from e
    return True
