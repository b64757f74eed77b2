"""Reset an Auth0 tenant to an empty configuration.

Deletes all roles with the Auth0 CLI, then imports an empty configuration
with the Auth0 Deploy CLI. Credentials are cached in `config.json` under the
base directory (the current directory by default).

Usage:
    uv run auth0-tenant-reset
    uv run auth0-tenant-reset --base-dir ./reset-workdir --verbose
"""

from __future__ import annotations

import argparse
from pathlib import Path

from pydantic import ValidationError

from tenant_reset.core.config import Settings
from tenant_reset.core.errors import ResetCancelled, TenantResetError, get_exit_code
from tenant_reset.core.observability import (
    configure_structured_logging,
    generate_run_id,
    get_logger,
    set_run_id,
)
from tenant_reset.services import TenantReset

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Reset an Auth0 tenant by deleting all roles and deploying an empty configuration"
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Directory holding config.json and the temporary tenant/ scaffold (default: current directory)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show diagnostic logs")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    overrides = {}
    if args.base_dir is not None:
        overrides["base_dir"] = args.base_dir
    if args.verbose:
        overrides["log_level"] = "DEBUG"

    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        print(f"[ERROR] Invalid configuration:\n{e}")
        return 1

    configure_structured_logging(settings.log_level)
    set_run_id(generate_run_id())

    print("=" * 60)
    print("AUTH0 TENANT RESET")
    print("=" * 60)

    try:
        result = TenantReset(settings).run()
    except ResetCancelled:
        return 0
    except TenantResetError as e:
        logger.error("Tenant reset failed", extra={"error": e.message, "details": e.details})
        print(f"\n[ERROR] {e.message}")
        return get_exit_code(e)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except EOFError:
        print("\n[ERROR] Input closed before the prompts were answered.")
        return 1

    print("\n" + "=" * 60)
    print("Auth0 tenant reset complete!")
    print("=" * 60)
    print(f"  Tenant:        {result.domain}")
    print(f"  Roles deleted: {len(result.deleted_roles)}")
    print(f"  Credentials:   {result.credentials_file}")
    print("Note: Default application and database connection were preserved.")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
