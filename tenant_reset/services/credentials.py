"""
Credential resolution for the Auth0 Deploy CLI.

A usable `config.json` from a previous run is reused as is. Anything else
(missing, empty, unreadable, incomplete) leads to an interactive setup that
rewrites the whole file.
"""

from __future__ import annotations

import getpass
import json
from pathlib import Path

from pydantic import ValidationError

from tenant_reset.core.errors import CredentialsError
from tenant_reset.core.observability import get_logger
from tenant_reset.domain.models import Auth0Credentials

logger = get_logger(__name__)

SETUP_GUIDANCE = """\
You'll need to provide the following information:
1. Your Auth0 domain (e.g., your-tenant.auth0.com)
2. A non-interactive client ID with proper permissions
3. The client secret

To create a non-interactive client:
1. Go to Applications > Applications in your Auth0 dashboard
2. Create a new Machine to Machine Application
3. Select the Auth0 Management API
4. Select all permissions
"""


def load_credentials(path: Path) -> Auth0Credentials | None:
    """
    Read a credential file.

    Returns:
        The parsed record, or None when the file is missing, empty, not a
        JSON object, or holds values of the wrong type.
    """
    if not path.is_file() or path.stat().st_size == 0:
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Unreadable credential file", extra={"path": str(path), "error": str(e)})
        return None

    if not isinstance(data, dict):
        return None

    try:
        return Auth0Credentials.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "Credential file has invalid values",
            extra={"path": str(path), "errors": e.error_count()},
        )
        return None


def validate_credentials(credentials: Auth0Credentials | None) -> bool:
    """True when domain, client ID and client secret are all non-empty."""
    return credentials is not None and credentials.is_complete()


def _ask(prompt: str, *, secret: bool = False) -> str:
    """Ask until the operator enters a non-blank value."""
    while True:
        value = getpass.getpass(prompt) if secret else input(prompt)
        value = value.strip()
        if value:
            return value
        print("  A value is required.")


def prompt_credentials() -> Auth0Credentials:
    """Interactively collect domain, client ID and (masked) client secret."""
    print("[SETUP] Setting up Auth0 Deploy CLI configuration...")
    print()
    print(SETUP_GUIDANCE)

    domain = _ask("Enter your Auth0 domain: ")
    client_id = _ask("Enter your client ID: ")
    client_secret = _ask("Enter your client secret: ", secret=True)

    return Auth0Credentials(
        domain=domain,
        client_id=client_id,
        client_secret=client_secret,
        allow_delete=True,
    )


def save_credentials(path: Path, credentials: Auth0Credentials) -> Path:
    """
    Write the whole credential file, readable by the owner only.

    Raises:
        CredentialsError: If the file cannot be written
    """
    payload = credentials.to_config()
    payload["AUTH0_ALLOW_DELETE"] = True
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        path.chmod(0o600)
    except OSError as e:
        raise CredentialsError(
            f"Could not write credential file: {path}", {"error": str(e)}
        ) from e

    logger.info("Credential file written", extra={"path": str(path)})
    return path


def resolve_credentials(path: Path) -> Auth0Credentials:
    """
    Reuse a usable credential file or collect and persist new credentials.

    Args:
        path: Location of the Deploy CLI config file

    Returns:
        Credentials that passed validation
    """
    if path.is_file() and path.stat().st_size > 0:
        print(f"Found existing {path.name}")
        existing = load_credentials(path)
        if validate_credentials(existing):
            print("[OK] Using existing Auth0 credentials")
            if not existing.allow_delete:
                print(
                    f"[WARN] {path.name} sets AUTH0_ALLOW_DELETE to false: "
                    "the Deploy CLI will not delete existing clients, APIs, connections, rules or hooks"
                )
                logger.warning("Credential file disables deletes", extra={"path": str(path)})
            return existing
        print(f"[ERROR] Existing {path.name} is invalid or incomplete")
    else:
        print(f"No valid {path.name} found")

    credentials = prompt_credentials()
    save_credentials(path, credentials)
    return credentials
