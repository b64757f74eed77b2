"""
Pytest configuration and shared fixtures.

Provides:
- Settings rooted in a temporary base directory
- A fake `subprocess.run` standing in for the Auth0 CLI and the Deploy CLI
- PATH lookups that find (or miss) the external executables
- Scripted operator answers for `input()` and `getpass.getpass()`
- Restoring the root logger after the CLI configures it
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402 (import after path setup)

from tenant_reset.core.config import Settings  # noqa: E402
from tests.fakes import FakeCli, Operator  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep a developer's TENANT_RESET_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("TENANT_RESET_"):
            monkeypatch.delenv(key)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(base_dir=tmp_path)


@pytest.fixture
def fake_cli(monkeypatch) -> FakeCli:
    cli = FakeCli()
    monkeypatch.setattr("tenant_reset.core.process.subprocess.run", cli)
    return cli


@pytest.fixture
def installed(monkeypatch) -> set[str]:
    """Executables visible on PATH; tests discard names to simulate missing ones."""
    present = {"auth0", "a0deploy"}

    def _which(name: str) -> str | None:
        return f"/usr/local/bin/{name}" if name in present else None

    monkeypatch.setattr("tenant_reset.core.process.shutil.which", _which)
    return present


@pytest.fixture
def operator(monkeypatch) -> Operator:
    op = Operator()
    monkeypatch.setattr("builtins.input", op.input)
    monkeypatch.setattr("tenant_reset.services.credentials.getpass.getpass", op.getpass)
    return op


@pytest.fixture
def restore_root_logger():
    """Undo configure_structured_logging() so later tests keep pytest's handlers."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
