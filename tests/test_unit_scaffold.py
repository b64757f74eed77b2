"""Unit tests for the empty tenant scaffold."""

import json

import pytest

from tenant_reset.core.config import SCAFFOLD_SUBDIRECTORIES, Settings
from tenant_reset.core.errors import ScaffoldError
from tenant_reset.services.scaffold import build_scaffold, remove_scaffold


class TestBuildScaffold:
    def test_creates_fixed_tree(self, tmp_path, settings):
        scaffold = build_scaffold(tmp_path / "tenant", settings)

        for name in SCAFFOLD_SUBDIRECTORIES:
            assert (scaffold / name).is_dir()

        assert json.loads((scaffold / "tenant.json").read_text()) == {
            "friendly_name": "My Auth0 Tenant",
            "picture_url": "",
            "support_email": "",
            "support_url": "",
        }
        connection_file = scaffold / "database-connections" / "Username-Password-Authentication.json"
        assert json.loads(connection_file.read_text()) == {
            "name": "Username-Password-Authentication",
            "strategy": "auth0",
            "enabled_clients": [],
        }

    def test_only_the_two_descriptor_files_exist(self, tmp_path, settings):
        scaffold = build_scaffold(tmp_path / "tenant", settings)

        files = sorted(p.relative_to(scaffold).as_posix() for p in scaffold.rglob("*") if p.is_file())
        assert files == [
            "database-connections/Username-Password-Authentication.json",
            "tenant.json",
        ]

    def test_rerun_is_idempotent_and_drops_stale_files(self, tmp_path, settings):
        scaffold = build_scaffold(tmp_path / "tenant", settings)
        (scaffold / "clients" / "leftover.json").write_text("{}")

        build_scaffold(scaffold, settings)

        assert not (scaffold / "clients" / "leftover.json").exists()
        assert (scaffold / "tenant.json").is_file()

    def test_uses_configured_names(self, tmp_path):
        settings = Settings(
            base_dir=tmp_path,
            tenant_friendly_name="Staging",
            default_connection_name="Staging-DB",
        )
        scaffold = build_scaffold(tmp_path / "tenant", settings)

        assert json.loads((scaffold / "tenant.json").read_text())["friendly_name"] == "Staging"
        assert (scaffold / "database-connections" / "Staging-DB.json").is_file()

    def test_file_in_the_way_raises_scaffold_error(self, tmp_path, settings):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")

        with pytest.raises(ScaffoldError) as exc_info:
            build_scaffold(blocker / "tenant", settings)

        assert "Could not create tenant scaffold" in exc_info.value.message
        assert exc_info.value.details["error"]

    def test_write_failure_raises_scaffold_error(self, tmp_path, settings, monkeypatch):
        def _read_only(path, model):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr("tenant_reset.services.scaffold._write_json", _read_only)

        with pytest.raises(ScaffoldError) as exc_info:
            build_scaffold(tmp_path / "tenant", settings)

        assert isinstance(exc_info.value.__cause__, PermissionError)


class TestRemoveScaffold:
    def test_removes_tree(self, tmp_path, settings):
        scaffold = build_scaffold(tmp_path / "tenant", settings)
        assert remove_scaffold(scaffold) is True
        assert not scaffold.exists()

    def test_missing_tree_is_a_no_op(self, tmp_path):
        assert remove_scaffold(tmp_path / "tenant") is False

    def test_removes_stray_file(self, tmp_path):
        stray = tmp_path / "tenant"
        stray.write_text("not a directory")
        assert remove_scaffold(stray) is True
        assert not stray.exists()

    def test_delete_failure_raises_scaffold_error(self, tmp_path, settings, monkeypatch):
        scaffold = build_scaffold(tmp_path / "tenant", settings)

        def _busy(path, *args, **kwargs):
            raise OSError(16, "Device or resource busy", str(path))

        monkeypatch.setattr("tenant_reset.services.scaffold.shutil.rmtree", _busy)

        with pytest.raises(ScaffoldError) as exc_info:
            remove_scaffold(scaffold)

        assert "Could not remove tenant scaffold" in exc_info.value.message
        assert scaffold.exists()
