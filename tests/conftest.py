"""Shared pytest fixtures and configuration for the mcli-admin test suite.

Guidelines
----------
* No network access in any test.
* The minio SDK must be mocked at the infra boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on the user's alias configuration.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the config directory at an empty temp dir and clear alias env vars."""
    monkeypatch.setenv("MCLI_CONFIG_DIR", str(tmp_path / "mcli"))
    monkeypatch.delenv("MCLI_LOG_LEVEL", raising=False)
    for name in list(os.environ):
        if name.startswith("MC_HOST_"):
            monkeypatch.delenv(name)


@pytest.fixture
def admin_client() -> MagicMock:
    """An admin client whose calls all succeed."""
    client = MagicMock()
    client.user_info.return_value = {
        "status": "enabled",
        "policyName": "readwrite",
        "memberOf": ["devs", "ops"],
    }
    client.list_users.return_value = {
        "foobar": {"status": "enabled", "policyName": "readwrite"},
        "alice": {"status": "disabled", "policyName": "readonly"},
    }
    return client


@pytest.fixture
def client_factory(admin_client: MagicMock) -> Iterator[MagicMock]:
    """Patch the admin-client factory used by the CLI commands."""
    with patch(
        "mcli_admin.infra.minio_admin.new_admin_client",
        return_value=admin_client,
    ) as factory:
        yield factory
