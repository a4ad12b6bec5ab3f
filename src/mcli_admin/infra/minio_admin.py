"""MinIO SDK backed implementation of :class:`~mcli_admin.core.protocols.AdminClient`.

This module is the **only** place in the codebase that imports ``minio``.
All SDK and transport exceptions are caught here and re-raised as typed
:class:`~mcli_admin.exceptions.McliError` subclasses — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

from mcli_admin.exceptions import AdminConnectionError, EnvironmentError, RemoteError
from mcli_admin.infra.alias_config import AliasConfig, resolve_alias
from mcli_admin.utils.settings import GlobalSettings

logger = logging.getLogger(__name__)


def _import_minio() -> Any:
    """Import the minio SDK lazily so ``--help`` works without it."""
    try:
        import minio
        import minio.credentials
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "minio is not installed. Install with: pip install minio",
        ) from exc
    return minio


class MinioAdminClient:
    """Concrete :class:`AdminClient` backed by ``minio.MinioAdmin``.

    Usage::

        client = MinioAdminClient(sdk_admin)
        client.add_user("foobar", "foo12345")

    This class satisfies the :class:`~mcli_admin.core.protocols.AdminClient`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, admin: Any, *, alias: str = "") -> None:
        self._admin: Any = admin
        self._alias: str = alias

    @classmethod
    def from_alias(cls, config: AliasConfig, *, insecure: bool = False) -> MinioAdminClient:
        """Build a client for *config*.

        Raises
        ------
        EnvironmentError
            When the minio SDK is not installed.
        AdminConnectionError
            When the SDK rejects the endpoint or credentials.
        """
        minio = _import_minio()
        try:
            admin = minio.MinioAdmin(
                config.endpoint,
                credentials=minio.credentials.StaticProvider(
                    config.access_key, config.secret_key,
                ),
                secure=config.secure,
                cert_check=not insecure,
            )
        except Exception as exc:
            raise AdminConnectionError(
                f"Unable to initialize admin connection: {exc}",
                hint=f"Check the URL configured for alias '{config.alias}'.",
            ) from exc
        logger.debug("admin client ready for %s (%s)", config.alias, config.url)
        return cls(admin, alias=config.alias)

    # ------------------------------------------------------------------
    # Exception mapping
    # ------------------------------------------------------------------

    def _invoke(self, action: str, func: Callable[..., Any], *args: Any) -> Any:
        """Call an SDK method, translating any failure into :class:`RemoteError`."""
        try:
            return func(*args)
        except Exception as exc:
            raise RemoteError(
                f"{action} failed on '{self._alias}': {exc}",
            ) from exc

    @staticmethod
    def _decode(action: str, payload: Any) -> dict[str, Any]:
        """Parse a JSON payload returned by the SDK into a dict."""
        if isinstance(payload, Mapping):
            return dict(payload)
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8")
        try:
            data = json.loads(payload or "{}")
        except ValueError as exc:
            raise RemoteError(f"{action} returned malformed JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise RemoteError(f"{action} returned an unexpected data structure.")
        return data

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def add_user(self, access_key: str, secret_key: str) -> None:
        self._invoke("Add user", self._admin.user_add, access_key, secret_key)

    def remove_user(self, access_key: str) -> None:
        self._invoke("Remove user", self._admin.user_remove, access_key)

    def enable_user(self, access_key: str) -> None:
        self._invoke("Enable user", self._admin.user_enable, access_key)

    def disable_user(self, access_key: str) -> None:
        self._invoke("Disable user", self._admin.user_disable, access_key)

    def user_info(self, access_key: str) -> dict[str, Any]:
        payload = self._invoke("User info", self._admin.user_info, access_key)
        return self._decode("User info", payload)

    def list_users(self) -> dict[str, dict[str, Any]]:
        payload = self._invoke("List users", self._admin.user_list)
        users = self._decode("List users", payload)
        return {
            str(access_key): info if isinstance(info, dict) else {}
            for access_key, info in users.items()
        }


def new_admin_client(target: str, settings: GlobalSettings) -> MinioAdminClient:
    """Resolve *target*'s alias and return a connected admin client.

    Raises
    ------
    AdminConnectionError
        When the alias cannot be resolved or the SDK refuses it.
    EnvironmentError
        When the minio SDK is not installed.
    """
    config = resolve_alias(target, settings.config_dir)
    return MinioAdminClient.from_alias(config, insecure=settings.insecure)
