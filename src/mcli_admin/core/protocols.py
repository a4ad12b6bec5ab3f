"""Interfaces the core layer talks to.

:class:`~mcli_admin.core.user_service.UserService` only sees an
:class:`AdminClient`; the MinIO adapter in ``infra`` satisfies it
structurally, and tests pass a ``MagicMock``.
"""

from __future__ import annotations

from typing import Any, Protocol


class AdminClient(Protocol):
    """Contract for user-management backends.

    Any object implementing these methods satisfies the protocol
    structurally (no explicit inheritance required).  Implementations
    must map backend-specific exceptions to
    :class:`~mcli_admin.exceptions.RemoteError`.
    """

    def add_user(self, access_key: str, secret_key: str) -> None:
        """Create (or update the secret of) the user *access_key*."""
        ...  # pragma: no cover

    def remove_user(self, access_key: str) -> None:
        """Delete the user *access_key*."""
        ...  # pragma: no cover

    def enable_user(self, access_key: str) -> None:
        ...  # pragma: no cover

    def disable_user(self, access_key: str) -> None:
        ...  # pragma: no cover

    def user_info(self, access_key: str) -> dict[str, Any]:
        """Return the server's info dict for *access_key*.

        The dict carries at least ``"status"``, and may carry
        ``"policyName"`` and ``"memberOf"`` (``list[str]``).
        """
        ...  # pragma: no cover

    def list_users(self) -> dict[str, dict[str, Any]]:
        """Return a mapping of access key → info dict for every user."""
        ...  # pragma: no cover
