"""Core user service — turns admin-client calls into :class:`UserMessage` values.

This service delegates the remote work to an
:class:`~mcli_admin.core.protocols.AdminClient` injected at construction
time.  It is responsible for:

* Calling the right client method for each operation.
* Building the message describing a successful outcome.
* Ensuring only :class:`~mcli_admin.exceptions.McliError` subclasses
  escape, annotated with the values that were in play.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* No minio import.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from mcli_admin.core.models import STATUS_DISABLED, STATUS_ENABLED, UserMessage
from mcli_admin.core.protocols import AdminClient
from mcli_admin.exceptions import McliError, RemoteError

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def _normalise_status(raw: Any) -> str:
    """Map the server's status value to ``"enabled"`` / ``"disabled"``."""
    value = str(raw or "").lower()
    return STATUS_DISABLED if value == STATUS_DISABLED else STATUS_ENABLED


def _groups(raw: Any) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(str(group) for group in raw)


class UserService:
    """Stateless service driving user-management operations.

    Parameters
    ----------
    client:
        Any object satisfying the :class:`AdminClient` protocol.
    """

    def __init__(self, client: AdminClient) -> None:
        self._client: AdminClient = client

    # ------------------------------------------------------------------
    # Error wrapping
    # ------------------------------------------------------------------

    @staticmethod
    def _call(
        failure: str,
        context: Iterable[str],
        func: Callable[..., _T],
        *args: Any,
    ) -> _T:
        """Invoke *func* and re-raise any failure as :class:`RemoteError`.

        A :class:`RemoteError` from the adapter is re-raised under
        *failure* so the operation that failed leads the message.  Other
        errors that are already ours are re-raised with *context* attached
        when they carry none.
        """
        trace = tuple(context)
        try:
            return func(*args)
        except RemoteError as exc:
            raise RemoteError(
                f"{failure}: {exc}",
                hint=exc.hint,
                context=exc.context or trace,
            ) from exc
        except McliError as exc:
            if not exc.context:
                exc.context = trace
            raise
        except Exception as exc:
            raise RemoteError(f"{failure}: {exc}", context=trace) from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add_user(
        self,
        access_key: str,
        secret_key: str,
        *,
        context: Iterable[str] = (),
    ) -> UserMessage:
        """Create a user and return the ``add`` message.

        Raises
        ------
        RemoteError
            When the client fails for any reason.
        """
        logger.debug("adding user %s", access_key)
        self._call("Cannot add new user", context, self._client.add_user, access_key, secret_key)
        return UserMessage.added(access_key, secret_key)

    def remove_user(self, access_key: str, *, context: Iterable[str] = ()) -> UserMessage:
        logger.debug("removing user %s", access_key)
        self._call("Cannot remove user", context, self._client.remove_user, access_key)
        return UserMessage.removed(access_key)

    def enable_user(self, access_key: str, *, context: Iterable[str] = ()) -> UserMessage:
        logger.debug("enabling user %s", access_key)
        self._call("Cannot enable user", context, self._client.enable_user, access_key)
        return UserMessage.enabled(access_key)

    def disable_user(self, access_key: str, *, context: Iterable[str] = ()) -> UserMessage:
        logger.debug("disabling user %s", access_key)
        self._call("Cannot disable user", context, self._client.disable_user, access_key)
        return UserMessage.disabled(access_key)

    def user_info(self, access_key: str, *, context: Iterable[str] = ()) -> UserMessage:
        """Fetch a user's details and return the ``info`` message."""
        info = self._call(
            "Cannot get user info", context, self._client.user_info, access_key,
        )
        return UserMessage.info(
            access_key,
            user_status=_normalise_status(info.get("status")),
            policy_name=str(info.get("policyName") or ""),
            member_of=_groups(info.get("memberOf")),
        )

    def list_users(self, *, context: Iterable[str] = ()) -> list[UserMessage]:
        """Return one ``list`` message per user, sorted by access key."""
        users = self._call("Cannot list users", context, self._client.list_users)
        return [
            UserMessage.list_row(
                access_key,
                user_status=_normalise_status(info.get("status")),
                policy_name=str(info.get("policyName") or ""),
            )
            for access_key, info in sorted(users.items())
        ]
