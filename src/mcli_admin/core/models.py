"""Domain models for mcli-admin.

:class:`UserMessage` is a **frozen** dataclass — a tagged variant whose
``op`` field decides which optional fields may be populated and how the
value renders.  Rendering is pure: no I/O, no console access, and no
dependency on external packages.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from mcli_admin.exceptions import SerializationError


USER_MESSAGE_STYLE: str = "UserMessage"
"""Console style name applied to user confirmations and info blocks."""

STATUS_ENABLED: str = "enabled"
STATUS_DISABLED: str = "disabled"


class UserOperation(Enum):
    """Administrative user operations a :class:`UserMessage` can describe."""

    ADD = "add"
    REMOVE = "remove"
    ENABLE = "enable"
    DISABLE = "disable"
    INFO = "info"
    LIST = "list"


# ---------------------------------------------------------------------------
# Per-operation rules
# ---------------------------------------------------------------------------

_ALLOWED_FIELDS: dict[UserOperation, frozenset[str]] = {
    UserOperation.ADD: frozenset({"secret_key", "user_status"}),
    UserOperation.REMOVE: frozenset(),
    UserOperation.ENABLE: frozenset(),
    UserOperation.DISABLE: frozenset(),
    UserOperation.INFO: frozenset({"policy_name", "user_status", "member_of"}),
    UserOperation.LIST: frozenset({"policy_name", "user_status"}),
}

_CONFIRMATION_VERBS: dict[UserOperation, str] = {
    UserOperation.REMOVE: "Removed",
    UserOperation.DISABLE: "Disabled",
    UserOperation.ENABLE: "Enabled",
    UserOperation.ADD: "Added",
}

# (attribute, JSON key) in output order.
_JSON_FIELDS: tuple[tuple[str, str], ...] = (
    ("access_key", "accessKey"),
    ("secret_key", "secretKey"),
    ("policy_name", "policyName"),
    ("user_status", "userStatus"),
    ("member_of", "memberOf"),
)

# Column widths: user status, access key, policy name.
LIST_COLUMN_WIDTHS: tuple[int, int, int] = (9, 20, 20)
LIST_COLUMN_SEPARATOR: str = "  "
_ELLIPSIS = "..."


def _fit_cell(value: str, width: int) -> str:
    """Left-justify *value* in *width* characters, cutting with ``...``."""
    if len(value) > width:
        value = value[: width - len(_ELLIPSIS)] + _ELLIPSIS
    return value.ljust(width)


def build_table_row(*cells: str, widths: tuple[int, ...] = LIST_COLUMN_WIDTHS) -> str:
    """Render one fixed-width table row.

    Extra cells beyond the configured widths are ignored.
    """
    return LIST_COLUMN_SEPARATOR.join(
        _fit_cell(cell, width) for cell, width in zip(cells, widths)
    )


# ---------------------------------------------------------------------------
# User message
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class UserMessage:
    """Outcome of one administrative user operation.

    Prefer the named constructors (:meth:`added`, :meth:`info`, ...) —
    they populate exactly the fields each operation carries.
    Constructing a message with a field outside its operation's
    contract raises :class:`ValueError`.
    """

    op: UserOperation
    """Operation tag; selects the rendering rule."""

    access_key: str = ""
    """Name of the user acted upon."""

    secret_key: str = ""
    """Password of a freshly added user.  Never part of :meth:`render_text`."""

    policy_name: str = ""
    """Access policy bound to the user."""

    user_status: str = ""
    """``"enabled"`` or ``"disabled"``."""

    member_of: tuple[str, ...] = ()
    """Groups the user belongs to, in server order."""

    status: str = ""
    """Outcome status; always emitted as ``"success"`` by :meth:`render_json`."""

    def __post_init__(self) -> None:
        allowed = _ALLOWED_FIELDS.get(self.op, frozenset())
        for name in ("secret_key", "policy_name", "user_status", "member_of"):
            if getattr(self, name) and name not in allowed:
                raise ValueError(
                    f"{name!r} is not carried by {self.op.value!r} messages",
                )

    # ------------------------------------------------------------------
    # Named constructors
    # ------------------------------------------------------------------

    @classmethod
    def added(cls, access_key: str, secret_key: str) -> UserMessage:
        return cls(
            op=UserOperation.ADD,
            access_key=access_key,
            secret_key=secret_key,
            user_status=STATUS_ENABLED,
        )

    @classmethod
    def removed(cls, access_key: str) -> UserMessage:
        return cls(op=UserOperation.REMOVE, access_key=access_key)

    @classmethod
    def enabled(cls, access_key: str) -> UserMessage:
        return cls(op=UserOperation.ENABLE, access_key=access_key)

    @classmethod
    def disabled(cls, access_key: str) -> UserMessage:
        return cls(op=UserOperation.DISABLE, access_key=access_key)

    @classmethod
    def info(
        cls,
        access_key: str,
        *,
        user_status: str,
        policy_name: str,
        member_of: tuple[str, ...] = (),
    ) -> UserMessage:
        return cls(
            op=UserOperation.INFO,
            access_key=access_key,
            user_status=user_status,
            policy_name=policy_name,
            member_of=tuple(member_of),
        )

    @classmethod
    def list_row(cls, access_key: str, *, user_status: str, policy_name: str) -> UserMessage:
        return cls(
            op=UserOperation.LIST,
            access_key=access_key,
            user_status=user_status,
            policy_name=policy_name,
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def text_style(self) -> str | None:
        """Console style for :meth:`render_text`, or ``None`` for plain rows."""
        if self.op is UserOperation.INFO or self.op in _CONFIRMATION_VERBS:
            return USER_MESSAGE_STYLE
        return None

    def render_text(self) -> str:
        """Return the human-readable form of this message.

        * ``list`` — one fixed-width table row (status, access key, policy).
        * ``info`` — four ``Label: value`` lines.
        * ``add`` / ``remove`` / ``enable`` / ``disable`` — a one-line
          confirmation.  The secret key is never included.
        """
        if self.op is UserOperation.LIST:
            return build_table_row(self.user_status, self.access_key, self.policy_name)
        if self.op is UserOperation.INFO:
            return "\n".join(
                (
                    f"AccessKey: {self.access_key}",
                    f"Status: {self.user_status}",
                    f"PolicyName: {self.policy_name}",
                    f"MemberOf: {','.join(self.member_of)}",
                )
            )
        verb = _CONFIRMATION_VERBS.get(self.op)
        if verb is None:
            return ""
        return f"{verb} user `{self.access_key}` successfully."

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping with empty fields omitted."""
        data: dict[str, Any] = {"status": "success"}
        for attr, key in _JSON_FIELDS:
            value = getattr(self, attr)
            if value:
                data[key] = list(value) if isinstance(value, tuple) else value
        return data

    def render_json(self) -> str:
        """Return the machine-readable JSON form of this message.

        Raises
        ------
        SerializationError
            When the encoder cannot represent a field value.
        """
        try:
            return json.dumps(self.to_dict(), indent=1)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                "Unable to marshal into JSON.",
                context=(str(getattr(self.op, "value", self.op)), str(self.access_key)),
            ) from exc
