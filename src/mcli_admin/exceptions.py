"""Custom exception hierarchy for mcli-admin.

All exceptions that cross layer boundaries must inherit from
:class:`McliError`.  Raw third-party exceptions (e.g. from the minio
SDK or urllib3) must NEVER propagate beyond the infrastructure layer —
they must be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
McliError
├── CommandSyntaxError
├── AdminConnectionError
│   └── AliasConfigError
├── RemoteError
├── SerializationError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Iterable


class McliError(Exception):
    """Base exception for all mcli-admin errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Iterable[str] = (),
    ) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

        self.context: tuple[str, ...] = tuple(context)
        """Values that were in play when the error occurred (shown with ``--debug``)."""


# --- Command usage ---------------------------------------------------------

class CommandSyntaxError(McliError):
    """Raised when a command receives the wrong number of arguments.

    ``hint`` carries the full usage text of the offending command.
    """

    def __init__(self, message: str, *, command: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.command: str = command


# --- Connection / configuration --------------------------------------------

class AdminConnectionError(McliError):
    """Raised when an admin client cannot be built for a target alias."""


class AliasConfigError(AdminConnectionError):
    """Raised when the alias configuration file is unreadable or malformed."""


# --- Remote operations -----------------------------------------------------

class RemoteError(McliError):
    """Raised when a remote admin call fails (duplicate user, denied, network)."""


# --- Rendering -------------------------------------------------------------

class SerializationError(McliError):
    """Raised when a message cannot be encoded as JSON."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(McliError):
    """Raised when a required runtime dependency is not available."""
