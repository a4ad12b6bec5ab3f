"""Argument-count checks run before any command touches the network."""

from __future__ import annotations

from collections.abc import Sequence

from mcli_admin.exceptions import CommandSyntaxError


def check_arity(
    args: Sequence[str],
    expected: int,
    *,
    command: str,
    usage: str | None = None,
) -> None:
    """Raise :class:`CommandSyntaxError` unless *args* has exactly *expected* items.

    The values themselves are not inspected.  *usage* is attached as the
    error hint so the CLI boundary can print the command's help.
    """
    if len(args) != expected:
        raise CommandSyntaxError(
            f"'{command}' expects {expected} argument(s), got {len(args)}.",
            command=command,
            hint=usage,
        )
