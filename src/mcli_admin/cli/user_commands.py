"""``mcli admin user ...`` — user-management commands.

Each command follows the same lifecycle:

1. **Validate** — check the positional argument count; nothing else
   runs when it is wrong.
2. **Execute** — resolve the target alias, build an admin client and
   call the remote operation through :class:`UserService`.
3. **Report** — hand the resulting message(s) to the :class:`Printer`.

Any failure raises a :class:`~mcli_admin.exceptions.McliError` that
the error boundary in :mod:`mcli_admin.cli.app` turns into an exit code.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from mcli_admin.cli import exit_codes
from mcli_admin.cli.console import Printer
from mcli_admin.core.models import UserMessage
from mcli_admin.core.user_service import UserService
from mcli_admin.core.validation import check_arity
from mcli_admin.utils.settings import GlobalSettings

Executor = Callable[[UserService, Sequence[str]], list[UserMessage]]


@dataclass(frozen=True, slots=True)
class UserCommand:
    """Static description of one ``admin user`` subcommand."""

    name: str
    summary: str
    arguments: tuple[str, ...]
    """Positional argument names; the first is always ``TARGET``."""

    execute: Executor
    argument_help: tuple[tuple[str, str], ...] = ()
    examples: tuple[tuple[str, str], ...] = ()
    """(description, argument string) pairs rendered in the help epilog."""

    @property
    def arity(self) -> int:
        return len(self.arguments)

    @property
    def usage(self) -> str:
        return " ".join(self.arguments)

    def description(self) -> str:
        lines = [self.summary]
        for name, text in self.argument_help:
            lines.extend(("", f"{name}:", f"  {text}"))
        return "\n".join(lines)

    def epilog(self, prog: str) -> str | None:
        if not self.examples:
            return None
        lines = ["EXAMPLES:"]
        for number, (text, argv) in enumerate(self.examples, start=1):
            lines.append(f"  {number}. {text}")
            lines.append(f"     $ {prog} {argv}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Executors
# ---------------------------------------------------------------------------

def _add(service: UserService, args: Sequence[str]) -> list[UserMessage]:
    return [service.add_user(args[1], args[2], context=args)]


def _remove(service: UserService, args: Sequence[str]) -> list[UserMessage]:
    return [service.remove_user(args[1], context=args)]


def _enable(service: UserService, args: Sequence[str]) -> list[UserMessage]:
    return [service.enable_user(args[1], context=args)]


def _disable(service: UserService, args: Sequence[str]) -> list[UserMessage]:
    return [service.disable_user(args[1], context=args)]


def _info(service: UserService, args: Sequence[str]) -> list[UserMessage]:
    return [service.user_info(args[1], context=args)]


def _list(service: UserService, args: Sequence[str]) -> list[UserMessage]:
    return service.list_users(context=args)


_ACCESS_KEY_HELP = ("ACCESSKEY", "Also called as username.")
_SECRET_KEY_HELP = ("SECRETKEY", "Also called as password.")

USER_COMMANDS: tuple[UserCommand, ...] = (
    UserCommand(
        name="add",
        summary="add a new user",
        arguments=("TARGET", "ACCESSKEY", "SECRETKEY"),
        execute=_add,
        argument_help=(_ACCESS_KEY_HELP, _SECRET_KEY_HELP),
        examples=(
            ("Add a new user 'foobar' to MinIO server.", "myminio foobar foo12345"),
        ),
    ),
    UserCommand(
        name="remove",
        summary="remove a user",
        arguments=("TARGET", "ACCESSKEY"),
        execute=_remove,
        argument_help=(_ACCESS_KEY_HELP,),
        examples=(("Remove the user 'foobar' from MinIO server.", "myminio foobar"),),
    ),
    UserCommand(
        name="enable",
        summary="enable a disabled user",
        arguments=("TARGET", "ACCESSKEY"),
        execute=_enable,
        argument_help=(_ACCESS_KEY_HELP,),
        examples=(("Enable the user 'foobar' on MinIO server.", "myminio foobar"),),
    ),
    UserCommand(
        name="disable",
        summary="disable a user",
        arguments=("TARGET", "ACCESSKEY"),
        execute=_disable,
        argument_help=(_ACCESS_KEY_HELP,),
        examples=(("Disable the user 'foobar' on MinIO server.", "myminio foobar"),),
    ),
    UserCommand(
        name="info",
        summary="display info of a user",
        arguments=("TARGET", "ACCESSKEY"),
        execute=_info,
        argument_help=(_ACCESS_KEY_HELP,),
        examples=(("Display the info of user 'foobar'.", "myminio foobar"),),
    ),
    UserCommand(
        name="list",
        summary="list all users",
        arguments=("TARGET",),
        execute=_list,
        examples=(("List all users on MinIO server.", "myminio"),),
    ),
)


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

def run_user_command(
    command: UserCommand,
    args: Sequence[str],
    settings: GlobalSettings,
    printer: Printer,
    *,
    usage: str | None = None,
) -> int:
    """Validate *args*, run *command* remotely and print the outcome.

    Raises
    ------
    CommandSyntaxError
        When *args* does not match the command's arity.
    AdminConnectionError
        When no admin client can be built for the target.
    RemoteError
        When the remote call fails.
    """
    from mcli_admin.infra.minio_admin import new_admin_client

    check_arity(args, command.arity, command=f"admin user {command.name}", usage=usage)

    client = new_admin_client(args[0], settings)
    messages = command.execute(UserService(client), list(args))

    printer.print_messages(messages)
    return exit_codes.SUCCESS
