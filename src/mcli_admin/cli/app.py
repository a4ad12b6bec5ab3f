"""Parser tree and process boundary for ``mcli``.

:func:`main` parses argv, builds the per-invocation settings and runs one
``admin user`` command, letting :class:`~mcli_admin.exceptions.McliError`
propagate.  :func:`cli` is the console-script entry point: the only place
that prints errors and picks the exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from mcli_admin.cli import exit_codes
from mcli_admin.cli.console import Printer
from mcli_admin.cli.user_commands import USER_COMMANDS, run_user_command
from mcli_admin.exceptions import CommandSyntaxError, McliError
from mcli_admin.utils.logging import setup_logging
from mcli_admin.utils.settings import GlobalSettings
from mcli_admin.version import __version__

PROG: str = "mcli"

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_global_flags(parser: argparse.ArgumentParser, *, suppress: bool = False) -> None:
    """Attach the flags every command accepts.

    Sub-parsers use ``suppress=True`` so a flag given only before the
    command is not reset by the sub-parser's default.
    """
    default: Any = argparse.SUPPRESS if suppress else False
    parser.add_argument("--json", action="store_true", default=default,
                        help="enable JSON lines formatted output")
    parser.add_argument("--no-color", action="store_true", default=default,
                        help="disable color theme")
    parser.add_argument("--debug", action="store_true", default=default,
                        help="enable debug output")
    parser.add_argument("--insecure", action="store_true", default=default,
                        help="disable TLS certificate verification")
    parser.add_argument("--config-dir", metavar="DIR",
                        default=argparse.SUPPRESS if suppress else None,
                        help="path to configuration folder")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the ``mcli`` argument parser.

    The CLI supports:
    * ``mcli admin user add TARGET ACCESSKEY SECRETKEY``
    * ``mcli admin user {remove,enable,disable,info} TARGET ACCESSKEY``
    * ``mcli admin user list TARGET``
    * ``mcli --version``

    Flags are read up to the first positional argument of a user
    command; from there on every token is positional (``REMAINDER``),
    so keys such as ``-s3cret`` pass through.  The command counts the
    positionals itself so that a wrong count prints its own help.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Administrative client for MinIO-compatible object storage.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    _add_global_flags(parser)
    parser.set_defaults(_parser=parser)
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    admin = commands.add_parser("admin", help="manage MinIO servers", allow_abbrev=False)
    admin.set_defaults(_parser=admin)
    admin_commands = admin.add_subparsers(dest="admin_command", metavar="COMMAND")

    user = admin_commands.add_parser("user", help="manage users", allow_abbrev=False)
    user.set_defaults(_parser=user)
    user_commands = user.add_subparsers(dest="user_command", metavar="COMMAND")

    for command in USER_COMMANDS:
        prog = f"{PROG} admin user {command.name}"
        leaf = user_commands.add_parser(
            command.name,
            help=command.summary,
            prog=prog,
            usage=f"{prog} [FLAGS] {command.usage}",
            description=command.description(),
            epilog=command.epilog(prog),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            allow_abbrev=False,
        )
        leaf.add_argument(
            "args", nargs=argparse.REMAINDER, metavar="ARG", help=command.usage,
        )
        _add_global_flags(leaf, suppress=True)
        leaf.set_defaults(_parser=leaf, _command=command)

    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, printer: Printer | None = None) -> int:
    """Run the mcli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    printer:
        Output sink.  Built from the parsed global flags when omitted.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    McliError
        Any known failure; :func:`cli` maps it to an exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = GlobalSettings.from_namespace(args)
    setup_logging("DEBUG" if settings.debug else None)
    if printer is None:
        printer = Printer(settings)

    command = getattr(args, "_command", None)
    if command is None:
        args._parser.print_help()
        return exit_codes.SUCCESS

    positionals = list(args.args)
    if positionals[:1] == ["--"]:
        del positionals[0]

    logger.debug("running admin user %s", command.name)
    return run_user_command(
        command,
        positionals,
        settings,
        printer,
        usage=args._parser.format_help(),
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    known, _ = _build_parser().parse_known_args(argv)
    settings = GlobalSettings.from_namespace(known)
    printer = Printer(settings)
    try:
        code = main(argv, printer=printer)
        sys.exit(code)
    except CommandSyntaxError as exc:
        if settings.json_output or not exc.hint:
            printer.print_error(exc)
        else:
            printer.print_usage(exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except McliError as exc:
        printer.print_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        printer.print_notice("Aborted by user.", style="Hint")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        printer.print_notice(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="Error",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
