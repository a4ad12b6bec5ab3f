"""Tests for the output sink (cli/console.py).

Streams are ``io.StringIO`` objects, so Rich treats them as plain
(non-terminal) files and emits no escape codes.
"""

from __future__ import annotations

import io
import json
import sys

import pytest

from mcli_admin.cli.console import Printer
from mcli_admin.core.models import UserMessage
from mcli_admin.exceptions import AdminConnectionError, RemoteError
from mcli_admin.utils.settings import GlobalSettings


def _printer(**settings: bool) -> tuple[Printer, io.StringIO, io.StringIO]:
    out, err = io.StringIO(), io.StringIO()
    return Printer(GlobalSettings(**settings), stdout=out, stderr=err), out, err


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("rich", "rich.console", "rich.text", "rich.theme"):
        monkeypatch.setitem(sys.modules, name, None)


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

class TestPrintMessage:
    def test_text_mode(self) -> None:
        printer, out, _ = _printer()
        printer.print_message(UserMessage.added("foobar", "foo12345"))
        assert out.getvalue() == "Added user `foobar` successfully.\n"

    def test_json_mode(self) -> None:
        printer, out, _ = _printer(json_output=True)
        msg = UserMessage.added("foobar", "foo12345")
        printer.print_message(msg)
        assert out.getvalue() == msg.render_json() + "\n"

    def test_brackets_are_not_markup(self) -> None:
        printer, out, _ = _printer()
        printer.print_message(UserMessage.removed("[bold]x[/bold]"))
        assert "`[bold]x[/bold]`" in out.getvalue()

    def test_no_color(self) -> None:
        printer, out, _ = _printer(no_color=True)
        printer.print_message(UserMessage.enabled("foobar"))
        assert out.getvalue() == "Enabled user `foobar` successfully.\n"

    def test_print_messages(self) -> None:
        printer, out, _ = _printer()
        printer.print_messages(
            [
                UserMessage.list_row("a", user_status="enabled", policy_name="p"),
                UserMessage.list_row("b", user_status="disabled", policy_name="q"),
            ]
        )
        assert len(out.getvalue().splitlines()) == 2


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

class TestPrintError:
    def test_message_and_hint(self) -> None:
        printer, out, err = _printer()
        printer.print_error(AdminConnectionError("no alias", hint="add one"))

        assert out.getvalue() == ""
        assert "Error: no alias" in err.getvalue()
        assert "Hint: add one" in err.getvalue()

    def test_trace_only_in_debug(self) -> None:
        exc = RemoteError("denied", context=("myminio", "foobar"))

        printer, _, err = _printer()
        printer.print_error(exc)
        assert "Trace" not in err.getvalue()

        printer, _, err = _printer(debug=True)
        printer.print_error(exc)
        assert "Trace: myminio foobar" in err.getvalue()

    def test_json_error(self) -> None:
        printer, _, err = _printer(json_output=True)
        printer.print_error(RemoteError("denied", hint="check policy"))

        doc = json.loads(err.getvalue())
        assert doc == {
            "status": "error",
            "error": {"message": "denied", "type": "RemoteError", "hint": "check policy"},
        }

    def test_usage_goes_to_stderr(self) -> None:
        printer, out, err = _printer()
        printer.print_usage("usage: mcli admin user add [FLAGS] TARGET\n\n")
        assert out.getvalue() == ""
        assert err.getvalue() == "usage: mcli admin user add [FLAGS] TARGET\n"


# ---------------------------------------------------------------------------
# Plain fallback
# ---------------------------------------------------------------------------

class TestWithoutRich:
    def test_plain_text(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _hide_rich(monkeypatch)
        printer, out, err = _printer()

        assert not printer.rich_enabled
        printer.print_message(UserMessage.added("foobar", "foo12345"))
        printer.print_error(RemoteError("denied", hint="retry"))

        assert out.getvalue() == "Added user `foobar` successfully.\n"
        assert err.getvalue() == "Error: denied\nHint: retry\n"

    def test_plain_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _hide_rich(monkeypatch)
        printer, out, _ = _printer(json_output=True)

        printer.print_message(UserMessage.removed("foobar"))
        assert json.loads(out.getvalue())["accessKey"] == "foobar"
