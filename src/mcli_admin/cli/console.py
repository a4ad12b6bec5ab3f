"""Output sink with optional Rich support.

:class:`Printer` writes command results to stdout and diagnostics to
stderr.  It picks text or JSON from :class:`GlobalSettings` and applies
console styles by name (``UserMessage`` → green).

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, ``--version``) and plain output remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from typing import IO, Any

from mcli_admin.core.models import USER_MESSAGE_STYLE, UserMessage
from mcli_admin.exceptions import EnvironmentError, McliError
from mcli_admin.utils.settings import GlobalSettings

THEME_STYLES: dict[str, str] = {
    USER_MESSAGE_STYLE: "green",
    "Error": "bold red",
    "Hint": "yellow",
    "Trace": "dim",
}


def _load_rich() -> tuple[type[Any], type[Any], type[Any]]:
    """Return ``(Console, Theme, Text)`` or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
        from rich.text import Text
        from rich.theme import Theme
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console, Theme, Text


class Printer:
    """Render messages and errors according to the global settings.

    Parameters
    ----------
    settings:
        Read-only output settings for this invocation.
    stdout, stderr:
        Optional streams; default to the live ``sys.stdout`` /
        ``sys.stderr`` at print time.
    """

    def __init__(
        self,
        settings: GlobalSettings,
        *,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
    ) -> None:
        self._settings = settings
        self._stdout = stdout
        self._stderr = stderr
        self._out: Any = None
        self._err: Any = None
        self._text_class: Any = None
        try:
            console_class, theme_class, self._text_class = _load_rich()
        except EnvironmentError:
            return
        theme = theme_class(THEME_STYLES)
        options = {
            "theme": theme,
            "no_color": settings.no_color or None,
            "highlight": False,
            "emoji": False,
            "markup": False,
        }
        self._out = console_class(file=stdout, **options)
        self._err = console_class(file=stderr, stderr=stderr is None, **options)

    @property
    def rich_enabled(self) -> bool:
        return self._out is not None

    # ------------------------------------------------------------------
    # Low-level writers
    # ------------------------------------------------------------------

    def _write(self, text: str, *, style: str | None = None, err: bool = False) -> None:
        console = self._err if err else self._out
        if console is None:
            stream = (self._stderr or sys.stderr) if err else (self._stdout or sys.stdout)
            print(text, file=stream)
            return
        if style is None or self._settings.no_color:
            console.print(text, soft_wrap=True)
        else:
            console.print(self._text_class(text, style=style), soft_wrap=True)

    def _write_labelled(self, label: str, text: str) -> None:
        """Write ``<label>: <text>`` to stderr with the label styled."""
        console = self._err
        if console is None or self._settings.no_color:
            self._write(f"{label}: {text}", err=True)
            return
        line = self._text_class.assemble((f"{label}:", label), " ", text)
        console.print(line, soft_wrap=True)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def print_message(self, message: UserMessage) -> None:
        """Print one message as JSON or styled text."""
        if self._settings.json_output:
            self._write(message.render_json())
        else:
            self._write(message.render_text(), style=message.text_style)

    def print_messages(self, messages: Iterable[UserMessage]) -> None:
        for message in messages:
            self.print_message(message)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def print_usage(self, usage: str) -> None:
        """Write command help to stderr."""
        self._write(usage.rstrip("\n"), err=True)

    def print_error(self, exc: McliError) -> None:
        """Write a known error, its hint and (with ``--debug``) its context."""
        if self._settings.json_output:
            error: dict[str, Any] = {"message": str(exc), "type": type(exc).__name__}
            if exc.hint:
                error["hint"] = exc.hint
            if self._settings.debug and exc.context:
                error["trace"] = list(exc.context)
            self._write(json.dumps({"status": "error", "error": error}, indent=1), err=True)
            return

        self._write_labelled("Error", str(exc))
        if exc.hint:
            self._write_labelled("Hint", exc.hint)
        if self._settings.debug and exc.context:
            self._write_labelled("Trace", " ".join(exc.context))

    def print_notice(self, text: str, *, style: str | None = None) -> None:
        """Write a free-form line to stderr."""
        self._write(text, style=style, err=True)
