"""Process exit codes returned by ``mcli``.

Only :func:`mcli_admin.cli.app.cli` turns these into ``sys.exit`` calls.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The user command ran and its result was printed."""

GENERAL_ERROR: int = 1
"""Wrong argument count, unknown alias, server rejection or JSON failure."""

UNEXPECTED_ERROR: int = 2
"""A non-``McliError`` exception reached the boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
