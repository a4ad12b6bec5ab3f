"""Global settings shared by every command of one invocation.

Built once from the parsed global flags and passed explicitly to the
printer and the admin-client factory — nothing reads them from module
state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV: str = "MCLI_CONFIG_DIR"
DEFAULT_CONFIG_DIR: Path = Path("~/.mcli")


def default_config_dir() -> Path:
    """Return ``$MCLI_CONFIG_DIR`` or ``~/.mcli``, user-expanded."""
    raw = os.getenv(CONFIG_DIR_ENV)
    path = Path(raw) if raw else DEFAULT_CONFIG_DIR
    return path.expanduser()


@dataclass(frozen=True, slots=True)
class GlobalSettings:
    """Read-only output and connection settings."""

    json_output: bool = False
    """Emit JSON documents instead of human-readable text."""

    no_color: bool = False
    """Disable colour and style in text output."""

    debug: bool = False
    """Enable debug logging and show error trace context."""

    insecure: bool = False
    """Skip TLS certificate verification."""

    config_dir: Path = field(default_factory=default_config_dir)
    """Directory holding ``config.json`` with alias definitions."""

    @classmethod
    def from_namespace(cls, args: Any) -> GlobalSettings:
        """Build settings from an :mod:`argparse` namespace."""
        config_dir = getattr(args, "config_dir", None)
        return cls(
            json_output=bool(getattr(args, "json", False)),
            no_color=bool(getattr(args, "no_color", False)),
            debug=bool(getattr(args, "debug", False)),
            insecure=bool(getattr(args, "insecure", False)),
            config_dir=Path(config_dir).expanduser() if config_dir else default_config_dir(),
        )
