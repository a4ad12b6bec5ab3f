"""``python -m mcli_admin`` runs the same boundary as the ``mcli`` script."""

from __future__ import annotations

from mcli_admin.cli.app import cli

if __name__ == "__main__":
    cli()
