"""Command line surface: the ``admin user`` parser tree, the printer and exit codes.

Nothing under ``core``, ``infra`` or ``utils`` imports from here.
"""
