"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from mcli_admin.core.models import UserMessage, UserOperation
from mcli_admin.core.protocols import AdminClient
from mcli_admin.core.user_service import UserService
from mcli_admin.core.validation import check_arity

__all__: list[str] = [
    "AdminClient",
    "UserMessage",
    "UserOperation",
    "UserService",
    "check_arity",
]
