"""Infrastructure layer — external system integration.

This layer wraps all interaction with the minio SDK and the alias
configuration on disk.  Every raw third-party exception must be caught
here and re-raised as a :class:`~mcli_admin.exceptions.McliError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from mcli_admin.infra.alias_config import AliasConfig, resolve_alias
from mcli_admin.infra.minio_admin import MinioAdminClient, new_admin_client

__all__: list[str] = [
    "AliasConfig",
    "MinioAdminClient",
    "new_admin_client",
    "resolve_alias",
]
