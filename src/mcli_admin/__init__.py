"""mcli-admin — administrative CLI for MinIO-compatible object storage.

Built on the MinIO Python SDK admin API with a strict layered architecture.
"""

from mcli_admin.version import __version__

__all__: list[str] = ["__version__"]
