"""
Infrastructure module: Database and object storage.

Provides:
- Database engine, sessions and transactions (db.py)
- Object storage backends for product images (storage/)
"""

from shared.infrastructure.db import (
    Database,
    get_db,
    safe_commit,
)
from shared.infrastructure.storage import (
    Storage,
    LocalStorage,
    S3Storage,
    create_storage,
)

__all__ = [
    # db
    "Database",
    "get_db",
    "safe_commit",
    # storage
    "Storage",
    "LocalStorage",
    "S3Storage",
    "create_storage",
]
