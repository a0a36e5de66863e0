"""
Shared module for infrastructure and utilities used by the inventory API.

STRUCTURE:
- shared.infrastructure: Database and object storage
  - db.py: Database (engine + session factory), get_db(), safe_commit()
  - storage/: Storage backends (local filesystem, S3-compatible)

- shared.config: Configuration
  - settings.py: Environment config (Pydantic)
  - logging.py: Structured logging, request correlation IDs
  - constants.py: Field groups, export columns, aliases

- shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging
  - validators.py: E-number lookup, upload checks

IMPORT EXAMPLES:
    from shared.infrastructure.db import Database, get_db
    from shared.config.settings import settings
    from shared.utils.exceptions import NotFoundError, ValidationError
"""
