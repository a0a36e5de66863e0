"""Object storage for product images."""

from shared.config.settings import Settings
from shared.infrastructure.storage.base import Storage
from shared.infrastructure.storage.local import LocalStorage
from shared.infrastructure.storage.s3 import S3Storage

__all__ = ["Storage", "LocalStorage", "S3Storage", "create_storage"]


def create_storage(settings: Settings) -> Storage:
    """Build the storage backend selected by configuration."""
    if settings.storage_backend == "s3":
        return S3Storage(
            bucket=settings.storage_bucket,
            public_base_url=settings.storage_public_base_url,
            endpoint_url=settings.storage_s3_endpoint or None,
            region=settings.storage_s3_region,
            access_key=settings.storage_s3_access_key or None,
            secret_key=settings.storage_s3_secret_key or None,
        )

    return LocalStorage(
        base_path=settings.storage_local_path,
        bucket=settings.storage_bucket,
        public_base_url=settings.storage_public_base_url,
    )
