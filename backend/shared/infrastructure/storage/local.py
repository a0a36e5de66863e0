"""Local filesystem storage backend."""

from pathlib import Path

from shared.config.logging import storage_logger as logger
from shared.infrastructure.storage.base import Storage
from shared.utils.exceptions import UpstreamError


class LocalStorage(Storage):
    """
    Local filesystem storage backend.

    Objects are written to ``<base_path>/<bucket>/<key>``. The application
    serves ``base_path`` as static files, so ``public_base_url`` should be
    the mount point (``/uploads`` by default).
    """

    def __init__(
        self,
        base_path: str | Path,
        bucket: str = "product-images",
        public_base_url: str = "/uploads",
    ):
        super().__init__(bucket, public_base_url)
        self.base_path = Path(base_path).resolve()

    @property
    def bucket_path(self) -> Path:
        return self.base_path / self.bucket

    def _resolve_path(self, key: str) -> Path:
        """Resolve an object key to an absolute filesystem path."""
        clean_key = Path(key).as_posix().lstrip("/")
        full_path = (self.bucket_path / clean_key).resolve()

        # Keys must stay inside the bucket directory
        try:
            full_path.relative_to(self.bucket_path.resolve())
        except ValueError:
            raise ValueError(f"Invalid key: {key} (outside bucket directory)")

        return full_path

    def ensure_bucket(self) -> None:
        try:
            self.bucket_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise UpstreamError("storage", str(e), operation="ensure_bucket", bucket=self.bucket)
        logger.info("Local storage ready", path=str(self.bucket_path))

    def upload(self, key: str, content: bytes, content_type: str | None = None) -> str:
        full_path = self._resolve_path(key)
        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            full_path.write_bytes(content)
        except OSError as e:
            raise UpstreamError("storage", str(e), operation="upload", key=key)

        logger.info("Object stored", key=key, size=len(content))
        return self.public_url(key)

    def delete(self, key: str) -> bool:
        full_path = self._resolve_path(key)

        if not full_path.is_file():
            return False

        try:
            full_path.unlink()
        except OSError as e:
            raise UpstreamError("storage", str(e), operation="delete", key=key)

        logger.info("Object deleted", key=key)
        return True

    def exists(self, key: str) -> bool:
        return self._resolve_path(key).is_file()
