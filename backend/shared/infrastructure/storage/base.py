"""Base object storage interface."""

from abc import ABC, abstractmethod


class Storage(ABC):
    """
    Abstract base class for object storage backends.

    Objects live in a single bucket and are addressed by slash-separated
    keys (e.g. "products/12/image_1718000000000.png"). Every stored object
    is publicly readable at ``public_url(key)``.
    """

    def __init__(self, bucket: str, public_base_url: str):
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")

    @abstractmethod
    def ensure_bucket(self) -> None:
        """
        Create the bucket if it does not exist.

        Raises:
            UpstreamError: If the backend cannot be reached or refuses
        """
        ...

    @abstractmethod
    def upload(self, key: str, content: bytes, content_type: str | None = None) -> str:
        """
        Store content under key, replacing any existing object.

        Args:
            key: Object key
            content: Raw bytes
            content_type: Optional MIME type

        Returns:
            Public URL of the stored object

        Raises:
            UpstreamError: If the write fails
        """
        ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Delete an object.

        Returns:
            True if deleted, False if it didn't exist
        """
        ...

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if an object exists."""
        ...

    def close(self) -> None:
        """Release client resources. No-op by default."""

    def public_url(self, key: str) -> str:
        """Public URL for an object key."""
        return f"{self.public_base_url}/{self.bucket}/{key.lstrip('/')}"

    def key_from_url(self, url: str | None) -> str | None:
        """
        Recover the object key from a public URL issued by this storage.

        Returns None for URLs pointing elsewhere (e.g. external image links).
        """
        if not url:
            return None
        prefix = f"{self.public_base_url}/{self.bucket}/"
        if not url.startswith(prefix):
            return None
        key = url[len(prefix):].split("?", 1)[0]
        if not key or ".." in key.split("/"):
            return None
        return key
