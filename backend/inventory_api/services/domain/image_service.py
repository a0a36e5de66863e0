"""
Product Image Service.

Upload flow:
1. Reject non-image media types (415)
2. Spool the upload to a local temp file, enforcing the size limit (413)
3. Check the product exists (404)
4. Upload to object storage under products/{id}/image_{epoch_ms}{ext}
5. Point the product's image_url at the public URL

The temp file is removed on every path out of step 2 onwards.
"""

from __future__ import annotations

import os
import tempfile
import time
from typing import BinaryIO

from sqlalchemy.orm import Session

from inventory_api.models import Product
from inventory_api.repositories import ProductRepository
from shared.config.constants import ImageStorage
from shared.config.logging import storage_logger as logger
from shared.infrastructure.storage import Storage
from shared.utils.exceptions import NotFoundError, UnsupportedMediaError, UpstreamError
from shared.utils.schemas import ImageResult
from shared.utils.validators import is_image_media_type

CHUNK_SIZE = 64 * 1024


def image_key(product_id: int, filename: str | None, timestamp_ms: int | None = None) -> str:
    """Object key for a new product image. The extension comes from the upload name."""
    ext = os.path.splitext(filename or "")[1].lower() or ImageStorage.DEFAULT_EXTENSION
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return ImageStorage.KEY_TEMPLATE.format(product_id=product_id, timestamp=timestamp_ms, ext=ext)


def spool_to_tempfile(source: BinaryIO, max_bytes: int) -> str:
    """
    Copy an upload stream into a named temp file.

    Returns:
        Path of the temp file. The caller owns it and must remove it.

    Raises:
        UnsupportedMediaError: the stream is larger than max_bytes (413).
    """
    fd, path = tempfile.mkstemp(prefix="upload_")
    written = 0
    try:
        with os.fdopen(fd, "wb") as target:
            while True:
                chunk = source.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > max_bytes:
                    raise UnsupportedMediaError(
                        f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB",
                        too_large=True,
                        size=written,
                    )
                target.write(chunk)
    except Exception:
        _remove(path)
        raise
    return path


def _remove(path: str) -> None:
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass


class ImageService:
    """Attach and detach product images."""

    def __init__(self, db: Session, storage: Storage, max_bytes: int):
        self._products = ProductRepository(db)
        self._storage = storage
        self._max_bytes = max_bytes

    def _get_product(self, product_id: int) -> Product:
        product = self._products.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def upload(
        self,
        product_id: int,
        source: BinaryIO,
        filename: str | None,
        content_type: str | None,
    ) -> ImageResult:
        """
        Store a new image for the product.

        Raises:
            UnsupportedMediaError: not an image (415) or too large (413).
            NotFoundError: product does not exist.
            UpstreamError: storage or database write failed.
        """
        if not is_image_media_type(content_type):
            raise UnsupportedMediaError(
                "Not an image! Please upload only images.",
                content_type=content_type,
            )

        path = spool_to_tempfile(source, self._max_bytes)
        try:
            product = self._get_product(product_id)
            with open(path, "rb") as spooled:
                content = spooled.read()

            key = image_key(product_id, filename)
            url = self._storage.upload(key, content, content_type)
            try:
                self._products.update(product, {"image_url": url})
            except UpstreamError:
                # Nothing points at the new object
                self._storage.delete(key)
                raise
        finally:
            _remove(path)

        logger.info("Product image uploaded", product_id=product_id, key=key, size=len(content))
        return ImageResult(image_url=url)

    def remove(self, product_id: int) -> ImageResult:
        """
        Clear the product's image, deleting the stored object when it is ours.

        Raises:
            NotFoundError: product does not exist.
        """
        product = self._get_product(product_id)

        key = self._storage.key_from_url(product.image_url)
        if key is not None:
            deleted = self._storage.delete(key)
            logger.info("Product image deleted", product_id=product_id, key=key, existed=deleted)

        self._products.update(product, {"image_url": None})
        return ImageResult(image_url=None)
