"""
Tests for the object storage backends.
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from shared.infrastructure.storage import LocalStorage, S3Storage
from shared.utils.exceptions import UpstreamError


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class TestLocalStorage:
    def test_upload_exists_delete(self, tmp_path):
        storage = LocalStorage(tmp_path)
        storage.ensure_bucket()

        url = storage.upload("products/1/image_1.png", b"data", "image/png")
        assert url == "/uploads/product-images/products/1/image_1.png"
        assert (tmp_path / "product-images" / "products" / "1" / "image_1.png").read_bytes() == b"data"
        assert storage.exists("products/1/image_1.png")

        assert storage.delete("products/1/image_1.png") is True
        assert storage.delete("products/1/image_1.png") is False

    def test_key_from_url(self, tmp_path):
        storage = LocalStorage(tmp_path)
        assert storage.key_from_url("/uploads/product-images/products/1/a.png") == "products/1/a.png"
        assert storage.key_from_url("https://elsewhere.example/a.png") is None
        assert storage.key_from_url("/uploads/product-images/../../etc/passwd") is None
        assert storage.key_from_url(None) is None

    def test_rejects_escaping_keys(self, tmp_path):
        storage = LocalStorage(tmp_path)
        with pytest.raises(ValueError):
            storage.upload("../outside.txt", b"x")


class TestS3Storage:
    def _storage(self, client):
        return S3Storage(
            bucket="product-images",
            public_base_url="https://project.supabase.co/storage/v1/object/public",
            client=client,
        )

    def test_upload_returns_public_url(self):
        client = MagicMock()
        storage = self._storage(client)

        url = storage.upload("products/2/image_5.jpg", b"img", "image/jpeg")

        client.put_object.assert_called_once_with(
            Bucket="product-images",
            Key="products/2/image_5.jpg",
            Body=b"img",
            ContentType="image/jpeg",
        )
        assert url == (
            "https://project.supabase.co/storage/v1/object/public/product-images/products/2/image_5.jpg"
        )

    def test_ensure_bucket_creates_missing(self):
        client = MagicMock()
        client.head_bucket.side_effect = _client_error("404", "HeadBucket")
        self._storage(client).ensure_bucket()
        client.create_bucket.assert_called_once_with(Bucket="product-images")

    def test_ensure_bucket_existing(self):
        client = MagicMock()
        self._storage(client).ensure_bucket()
        client.create_bucket.assert_not_called()

    def test_upload_failure_is_upstream_error(self):
        client = MagicMock()
        client.put_object.side_effect = _client_error("AccessDenied", "PutObject")
        with pytest.raises(UpstreamError) as exc:
            self._storage(client).upload("k", b"x")
        assert exc.value.status_code == 500
        assert "AccessDenied" in exc.value.detail

    def test_connection_failure_is_upstream_error(self):
        client = MagicMock()
        client.head_bucket.side_effect = EndpointConnectionError(endpoint_url="http://nowhere")
        with pytest.raises(UpstreamError):
            self._storage(client).ensure_bucket()

    def test_delete_missing_object(self):
        client = MagicMock()
        client.head_object.side_effect = _client_error("404", "HeadObject")
        assert self._storage(client).delete("products/1/x.png") is False
        client.delete_object.assert_not_called()
