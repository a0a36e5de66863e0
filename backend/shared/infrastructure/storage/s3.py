"""S3-compatible object storage backend."""

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from shared.config.logging import storage_logger as logger
from shared.infrastructure.storage.base import Storage
from shared.utils.exceptions import UpstreamError


_MISSING_CODES = {"404", "NoSuchKey", "NoSuchBucket", "NotFound"}


class S3Storage(Storage):
    """
    S3-compatible object storage backend.

    Works with Supabase Storage (S3 endpoint), AWS S3, MinIO and other
    S3-compatible services. Public URLs are built from ``public_base_url``,
    e.g. ``https://<project>.supabase.co/storage/v1/object/public``.
    """

    def __init__(
        self,
        bucket: str,
        public_base_url: str,
        endpoint_url: str | None = None,
        region: str = "us-east-1",
        access_key: str | None = None,
        secret_key: str | None = None,
        client=None,
    ):
        super().__init__(bucket, public_base_url)
        self.endpoint_url = endpoint_url
        self.region = region

        if client is None:
            client_kwargs = {
                "service_name": "s3",
                "region_name": region,
                "config": Config(signature_version="s3v4", s3={"addressing_style": "path"}),
            }

            if endpoint_url:
                client_kwargs["endpoint_url"] = endpoint_url

            if access_key and secret_key:
                client_kwargs["aws_access_key_id"] = access_key
                client_kwargs["aws_secret_access_key"] = secret_key

            client = boto3.client(**client_kwargs)

        self.client = client

        logger.info(
            "S3 storage initialized",
            bucket=bucket,
            endpoint=endpoint_url,
            region=region,
        )

    def ensure_bucket(self) -> None:
        try:
            self.client.head_bucket(Bucket=self.bucket)
            logger.info("Bucket already exists", bucket=self.bucket)
            return
        except ClientError as e:
            if e.response["Error"]["Code"] not in _MISSING_CODES:
                raise UpstreamError("storage", str(e), operation="head_bucket", bucket=self.bucket)
        except BotoCoreError as e:
            raise UpstreamError("storage", str(e), operation="head_bucket", bucket=self.bucket)

        logger.info("Creating bucket", bucket=self.bucket)
        try:
            self.client.create_bucket(Bucket=self.bucket)
        except (ClientError, BotoCoreError) as e:
            raise UpstreamError("storage", str(e), operation="create_bucket", bucket=self.bucket)

    def upload(self, key: str, content: bytes, content_type: str | None = None) -> str:
        key = key.lstrip("/")

        extra_args = {}
        if content_type:
            extra_args["ContentType"] = content_type

        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=content,
                **extra_args,
            )
        except (ClientError, BotoCoreError) as e:
            raise UpstreamError("storage", str(e), operation="upload", key=key)

        logger.info("Object stored", bucket=self.bucket, key=key, size=len(content))
        return self.public_url(key)

    def exists(self, key: str) -> bool:
        key = key.lstrip("/")

        try:
            self.client.head_object(Bucket=self.bucket, Key=key)
            return True
        except ClientError as e:
            if e.response["Error"]["Code"] in _MISSING_CODES:
                return False
            raise UpstreamError("storage", str(e), operation="head_object", key=key)
        except BotoCoreError as e:
            raise UpstreamError("storage", str(e), operation="head_object", key=key)

    def delete(self, key: str) -> bool:
        key = key.lstrip("/")

        if not self.exists(key):
            return False

        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise UpstreamError("storage", str(e), operation="delete", key=key)

        logger.info("Object deleted", bucket=self.bucket, key=key)
        return True

    def close(self) -> None:
        self.client.close()
