from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.storage.base import BaseBlobStore
from app.storage.exceptions import BlobStoreError


class S3BlobStore(BaseBlobStore):
    """Writes blobs to an S3 bucket (or an S3-compatible service such as MinIO)."""

    def __init__(
        self,
        *,
        bucket: str,
        region: str | None = None,
        endpoint_url: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        client: Any | None = None,
    ) -> None:
        self._bucket = bucket
        self._client = client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )

    def put(self, key: str, data: bytes, content_type: str) -> None:
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            raise BlobStoreError(
                f"Failed to upload blob '{key}' to bucket '{self._bucket}': {exc}"
            ) from exc
