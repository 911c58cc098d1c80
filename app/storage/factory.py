from pathlib import Path

from app.config.settings import Settings
from app.storage.base import BaseBlobStore
from app.storage.local_adapter import LocalBlobStore
from app.storage.s3_adapter import S3BlobStore


class BlobStoreFactory:
    """Creates the configured blob store adapter."""

    BACKENDS = ("local", "s3")

    @classmethod
    def create(cls, settings: Settings) -> BaseBlobStore:
        backend = settings.storage_backend.lower()
        if backend == "local":
            return LocalBlobStore(Path(settings.storage_local_root))
        if backend == "s3":
            return S3BlobStore(
                bucket=settings.storage_s3_bucket,
                region=settings.storage_s3_region,
                endpoint_url=settings.storage_s3_endpoint_url,
                access_key_id=settings.storage_s3_access_key_id,
                secret_access_key=settings.storage_s3_secret_access_key,
            )
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
