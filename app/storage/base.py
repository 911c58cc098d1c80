from abc import ABC, abstractmethod


class BaseBlobStore(ABC):
    """Contract for blob store adapters holding raw uploaded files."""

    @abstractmethod
    def put(self, key: str, data: bytes, content_type: str) -> None:
        """Store bytes under an opaque key.

        Raises:
            BlobStoreError: if the write fails for any reason.
        """
