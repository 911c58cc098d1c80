from pathlib import Path

from app.storage.base import BaseBlobStore
from app.storage.exceptions import BlobStoreError


class LocalBlobStore(BaseBlobStore):
    """Writes blobs as files under a root directory."""

    def __init__(self, files_root: Path) -> None:
        self._files_root = files_root

    def put(self, key: str, data: bytes, content_type: str) -> None:
        _ = content_type
        path = self.resolve_path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise BlobStoreError(f"Failed to write blob '{key}': {exc}") from exc

    def resolve_path(self, key: str) -> Path:
        root = self._files_root.resolve()
        path = (root / key).resolve()
        if root not in path.parents:
            raise BlobStoreError(f"Blob key '{key}' escapes the storage root")
        return path
