class BlobStoreError(Exception):
    """Raised when raw file bytes cannot be written to the blob store."""
