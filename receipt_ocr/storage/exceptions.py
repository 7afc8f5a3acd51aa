class BlobStoreError(Exception):
    """Raised when a blob store operation fails."""


class BlobNotFoundError(BlobStoreError):
    """Raised when the requested object does not exist in the bucket."""
