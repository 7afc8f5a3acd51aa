from abc import ABC, abstractmethod


class BaseBlobStore(ABC):
    """Contract for all object storage adapters.

    Adapters translate provider failures into BlobStoreError (or
    BlobNotFoundError when the object is missing).
    """

    @abstractmethod
    def download(self, bucket_name: str, object_name: str, start: int | None = None) -> bytes:
        """Return the object content, optionally from byte offset `start` to the end."""

    @abstractmethod
    def exists(self, bucket_name: str, object_name: str) -> bool:
        """Return True if the object exists."""

    @abstractmethod
    def write(
        self,
        bucket_name: str,
        object_name: str,
        data: bytes,
        *,
        append: bool = False,
        content_type: str = "application/octet-stream",
    ) -> None:
        """Write `data` as the whole object, or after its current end when `append` is set.

        Appending to a missing object creates it.
        """

    @abstractmethod
    def rename(self, bucket_name: str, object_name: str, new_name: str) -> None:
        """Rename an object within the same bucket."""

    @abstractmethod
    def get_size(self, bucket_name: str, object_name: str) -> int:
        """Return the object size in bytes."""
