"""In-memory blob store.

No network calls. Used for local development, tests, and as a reference for
the semantics every real adapter must provide.
"""

from receipt_ocr.storage.base import BaseBlobStore
from receipt_ocr.storage.exceptions import BlobNotFoundError


class InMemoryBlobStore(BaseBlobStore):
    """Keeps objects in a dict keyed by (bucket, object name)."""

    def __init__(self, objects: dict[tuple[str, str], bytes] | None = None) -> None:
        self._objects: dict[tuple[str, str], bytes] = dict(objects or {})
        self._content_types: dict[tuple[str, str], str] = {}

    def download(self, bucket_name: str, object_name: str, start: int | None = None) -> bytes:
        data = self._get(bucket_name, object_name)
        return data if start is None else data[start:]

    def exists(self, bucket_name: str, object_name: str) -> bool:
        return (bucket_name, object_name) in self._objects

    def write(
        self,
        bucket_name: str,
        object_name: str,
        data: bytes,
        *,
        append: bool = False,
        content_type: str = "application/octet-stream",
    ) -> None:
        key = (bucket_name, object_name)
        existing = self._objects.get(key, b"") if append else b""
        self._objects[key] = existing + data
        self._content_types[key] = content_type

    def rename(self, bucket_name: str, object_name: str, new_name: str) -> None:
        data = self._get(bucket_name, object_name)
        old_key, new_key = (bucket_name, object_name), (bucket_name, new_name)
        self._objects[new_key] = data
        if old_key in self._content_types:
            self._content_types[new_key] = self._content_types.pop(old_key)
        del self._objects[old_key]

    def get_size(self, bucket_name: str, object_name: str) -> int:
        return len(self._get(bucket_name, object_name))

    def content_type(self, bucket_name: str, object_name: str) -> str | None:
        return self._content_types.get((bucket_name, object_name))

    def object_names(self, bucket_name: str) -> list[str]:
        return sorted(name for bucket, name in self._objects if bucket == bucket_name)

    def _get(self, bucket_name: str, object_name: str) -> bytes:
        try:
            return self._objects[(bucket_name, object_name)]
        except KeyError:
            raise BlobNotFoundError(f"{bucket_name}/{object_name} not found") from None
