from google.api_core import exceptions as gcloud_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import storage
from requests import exceptions as requests_exceptions

from receipt_ocr.storage.base import BaseBlobStore
from receipt_ocr.storage.exceptions import BlobNotFoundError, BlobStoreError

# API responses, credential failures and dropped connections from the HTTP transport.
_STORE_ERRORS = (
    gcloud_exceptions.GoogleAPIError,
    auth_exceptions.GoogleAuthError,
    requests_exceptions.RequestException,
)


class GcsBlobStore(BaseBlobStore):
    """Blob store adapter for Google Cloud Storage.

    GCS objects are immutable, so `write(append=True)` downloads the current
    content and uploads it again with the new bytes at the end. No generation
    precondition is used: concurrent appends to the same object can lose rows.
    """

    def __init__(self, client: storage.Client | None = None, project: str | None = None) -> None:
        if client is None:
            try:
                client = storage.Client(project=project or None)
            except auth_exceptions.GoogleAuthError as exc:
                raise BlobStoreError(f"Failed to create Cloud Storage client: {exc}") from exc
        self._client = client

    def download(self, bucket_name: str, object_name: str, start: int | None = None) -> bytes:
        blob = self._blob(bucket_name, object_name)
        try:
            return blob.download_as_bytes(start=start)
        except gcloud_exceptions.NotFound as exc:
            raise BlobNotFoundError(f"gs://{bucket_name}/{object_name} not found") from exc
        except _STORE_ERRORS as exc:
            raise BlobStoreError(
                f"Failed to download gs://{bucket_name}/{object_name}: {exc}"
            ) from exc

    def exists(self, bucket_name: str, object_name: str) -> bool:
        try:
            return self._blob(bucket_name, object_name).exists()
        except _STORE_ERRORS as exc:
            raise BlobStoreError(
                f"Failed to check gs://{bucket_name}/{object_name}: {exc}"
            ) from exc

    def write(
        self,
        bucket_name: str,
        object_name: str,
        data: bytes,
        *,
        append: bool = False,
        content_type: str = "application/octet-stream",
    ) -> None:
        payload = data
        if append and self.exists(bucket_name, object_name):
            payload = self.download(bucket_name, object_name) + data
        blob = self._blob(bucket_name, object_name)
        try:
            blob.upload_from_string(payload, content_type=content_type)
        except _STORE_ERRORS as exc:
            raise BlobStoreError(
                f"Failed to write gs://{bucket_name}/{object_name}: {exc}"
            ) from exc

    def rename(self, bucket_name: str, object_name: str, new_name: str) -> None:
        bucket = self._client.bucket(bucket_name)
        try:
            bucket.rename_blob(bucket.blob(object_name), new_name)
        except gcloud_exceptions.NotFound as exc:
            raise BlobNotFoundError(f"gs://{bucket_name}/{object_name} not found") from exc
        except _STORE_ERRORS as exc:
            raise BlobStoreError(
                f"Failed to rename gs://{bucket_name}/{object_name} to {new_name}: {exc}"
            ) from exc

    def get_size(self, bucket_name: str, object_name: str) -> int:
        try:
            blob = self._client.bucket(bucket_name).get_blob(object_name)
        except _STORE_ERRORS as exc:
            raise BlobStoreError(
                f"Failed to stat gs://{bucket_name}/{object_name}: {exc}"
            ) from exc
        if blob is None:
            raise BlobNotFoundError(f"gs://{bucket_name}/{object_name} not found")
        return blob.size or 0

    def _blob(self, bucket_name: str, object_name: str) -> storage.Blob:
        return self._client.bucket(bucket_name).blob(object_name)
