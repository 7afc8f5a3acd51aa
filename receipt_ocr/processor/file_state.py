from receipt_ocr.logging.logger import Log
from receipt_ocr.processor.exceptions import FileStateMarkerError
from receipt_ocr.processor.models import FileState
from receipt_ocr.storage.base import BaseBlobStore
from receipt_ocr.storage.exceptions import BlobStoreError


class FileStateMarker:
    """Moves a source object to a terminal state by renaming it with the state prefix."""

    def __init__(self, blob_store: BaseBlobStore) -> None:
        self._blob_store = blob_store

    def mark(self, bucket_name: str, object_name: str, outcome: FileState) -> str:
        """Rename `object_name` to `<outcome prefix><object_name>` and return the new name.

        Raises:
            ValueError: if `outcome` is not a terminal state.
            FileStateMarkerError: if the rename fails. Not retried.
        """
        if outcome is FileState.UNPROCESSED:
            raise ValueError("Cannot mark an object as unprocessed")
        new_name = f"{outcome.prefix}{object_name}"
        try:
            self._blob_store.rename(bucket_name, object_name, new_name)
        except BlobStoreError as exc:
            raise FileStateMarkerError(
                f"Failed to rename {object_name} to {new_name}: {exc}", fatal=True
            ) from exc
        Log.info(f"Renamed {object_name} to {new_name}")
        return new_name
