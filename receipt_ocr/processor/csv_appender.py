import csv
import io
from collections.abc import Iterable, Sequence

from receipt_ocr.logging.logger import Log
from receipt_ocr.processor.exceptions import CsvAppendError
from receipt_ocr.storage.base import BaseBlobStore
from receipt_ocr.storage.exceptions import BlobStoreError

LINE_TERMINATOR = "\n"


def encode_rows(rows: Iterable[Sequence[object]]) -> bytes:
    """Encode rows with csv.writer (minimal quoting, `\\n` terminated) as UTF-8."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator=LINE_TERMINATOR)
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


class CsvAppender:
    """Appends rows to a shared CSV object, writing the header only on creation.

    Existence check and write are not atomic: two invocations that both see
    the object as missing will each write a fresh header and the later one wins.
    """

    CONTENT_TYPE = "text/csv"

    def __init__(self, blob_store: BaseBlobStore, bucket_name: str, columns: Sequence[str]) -> None:
        self._blob_store = blob_store
        self._bucket_name = bucket_name
        self._columns = list(columns)

    @property
    def columns(self) -> list[str]:
        return list(self._columns)

    def append_row(self, row: Sequence[object], target_object_name: str) -> None:
        """Add one row to `target_object_name`, creating it with a header if needed.

        Raises:
            CsvAppendError: on a row/column mismatch, an encoding failure, or a store failure.
        """
        if len(row) != len(self._columns):
            raise CsvAppendError(
                f"Row has {len(row)} values, expected {len(self._columns)} ({self._columns})"
            )
        try:
            size = self._existing_size(target_object_name)
            if size == 0:
                self._create(target_object_name, row)
            else:
                self._append(target_object_name, row, size)
        except (BlobStoreError, csv.Error, UnicodeEncodeError) as exc:
            raise CsvAppendError(f"Failed to write CSV {target_object_name}: {exc}") from exc

    def _create(self, target_object_name: str, row: Sequence[object]) -> None:
        payload = encode_rows([self._columns, row])
        self._blob_store.write(
            self._bucket_name,
            target_object_name,
            payload,
            content_type=self.CONTENT_TYPE,
        )
        Log.info(f"Created CSV file {target_object_name} with header")

    def _append(self, target_object_name: str, row: Sequence[object], size: int) -> None:
        payload = encode_rows([row])
        if self._needs_separator(target_object_name, size):
            payload = LINE_TERMINATOR.encode("utf-8") + payload
        self._blob_store.write(
            self._bucket_name,
            target_object_name,
            payload,
            append=True,
            content_type=self.CONTENT_TYPE,
        )
        Log.info(f"Appended data to CSV file {target_object_name}")

    def _existing_size(self, target_object_name: str) -> int:
        """Size of the target, 0 when it does not exist. An empty object gets a header too."""
        if not self._blob_store.exists(self._bucket_name, target_object_name):
            return 0
        return self._blob_store.get_size(self._bucket_name, target_object_name)

    def _needs_separator(self, target_object_name: str, size: int) -> bool:
        tail = self._blob_store.download(self._bucket_name, target_object_name, start=size - 1)
        return not tail.endswith(LINE_TERMINATOR.encode("utf-8"))
