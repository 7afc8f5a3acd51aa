from unittest.mock import MagicMock, patch

import pytest
import requests
from google.api_core import exceptions as gcloud_exceptions
from google.auth import exceptions as auth_exceptions

from receipt_ocr.processor.csv_appender import CsvAppender
from receipt_ocr.processor.exceptions import CsvAppendError, FileStateMarkerError
from receipt_ocr.processor.file_state import FileStateMarker
from receipt_ocr.processor.models import FileState
from receipt_ocr.storage.exceptions import BlobNotFoundError, BlobStoreError
from receipt_ocr.storage.gcs_adapter import GcsBlobStore


def _make_store() -> tuple[GcsBlobStore, MagicMock, MagicMock]:
    client = MagicMock()
    bucket = MagicMock()
    blob = MagicMock()
    client.bucket.return_value = bucket
    bucket.blob.return_value = blob
    return GcsBlobStore(client=client), bucket, blob


class TestDownload:
    def test_returns_bytes(self) -> None:
        store, _bucket, blob = _make_store()
        blob.download_as_bytes.return_value = b"img"

        assert store.download("b", "r1.jpg") == b"img"
        blob.download_as_bytes.assert_called_once_with(start=None)

    def test_passes_start_offset(self) -> None:
        store, _bucket, blob = _make_store()
        blob.download_as_bytes.return_value = b"\n"

        store.download("b", "output.csv", start=41)

        blob.download_as_bytes.assert_called_once_with(start=41)

    def test_not_found_raises_blob_not_found(self) -> None:
        store, _bucket, blob = _make_store()
        blob.download_as_bytes.side_effect = gcloud_exceptions.NotFound("gone")

        with pytest.raises(BlobNotFoundError, match="gs://b/r1.jpg"):
            store.download("b", "r1.jpg")

    def test_api_error_raises_blob_store_error(self) -> None:
        store, _bucket, blob = _make_store()
        blob.download_as_bytes.side_effect = gcloud_exceptions.ServiceUnavailable("down")

        with pytest.raises(BlobStoreError, match="Failed to download"):
            store.download("b", "r1.jpg")


class TestWrite:
    def test_overwrite_uploads_data(self) -> None:
        store, _bucket, blob = _make_store()

        store.write("b", "output.csv", b"a\n", content_type="text/csv")

        blob.upload_from_string.assert_called_once_with(b"a\n", content_type="text/csv")
        blob.exists.assert_not_called()

    def test_append_reuploads_existing_content(self) -> None:
        store, _bucket, blob = _make_store()
        blob.exists.return_value = True
        blob.download_as_bytes.return_value = b"h\nr1\n"

        store.write("b", "output.csv", b"r2\n", append=True, content_type="text/csv")

        blob.upload_from_string.assert_called_once_with(b"h\nr1\nr2\n", content_type="text/csv")

    def test_append_to_missing_object_creates_it(self) -> None:
        store, _bucket, blob = _make_store()
        blob.exists.return_value = False

        store.write("b", "output.csv", b"r1\n", append=True, content_type="text/csv")

        blob.download_as_bytes.assert_not_called()
        blob.upload_from_string.assert_called_once_with(b"r1\n", content_type="text/csv")

    def test_upload_error_raises_blob_store_error(self) -> None:
        store, _bucket, blob = _make_store()
        blob.upload_from_string.side_effect = gcloud_exceptions.Forbidden("denied")

        with pytest.raises(BlobStoreError, match="Failed to write"):
            store.write("b", "output.csv", b"x")


class TestRename:
    def test_renames_within_bucket(self) -> None:
        store, bucket, blob = _make_store()

        store.rename("b", "r1.jpg", "[PROCESSED]r1.jpg")

        bucket.blob.assert_called_with("r1.jpg")
        bucket.rename_blob.assert_called_once_with(blob, "[PROCESSED]r1.jpg")

    def test_not_found_raises_blob_not_found(self) -> None:
        store, bucket, _blob = _make_store()
        bucket.rename_blob.side_effect = gcloud_exceptions.NotFound("gone")

        with pytest.raises(BlobNotFoundError):
            store.rename("b", "r1.jpg", "[PROCESSED]r1.jpg")


class TestExistsAndSize:
    def test_exists_delegates_to_blob(self) -> None:
        store, _bucket, blob = _make_store()
        blob.exists.return_value = True
        assert store.exists("b", "output.csv") is True

    def test_get_size_reads_metadata(self) -> None:
        store, bucket, _blob = _make_store()
        bucket.get_blob.return_value = MagicMock(size=42)

        assert store.get_size("b", "output.csv") == 42

    def test_get_size_missing_raises(self) -> None:
        store, bucket, _blob = _make_store()
        bucket.get_blob.return_value = None

        with pytest.raises(BlobNotFoundError):
            store.get_size("b", "output.csv")


class TestTransportErrors:
    def test_connection_error_on_download_raises_blob_store_error(self) -> None:
        store, _bucket, blob = _make_store()
        blob.download_as_bytes.side_effect = requests.ConnectionError("connection reset")

        with pytest.raises(BlobStoreError, match="connection reset"):
            store.download("b", "r1.jpg")

    def test_connection_error_on_exists_raises_blob_store_error(self) -> None:
        store, _bucket, blob = _make_store()
        blob.exists.side_effect = requests.ConnectionError("connection reset")

        with pytest.raises(BlobStoreError, match="Failed to check"):
            store.exists("b", "output.csv")

    def test_connection_error_on_rename_raises_blob_store_error(self) -> None:
        store, bucket, _blob = _make_store()
        bucket.rename_blob.side_effect = requests.ConnectionError("connection reset")

        with pytest.raises(BlobStoreError, match="Failed to rename"):
            store.rename("b", "r1.jpg", "[PROCESSED]r1.jpg")

    def test_auth_error_on_upload_raises_blob_store_error(self) -> None:
        store, _bucket, blob = _make_store()
        blob.upload_from_string.side_effect = auth_exceptions.TransportError("token refresh failed")

        with pytest.raises(BlobStoreError, match="Failed to write"):
            store.write("b", "output.csv", b"x")

    def test_timeout_on_get_size_raises_blob_store_error(self) -> None:
        store, bucket, _blob = _make_store()
        bucket.get_blob.side_effect = requests.Timeout("read timed out")

        with pytest.raises(BlobStoreError, match="Failed to stat"):
            store.get_size("b", "output.csv")

    def test_missing_credentials_raise_blob_store_error(self) -> None:
        with (
            patch(
                "receipt_ocr.storage.gcs_adapter.storage.Client",
                side_effect=auth_exceptions.DefaultCredentialsError("no credentials"),
            ),
            pytest.raises(BlobStoreError, match="no credentials"),
        ):
            GcsBlobStore()

    def test_appender_surfaces_dropped_connection_as_csv_append_error(self) -> None:
        store, _bucket, blob = _make_store()
        blob.exists.side_effect = requests.ConnectionError("connection reset")
        appender = CsvAppender(store, bucket_name="b", columns=["SourceFile", "StoreName"])

        with pytest.raises(CsvAppendError, match="connection reset"):
            appender.append_row(("r1.jpg", "Acme"), "output.csv")

    def test_marker_surfaces_dropped_connection_as_fatal_marker_error(self) -> None:
        store, bucket, _blob = _make_store()
        bucket.rename_blob.side_effect = requests.ConnectionError("connection reset")

        with pytest.raises(FileStateMarkerError) as exc_info:
            FileStateMarker(store).mark("b", "r1.jpg", FileState.PROCESSED)

        assert exc_info.value.fatal is True
