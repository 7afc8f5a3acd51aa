import base64
import mimetypes

from receipt_ocr.extraction.base import BaseExtractor
from receipt_ocr.extraction.models import RecordSchema
from receipt_ocr.logging.logger import Log
from receipt_ocr.processor.csv_appender import CsvAppender
from receipt_ocr.processor.exceptions import FetchError
from receipt_ocr.processor.file_state import FileStateMarker
from receipt_ocr.processor.models import FileState
from receipt_ocr.processor.pipeline import PipelineContext, PipelineStep
from receipt_ocr.storage.base import BaseBlobStore
from receipt_ocr.storage.exceptions import BlobStoreError


class FetchImageStep(PipelineStep):
    def __init__(self, blob_store: BaseBlobStore, default_mime_type: str) -> None:
        self._blob_store = blob_store
        self._default_mime_type = default_mime_type

    def run(self, context: PipelineContext) -> PipelineContext:
        Log.info(f"Downloading file: {context.object_name}")
        try:
            raw_bytes = self._blob_store.download(context.bucket_name, context.object_name)
        except BlobStoreError as exc:
            raise FetchError(f"Failed to download {context.object_name}: {exc}") from exc
        if not raw_bytes:
            raise FetchError(f"{context.object_name} is empty")
        context.image_base64 = base64.b64encode(raw_bytes).decode("ascii")
        context.mime_type = self._resolve_mime_type(context)
        Log.info(
            f"Loaded {len(raw_bytes)} bytes ({context.mime_type}) for {context.object_name}"
        )
        return context

    def _resolve_mime_type(self, context: PipelineContext) -> str:
        if context.event.content_type:
            return context.event.content_type
        guessed, _ = mimetypes.guess_type(context.object_name)
        return guessed or self._default_mime_type


class ExtractRecordStep(PipelineStep):
    def __init__(self, extractor: BaseExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.image_base64:
            raise ValueError("PipelineContext.image_base64 must be set before extraction")
        Log.info(f"Calling vision model for {context.object_name}")
        context.record = self._extractor.extract(context.image_base64, context.mime_type)
        return context


class FormatRowStep(PipelineStep):
    def __init__(self, schema: RecordSchema) -> None:
        self._schema = schema

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.record is None:
            raise ValueError("PipelineContext.record must be set before formatting")
        context.row = self._schema.to_row(context.object_name, context.record)
        return context


class AppendRowStep(PipelineStep):
    def __init__(self, appender: CsvAppender, target_object_name: str) -> None:
        self._appender = appender
        self._target_object_name = target_object_name

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.row:
            raise ValueError("PipelineContext.row must be set before appending")
        self._appender.append_row(context.row, self._target_object_name)
        return context


class MarkProcessedStep(PipelineStep):
    def __init__(self, marker: FileStateMarker) -> None:
        self._marker = marker

    def run(self, context: PipelineContext) -> PipelineContext:
        context.processed_name = self._marker.mark(
            context.bucket_name, context.object_name, FileState.PROCESSED
        )
        return context
