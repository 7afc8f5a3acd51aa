from receipt_ocr.config.settings import Settings
from receipt_ocr.extraction.base import BaseExtractor
from receipt_ocr.extraction.factory import ExtractorFactory
from receipt_ocr.logging.logger import Log
from receipt_ocr.processor.csv_appender import CsvAppender
from receipt_ocr.processor.file_state import FileStateMarker
from receipt_ocr.processor.models import FileState, UploadEvent
from receipt_ocr.processor.pipeline import PipelineContext, PipelineStep
from receipt_ocr.processor.steps import (
    AppendRowStep,
    ExtractRecordStep,
    FetchImageStep,
    FormatRowStep,
    MarkProcessedStep,
)
from receipt_ocr.storage.base import BaseBlobStore
from receipt_ocr.storage.factory import BlobStoreFactory


class EventPipeline:
    """Processes one upload event end to end.

    Pipeline: validate -> skip filter -> fetch -> extract -> format -> append -> mark.
    Any failure after validation renames the source object with the error
    prefix and re-raises the original exception to the runtime.
    """

    def __init__(
        self,
        *,
        steps: list[PipelineStep],
        marker: FileStateMarker,
        output_csv_file: str,
    ) -> None:
        self._steps = steps
        self._marker = marker
        self._output_csv_file = output_csv_file

    def process(self, event: UploadEvent) -> None:
        """Run the full processing pipeline for one uploaded object."""
        if not event.object_name or not event.bucket_name:
            Log.error(
                "Invalid storage event: missing file name or bucket name",
                bucket_name=event.bucket_name,
                object_name=event.object_name,
            )
            return

        if self.should_skip(event.object_name):
            Log.info(f"Skipping processed file or CSV file: {event.object_name}")
            return

        Log.info(f"Processing receipt: {event.object_name} from bucket: {event.bucket_name}")
        context = PipelineContext(event=event)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            Log.error(
                f"Processing failed for {event.object_name}: {exc}",
                error_type=type(exc).__name__,
            )
            self._mark_error(event.bucket_name, event.object_name)
            raise

        Log.info(
            f"Processing complete for {event.object_name}. "
            f"Data appended to {self._output_csv_file}."
        )

    def should_skip(self, object_name: str) -> bool:
        """True for objects already in a terminal state and for the output CSV itself."""
        if object_name == self._output_csv_file:
            return True
        return FileState.from_object_name(object_name) is not FileState.UNPROCESSED

    def _mark_error(self, bucket_name: str, object_name: str) -> None:
        try:
            self._marker.mark(bucket_name, object_name, FileState.ERROR)
        except Exception as marker_exc:
            Log.critical(
                f"FATAL: Could not rename file after failure: {object_name}: {marker_exc}",
                bucket_name=bucket_name,
                object_name=object_name,
                fatal=getattr(marker_exc, "fatal", True),
            )


def build_pipeline(
    settings: Settings,
    blob_store: BaseBlobStore | None = None,
    extractor: BaseExtractor | None = None,
) -> EventPipeline:
    """Build an EventPipeline with all required adapters."""
    blob_store = blob_store if blob_store is not None else BlobStoreFactory.create(settings)
    extractor = extractor if extractor is not None else ExtractorFactory.create(settings)
    marker = FileStateMarker(blob_store)
    appender = CsvAppender(
        blob_store,
        bucket_name=settings.output_bucket_name,
        columns=extractor.schema.columns,
    )
    steps: list[PipelineStep] = [
        FetchImageStep(blob_store, default_mime_type=settings.default_mime_type),
        ExtractRecordStep(extractor),
        FormatRowStep(extractor.schema),
        AppendRowStep(appender, target_object_name=settings.output_csv_file),
        MarkProcessedStep(marker),
    ]
    return EventPipeline(steps=steps, marker=marker, output_csv_file=settings.output_csv_file)
