"""Cloud Function entry point: one object-finalized event -> one CSV row."""

import argparse

import functions_framework
from cloudevents.http import CloudEvent

from receipt_ocr.config.settings import Settings
from receipt_ocr.logging.logger import Log
from receipt_ocr.processor.models import UploadEvent
from receipt_ocr.processor.processor import EventPipeline, build_pipeline

_pipeline: EventPipeline | None = None


def get_pipeline() -> EventPipeline:
    """Build settings and clients once per process, on first use."""
    global _pipeline
    if _pipeline is None:
        settings = Settings()
        Log.configure(settings.log_level)
        _pipeline = build_pipeline(settings)
        Log.info(
            "Pipeline initialized",
            blob_store=settings.blob_store,
            vision_provider=settings.vision_provider,
            record_schema=settings.record_schema,
        )
    return _pipeline


@functions_framework.cloud_event
def process_receipt(cloud_event: CloudEvent) -> None:
    """Handle a Cloud Storage object-finalized CloudEvent.

    Exceptions propagate so the runtime records the invocation as failed.
    """
    Log.info(f"Received event {cloud_event['id']} of type {cloud_event['type']}")
    get_pipeline().process(UploadEvent.from_event_data(cloud_event.data))


def main() -> None:
    """Local runner: process a single object with the configured adapters."""
    parser = argparse.ArgumentParser(description="Extract receipt data from one uploaded image")
    parser.add_argument("--bucket", required=True, help="Bucket holding the image")
    parser.add_argument("--name", required=True, help="Object name of the image")
    parser.add_argument("--content-type", help="Image MIME type, guessed from the name if omitted")
    args = parser.parse_args()

    event = UploadEvent(
        bucket_name=args.bucket,
        object_name=args.name,
        content_type=args.content_type,
    )
    get_pipeline().process(event)


if __name__ == "__main__":
    main()
