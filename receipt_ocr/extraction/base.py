from abc import ABC, abstractmethod

from receipt_ocr.extraction.models import ExtractedRecord, RecordSchema


class BaseExtractor(ABC):
    """Contract for all extraction adapters."""

    schema: RecordSchema

    @abstractmethod
    def extract(self, image_base64: str, mime_type: str) -> ExtractedRecord:
        """Extract a structured record from a base64-encoded image.

        Args:
            image_base64: Image bytes encoded as base64 text.
            mime_type: Declared content type of the image.

        Returns:
            ExtractedRecord with every field of `schema` present.

        Raises:
            ExtractionError: on any failure.
        """
