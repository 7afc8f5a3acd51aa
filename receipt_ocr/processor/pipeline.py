from abc import ABC, abstractmethod
from dataclasses import dataclass

from receipt_ocr.extraction.models import ExtractedRecord, FieldValue
from receipt_ocr.processor.models import UploadEvent


@dataclass(slots=True)
class PipelineContext:
    event: UploadEvent
    mime_type: str = ""
    image_base64: str = ""
    record: ExtractedRecord | None = None
    row: tuple[FieldValue, ...] = ()
    processed_name: str = ""

    @property
    def bucket_name(self) -> str:
        if self.event.bucket_name is None:
            raise ValueError("UploadEvent.bucket_name must be set before running steps")
        return self.event.bucket_name

    @property
    def object_name(self) -> str:
        if self.event.object_name is None:
            raise ValueError("UploadEvent.object_name must be set before running steps")
        return self.event.object_name


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
