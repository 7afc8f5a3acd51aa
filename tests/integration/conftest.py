from collections.abc import Callable

import pytest

from receipt_ocr.config.settings import Settings
from receipt_ocr.extraction.example_client_adapter import ExampleClientAdapter
from receipt_ocr.extraction.extractor import Extractor
from receipt_ocr.extraction.schemas import get_record_schema
from receipt_ocr.processor.processor import EventPipeline, build_pipeline
from receipt_ocr.storage.memory_adapter import InMemoryBlobStore

PipelineBuilder = Callable[[dict[str, object]], EventPipeline]


@pytest.fixture()
def build_offline_pipeline(
    offline_settings: Settings, memory_store: InMemoryBlobStore
) -> PipelineBuilder:
    """Build a pipeline over `memory_store` whose model always answers `response`."""

    def _build(response: dict[str, object]) -> EventPipeline:
        extractor = Extractor(
            client=ExampleClientAdapter(response),
            schema=get_record_schema(offline_settings.record_schema),
        )
        return build_pipeline(offline_settings, blob_store=memory_store, extractor=extractor)

    return _build
