import base64

import pytest

from receipt_ocr.config.settings import Settings
from receipt_ocr.storage.memory_adapter import InMemoryBlobStore

# 1x1 transparent PNG
_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


@pytest.fixture()
def png_bytes() -> bytes:
    """A minimal valid PNG image."""
    return base64.b64decode(_PNG_BASE64)


@pytest.fixture()
def memory_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture()
def offline_settings() -> Settings:
    """Settings that need no cloud credentials."""
    return Settings(
        _env_file=None,
        blob_store="memory",
        vision_provider="example",
        output_bucket_name="b",
        output_csv_file="output.csv",
    )
