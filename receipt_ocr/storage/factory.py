from receipt_ocr.config.settings import Settings
from receipt_ocr.storage.base import BaseBlobStore
from receipt_ocr.storage.gcs_adapter import GcsBlobStore
from receipt_ocr.storage.memory_adapter import InMemoryBlobStore


class BlobStoreFactory:
    """Creates the blob store adapter selected in settings."""

    ADAPTERS: tuple[str, ...] = ("gcs", "memory")

    @classmethod
    def create(cls, settings: Settings) -> BaseBlobStore:
        backend = settings.blob_store.lower()
        if backend == "gcs":
            return GcsBlobStore(project=settings.gcp_project or None)
        if backend == "memory":
            return InMemoryBlobStore()
        raise ValueError(f"Unknown blob store '{backend}'. Choose from: {list(cls.ADAPTERS)}")
