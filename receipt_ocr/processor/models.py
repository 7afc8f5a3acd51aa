from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class UploadEvent:
    """Object-finalized notification for one uploaded file."""

    bucket_name: str | None
    object_name: str | None
    content_type: str | None = None

    @classmethod
    def from_event_data(cls, data: Mapping[str, Any] | None) -> "UploadEvent":
        """Build from a Cloud Storage event payload (`bucket`, `name`, `contentType`)."""
        data = data or {}
        return cls(
            bucket_name=data.get("bucket") or None,
            object_name=data.get("name") or None,
            content_type=data.get("contentType") or None,
        )


class FileState(Enum):
    """Processing state of a source object, encoded as a prefix of its name."""

    UNPROCESSED = ""
    PROCESSED = "[PROCESSED]"
    ERROR = "[ERROR_PROCESSED]"

    @property
    def prefix(self) -> str:
        return self.value

    @classmethod
    def from_object_name(cls, object_name: str) -> "FileState":
        for state in (cls.ERROR, cls.PROCESSED):
            if object_name.startswith(state.prefix):
                return state
        return cls.UNPROCESSED
