from dataclasses import dataclass, field
from typing import Literal

FieldKind = Literal["string", "number"]
FieldValue = str | int | float

SOURCE_FILE_COLUMN = "SourceFile"
MISSING_STRING = "N/A"
MISSING_NUMBER = 0


@dataclass(frozen=True)
class FieldSpec:
    """One extracted field: JSON key in the model response and its CSV column."""

    key: str
    column: str
    kind: FieldKind = "string"

    @property
    def default(self) -> FieldValue:
        return MISSING_NUMBER if self.kind == "number" else MISSING_STRING


@dataclass(frozen=True)
class ExtractedRecord:
    """Structured data extracted from one image. Every schema field is present."""

    values: dict[str, FieldValue] = field(default_factory=dict)

    def __getitem__(self, key: str) -> FieldValue:
        return self.values[key]


@dataclass(frozen=True)
class RecordSchema:
    """Ordered field set that fixes both the model output and the CSV columns."""

    name: str
    fields: tuple[FieldSpec, ...]

    @property
    def keys(self) -> list[str]:
        return [f.key for f in self.fields]

    @property
    def columns(self) -> list[str]:
        return [SOURCE_FILE_COLUMN, *(f.column for f in self.fields)]

    def to_row(self, source_object_name: str, record: ExtractedRecord) -> tuple[FieldValue, ...]:
        """Map a record onto the column order, prefixed with the source object name."""
        return (source_object_name, *(record[f.key] for f in self.fields))
