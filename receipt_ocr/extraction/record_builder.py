"""Builds an ExtractedRecord from the parsed model response."""

from typing import Any

from receipt_ocr.extraction.exceptions import ExtractionParseError
from receipt_ocr.extraction.models import ExtractedRecord, FieldSpec, FieldValue, RecordSchema


def build_record(data: dict[str, Any], schema: RecordSchema) -> ExtractedRecord:
    """Fill every schema field from `data`, substituting defaults for absent values.

    A field is absent when its key is missing or its value is null. Present
    values keep their type, except that booleans and integral floats are
    rewritten the way the CSV output renders them. No other validation.

    Raises:
        ExtractionParseError: if the response carries none of the schema fields.
    """
    if not any(key in data for key in schema.keys):
        raise ExtractionParseError(
            f"Response has none of the expected fields {schema.keys}: {sorted(data)}"
        )
    return ExtractedRecord(values={f.key: _field_value(data, f) for f in schema.fields})


def _field_value(data: dict[str, Any], spec: FieldSpec) -> FieldValue:
    value = data.get(spec.key)
    if value is None:
        return spec.default
    # JSON booleans are written as 1 and empty, integral numbers without a fraction.
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, (str, int, float)):
        return value
    return str(value)
