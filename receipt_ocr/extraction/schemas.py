"""Built-in record schemas. The active one is chosen by `Settings.record_schema`."""

from receipt_ocr.extraction.models import FieldSpec, RecordSchema

RECEIPT_SCHEMA = RecordSchema(
    name="receipt",
    fields=(
        FieldSpec("store_name", "StoreName"),
        FieldSpec("total_amount", "TotalAmount", "number"),
        FieldSpec("transaction_date", "TransactionDate"),
    ),
)

INVOICE_SCHEMA = RecordSchema(
    name="invoice",
    fields=(
        FieldSpec("invoice_number", "InvoiceNumber"),
        FieldSpec("company_name", "CompanyName"),
        FieldSpec("invoice_date", "InvoiceDate"),
        FieldSpec("total_amount", "TotalAmount", "number"),
    ),
)

RECORD_SCHEMAS: dict[str, RecordSchema] = {
    RECEIPT_SCHEMA.name: RECEIPT_SCHEMA,
    INVOICE_SCHEMA.name: INVOICE_SCHEMA,
}


def get_record_schema(name: str) -> RecordSchema:
    schema = RECORD_SCHEMAS.get(name.lower())
    if schema is None:
        raise ValueError(f"Unknown record schema '{name}'. Choose from: {list(RECORD_SCHEMAS)}")
    return schema
