from pathlib import Path

from receipt_ocr.extraction.exceptions import ExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(schema_name: str, path: Path | None = None) -> str:
    """Load the extraction instruction for a record schema.

    Args:
        schema_name: Record schema name, e.g. "receipt".
        path: Path to the prompt file.
              Defaults to the bundled <schema_name>_prompt.txt.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{schema_name}_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ExtractionError(f"Failed to load prompt: {exc}") from exc


def load_response_schema(schema_name: str, path: Path | None = None) -> str:
    """Load the JSON response schema for a record schema.

    Args:
        schema_name: Record schema name, e.g. "receipt".
        path: Path to the JSON schema file.
              Defaults to the bundled <schema_name>_schema.json.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{schema_name}_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load response schema: {exc}") from exc
