from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    output_bucket_name: str = "receipt-input-data-2025-1005"
    output_csv_file: str = "output.csv"
    record_schema: str = "receipt"
    default_mime_type: str = "image/png"

    blob_store: str = "gcs"
    gcp_project: str = ""

    vision_provider: str = "vertexai"
    vision_temperature: float = 0.0

    vertex_location: str = "us-central1"
    vertex_model_name: str = "gemini-2.5-flash"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 30

    openai_compatible_base_url: str = ""
    openai_compatible_api_key: str = ""
    openai_compatible_model_name: str = ""
    openai_compatible_timeout_seconds: int = 30
