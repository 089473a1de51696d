from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 9000

    recognition_engine: str = "http"
    ocr_base_url: str = "http://localhost:8884"
    ocr_timeout_seconds: int = 60
    ocr_language: str = "eng"
    default_confidence: float = 70.0

    storage_backend: str = "local"
    storage_bucket: str = "wedexpense-receipts"
    storage_root: str = "/app/files"
    storage_base_url: str = ""
    storage_public_base_url: str = ""
    storage_timeout_seconds: int = 30

    keyword_provider: str = "none"
    openai_api_key: str = ""
    openai_model_name: str = ""
    openai_timeout_seconds: int = 30
