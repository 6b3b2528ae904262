from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Application
    app_name: str = "Study Assistant"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    # Uploads
    max_file_size_mb: int = 50

    # PDF extraction
    scan_text_threshold: int = 100  # trimmed chars below which a PDF is treated as scanned
    ocr_render_scale: float = 2.5
    binarize_threshold: int = 128
    ocr_language: str = "eng"
    ocr_engine: str = "tesseract"  # "tesseract" or "paddle"
    ocr_max_workers: int = 1
    tesseract_cmd: str | None = None

    # Offline summarizer
    summary_keyword_count: int = 10

    # Gemini API
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    # Frontend
    frontend_url: str = "http://localhost:3000"

    # Observability
    langfuse_public_key: str = ""
    langfuse_secret_key: str = ""
    langfuse_host: str = "https://cloud.langfuse.com"


settings = Settings()
