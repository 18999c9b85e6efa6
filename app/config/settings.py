from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    min_direct_text_length: int = Field(default=10, ge=0)

    raster_dpi: int = Field(default=200, gt=0)
    raster_width: int = Field(default=1000, gt=0)
    raster_height: int = Field(default=1414, gt=0)
    artifacts_dir: str = "uploads"

    ocr_languages: list[str] = ["eng", "hin"]
    ocr_timeout_seconds: float = Field(default=60, gt=0)
    tesseract_cmd: str = ""

    uploads_dir: str = "uploads"
    max_upload_bytes: int = 5 * 1024 * 1024
