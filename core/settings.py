from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: Literal["DEV", "TEST", "PROD"] = "DEV"
    ocr_backend: Literal["tesseract"] = "tesseract"
    tesseract_cmd: str | None = None
    min_text_length: int = Field(default=20, ge=0)
    default_ocr_language: str = "rus+eng"
    max_pdf_size_mb: float = Field(default=10, gt=0)
    max_pdf_pages: int = Field(default=1, ge=1)
    pdf_render_scale: float = Field(default=2.0, gt=0)
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
