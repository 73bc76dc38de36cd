# predictor_backend/config.py
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field

DEFAULT_ML_URL = "https://smart-disease-ml.onrender.com"
DEFAULT_FRONTEND_URL = "http://smart-disease-predictor-509.web.app"  # Firebase URL


class Settings(BaseSettings):
    ml_url:               str = Field(DEFAULT_ML_URL, description="Base URL of the ML prediction service")
    frontend_url:         str = Field(DEFAULT_FRONTEND_URL, description="Origin allowed by CORS")
    host:                 str = "0.0.0.0"
    port:                 int = 8080
    enable_extract_route: bool = False
    tesseract_cmd:        str = "tesseract"
    ocr_language:         str = "eng"
    predict_timeout:      Optional[float] = None
    ocr_timeout:          Optional[float] = None
    log_level:            str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def load_settings() -> Settings:
    """
    Resolve settings once from the environment (and `.env` if present).
    """
    return Settings()
