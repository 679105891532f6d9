"""
jobscreen Configuration

Central settings loaded from environment variables.
Classification thresholds are not settings: they live beside the code
that applies them and change only with a new library version.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    APP_VERSION: str = "1.0.0"
    API_VERSION: str = "1"

    # --- Input limits (enforced at the API boundary, not by the classifier) ---
    MIN_TEXT_LENGTH: int = int(os.getenv("JOBSCREEN_MIN_TEXT_LENGTH", "50"))
    MAX_TEXT_LENGTH: int = int(os.getenv("JOBSCREEN_MAX_TEXT_LENGTH", "10000"))
    MAX_BATCH_ITEMS: int = int(os.getenv("JOBSCREEN_MAX_BATCH", "50"))

    # --- Server ---
    HOST: str = os.getenv("JOBSCREEN_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("JOBSCREEN_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("JOBSCREEN_CORS_ORIGINS", "*")

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("JOBSCREEN_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv("JOBSCREEN_LOG_FORMAT", "json")  # "json" or "text"


settings = Settings()
