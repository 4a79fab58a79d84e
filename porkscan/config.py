"""
PorkScan Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    VERSION: str = "1.0.0"
    API_VERSION: str = "1"

    # --- Analysis ---
    CONTEXT_RADIUS: int = int(os.getenv("PORKSCAN_CONTEXT_RADIUS", "100"))

    # --- Server ---
    HOST: str = os.getenv("PORKSCAN_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORKSCAN_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("PORKSCAN_CORS_ORIGINS", "*")


settings = Settings()
