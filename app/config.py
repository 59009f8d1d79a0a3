# app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite:///./vehicles.db"

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "127.0.0.1"
    BACKEND_PORT: int = 8080

    # ── Business rules ────────────────────────────────────────────────────
    ALLOWED_COLORS: List[str] = ["Red", "White", "Black", "Blue", "Gray"]
    MAX_VEHICLE_AGE_YEARS: int = 20
    PROTECTED_OWNER: str = "Administrator"   # Vehicles owned by this name cannot be deleted
    NOTIFY_MAKE: str = "Ferrari"             # Adding this make fires a notification

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
