from typing import Final

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

class Settings(BaseSettings):
    # =========================
    # Logging
    # =========================
    log_level: str = "INFO"
    # relative to the working directory, not the installed package
    log_dir: Path = Path("logs")

    # =========================
    # Document store (MongoDB)
    # =========================
    mongo_database: str = "faculty_db"
    universities_collection: str = "universities"
    faculty_collection: str = "faculty"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )

settings = Settings()

# =========================
# Frequently used aliases: Constant
# =========================
MONGO_DATABASE: Final[str] = settings.mongo_database
UNIVERSITIES_COLLECTION: Final[str] = settings.universities_collection
FACULTY_COLLECTION: Final[str] = settings.faculty_collection
