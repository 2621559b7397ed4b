from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    PROJECT_NAME: str = "Student Records API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # Storage
    STORAGE_BACKEND: str = "json"  # json | database | memory
    STUDENTS_FILE: str = "data/students.json"

    # Database
    DATABASE_URL: str = "sqlite:///./students.db"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # CORS
    BACKEND_CORS_ORIGINS: list[str] = []

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
