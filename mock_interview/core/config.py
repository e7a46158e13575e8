from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from enum import Enum
from pathlib import Path
from typing import List

class EnvironmentType(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

class Settings(BaseSettings):
    # Basic Settings
    APP_NAME: str = "Mock Interview Service"
    ENVIRONMENT: EnvironmentType = EnvironmentType.DEVELOPMENT
    DEBUG: bool = True
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str | None = None

    # AI Settings
    OPENAI_API_KEY: str | None = None
    AI_MODEL: str = "gpt-4o-mini"
    AI_TEMPERATURE: float = 0.4

    # Interview
    INTERVIEW_SUBJECT: str = "Excel"
    SESSION_TIME_LIMIT_MINUTES: int = 30

    # Paths
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    TRANSCRIPTS_FILE: Path = BASE_DIR / "transcripts.json"
    STATIC_DIR: Path = BASE_DIR / "public"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra='ignore'
    )

@lru_cache
def get_settings() -> Settings:
    return Settings()
