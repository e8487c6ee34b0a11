# todo_service/core/config.py
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """
    # Project Info
    PROJECT_NAME: str = "Todo API"
    VERSION: str = "1.0.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # Database (MongoDB)
    MONGO_URL: str = "mongodb://127.0.0.1:27017"
    DB_NAME: str = "todos"
    MONGO_TIMEOUT_MS: int = 5000

    # API documentation (Swagger UI / ReDoc)
    DOCS_ENABLED: bool = True
    DOCS_URL: str = "/api-docs"

    # Monitoring
    METRICS_ENABLED: bool = True

    # Rate limiting, e.g. "50/minute"
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT: str = "100/minute"

    DEBUG: bool = False

    class Config:
        case_sensitive = True
        env_file = ".env"


@lru_cache()
def get_settings():
    return Settings()
