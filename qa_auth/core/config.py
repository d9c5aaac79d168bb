# File: qa_auth/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, ConfigDict, field_validator


class Settings(BaseModel):
    # Env-derived defaults go through the validators below as well
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    app_name: str = "QA Auth Service"

    PROJECT_NAME: str = "QA Auth Service"
    VERSION: str = "0.1.0"

    api_v1_prefix: str = "/api/v1"
    debug: bool = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")

    # CORS
    backend_cors_origins: List[str] = os.getenv("BACKEND_CORS_ORIGINS", "")

    # Database
    database_url: str = os.getenv(
        "DATABASE_URL", "postgresql+psycopg://qa:qa@localhost:5432/users"
    )

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Password hashing (hashlib algorithm name)
    password_hash_algorithm: str = os.getenv("PASSWORD_HASH_ALGORITHM", "sha256")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        level = str(v).strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Unsupported log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
