# File: articles_api/core/config.py

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

load_dotenv()


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Articles API"
    VERSION: str = "0.1.0"

    api_prefix: str = os.getenv("API_PREFIX", "")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))
    reload: bool = os.getenv("RELOAD", "false").lower() in {"1", "true", "yes", "y"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    backend_cors_origins: List[str] = [
        o.strip() for o in os.getenv("BACKEND_CORS_ORIGINS", "*").split(",") if o.strip()
    ]

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./articles.db")

    # Token signing. Changing secret_key invalidates every token issued before.
    secret_key: str = os.getenv("SECRET_KEY", "CHANGE_ME_IN_PRODUCTION")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
    algorithm: str = "HS256"

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []


@lru_cache
def get_settings() -> Settings:
    return Settings()
