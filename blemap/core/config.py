# File: blemap/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "BLE Mapping Backend API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS (the editor frontend runs on :8080 in development)
    backend_cors_origins: List[str] = Field(
        default=os.getenv(
            "BACKEND_CORS_ORIGINS", "http://localhost:8080,http://127.0.0.1:8080"
        ),
        validate_default=True,
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./blemap.db")

    # Security / auth
    secret_key: str = os.getenv("SECRET_KEY", "CHANGE_ME_IN_PRODUCTION")
    access_token_expire_minutes: int = int(
        os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24)
    )  # 24h
    algorithm: str = "HS256"
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", 12))

    # Auto-placement defaults
    default_beacon_step: float = 5.0
    default_beacon_rssi: int = 70
    default_antenna_height: float = 2.0
    default_antenna_angle: float = 0.0
    max_grid_points: int = int(os.getenv("MAX_GRID_POINTS", 100_000))

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


settings = get_settings()
