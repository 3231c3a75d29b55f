from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


DEV_JWT_SECRET = "dev-only-change-me"


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "WorkHub Access API"
    ENV: str = "development"

    # All JSON endpoints live under this prefix. The route guard
    # answers 401/403 JSON here and redirects everywhere else.
    API_PREFIX: str = "/api"

    # -------------------------------------------------
    # CORS
    # -------------------------------------------------
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # -------------------------------------------------
    # Session tokens (JWT)
    # -------------------------------------------------
    JWT_SECRET_KEY: str = Field(DEV_JWT_SECRET, description="HS256 signing secret for session tokens")
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 1 day

    SESSION_COOKIE_NAME: str = "workhub_session"
    SESSION_COOKIE_SECURE: bool = False

    # -------------------------------------------------
    # Redirects
    # -------------------------------------------------
    LOGIN_PATH: str = "/login"

    # -------------------------------------------------
    # Dev helpers (development only; startup fails elsewhere)
    # -------------------------------------------------
    ENABLE_DEV_LOGIN: bool = True

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    class Config:
        case_sensitive = True

    @property
    def is_development(self) -> bool:
        return self.ENV.lower() == "development"

    @property
    def uses_dev_secret(self) -> bool:
        return self.JWT_SECRET_KEY == DEV_JWT_SECRET


# Instantiate settings
settings = Settings()
