from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=str(ENV_FILE), case_sensitive=False, extra="ignore")

    APP_NAME: str = "Visitor Management Backend"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    DATABASE_URL: str = "sqlite:///./visitors.db"

    # HTTP mail provider (SendGrid-style JSON API).
    MAIL_API_URL: str = ""
    MAIL_API_KEY: str = ""
    MAIL_FROM: str = "no-reply@visitors.local"
    MAIL_TIMEOUT_SECONDS: float = 10.0

    VISITOR_PASS_BASE_URL: str = "http://localhost:5173/visitor-pass"

    @property
    def mail_configured(self) -> bool:
        return bool(self.MAIL_API_URL.strip() and self.MAIL_API_KEY.strip())


@lru_cache
def get_settings() -> Settings:
    return Settings()
