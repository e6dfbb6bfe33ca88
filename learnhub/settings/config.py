# learnhub/settings/config.py  (Pydantic v2)
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from learnhub.services.errors import ConfigError


class Settings(BaseSettings):
    # ---------- Catalog store ----------
    # No default: the seed must fail fast before touching any store.
    DATABASE_URL: Optional[str] = Field(default=None)

    # ---------- pydantic-settings config ----------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # allow lower/upper env names
        extra="ignore",
    )


def require_database_url(settings: Optional[Settings] = None) -> str:
    settings = settings or Settings()
    url = (settings.DATABASE_URL or "").strip()
    if not url:
        raise ConfigError("DATABASE_URL is not set; export it or add it to .env")
    return url
