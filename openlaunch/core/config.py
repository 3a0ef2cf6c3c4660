from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from openlaunch.core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "OpenLaunch API"
    api_v1_str: str = "/api/v1"
    environment: str = "dev"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite+aiosqlite:///./openlaunch.db"
    database_echo: bool = False

    page_size_default: int = DEFAULT_PAGE_SIZE
    page_size_max: int = MAX_PAGE_SIZE
    page_numbers_visible: int = 7


@lru_cache
def get_settings() -> Settings:
    return Settings()
