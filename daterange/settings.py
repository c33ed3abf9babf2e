import logging
from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="daterange_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # logging config
    log_level: int = logging.WARNING
    log_format: str = "%(asctime)s [%(process)d] [%(levelname)s] %(name)-16s %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"


@cache
def get_settings() -> Settings:
    return Settings()
