from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, case_sensitive=False)

    app_env: Literal["development", "test", "production"] = "development"
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
