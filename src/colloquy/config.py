from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import SettingsConfigDict, BaseSettings


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COLLOQUY_", env_file=".env", extra="ignore"
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = False

    image_format: Literal["JPEG", "PNG"] = "JPEG"
    image_detail: Literal["auto", "low", "high"] = "auto"

    conversations_dir: Path = Path("conversations")


@lru_cache(maxsize=1)
def get_app_config() -> AppConfig:
    return AppConfig()
