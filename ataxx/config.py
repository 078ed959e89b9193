"""Settings read from the environment (and a .env file, if present)."""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv


def _split(value):
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    mongo_uri: str = "mongodb://localhost:27017"
    db_name: str = "ataxx"
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv()
        settings = Settings()
        settings.mongo_uri = os.getenv("MONGO_URI", settings.mongo_uri)
        settings.db_name = os.getenv("ATAXX_DB_NAME", settings.db_name)
        settings.log_level = os.getenv("ATAXX_LOG_LEVEL", settings.log_level).upper()
        origins = os.getenv("ATAXX_CORS_ORIGINS")
        if origins:
            settings.cors_origins = _split(origins)
        return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
