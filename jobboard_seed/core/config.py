"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017/jobportal"
    mongodb_db: str = "jobportal"  # used when the URI names no database
    mongo_timeout_ms: int = 5000

    # Password hashing (same cost factor the app uses at signup)
    bcrypt_rounds: int = Field(10, ge=4, le=31)  # bcrypt accepts 4..31

    @property
    def masked_mongo_uri(self) -> str:
        """URI safe to print (password replaced with ****)"""
        scheme, sep, rest = self.mongo_uri.partition("://")
        if not sep or "@" not in rest:
            return self.mongo_uri
        credentials, host = rest.rsplit("@", 1)
        user = credentials.split(":", 1)[0]
        return f"{scheme}://{user}:****@{host}"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
