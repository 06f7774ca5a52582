"""Settings for the conversation view, read from CONVERSATION_* env vars."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CONVERSATION_",
        env_file=".env",
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = True
    log_level: str = "INFO"

    # Identity stamped on every message sent from this view
    local_user_name: str = "You"
    local_user_role: str = "Developer"

    default_placeholder: str = "Add a comment or attach a file..."
    reply_placeholder: str = "Type your reply..."


@lru_cache
def get_settings() -> Settings:
    return Settings()
