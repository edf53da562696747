# vault/config.py
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Vault root; required, the service refuses to start without it
    WORK_FOLDER: Path

    # HTTP transport
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    API_PREFIX: str = "/api"
    DOCS_URL: str = "/documentation"

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator("WORK_FOLDER", mode="before")
    @classmethod
    def _work_folder_not_empty(cls, v):
        if v is None or str(v).strip() == "":
            raise ValueError("WORK_FOLDER environment variable is not set")
        return v
