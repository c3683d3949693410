from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HASURA_SCHEMAS_", env_file=".env", env_file_encoding="utf-8")

    backend_host: str = "0.0.0.0"
    backend_port: int = 8000
    allowed_origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    default_config_path: Path = Path("codegen.yml")

    introspection_timeout: float = 20.0
    log_level: str = "INFO"


settings = Settings()
