from __future__ import annotations

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "Flight Monitor API"
APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ------------------------------------------------------------
    # Server
    # ------------------------------------------------------------
    backend_host: str = "0.0.0.0"
    backend_port: int = 5001
    environment: str = "development"  # development | staging | production

    # ------------------------------------------------------------
    # Database
    # ------------------------------------------------------------
    database_url: str = "sqlite:///./data/flightmon.db"
    db_connect_retries: int = 5
    db_retry_delay_s: float = 2.0

    # ------------------------------------------------------------
    # CORS
    # ------------------------------------------------------------
    # Comma-separated origins, e.g.:
    # "http://localhost:3000,http://127.0.0.1:3000"
    cors_origins: str = "*"

    # ------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------
    log_level: str = "INFO"

    # ------------------------------------------------------------
    # Client / CLI
    # ------------------------------------------------------------
    api_base_url: str = "http://localhost:5001"
    api_timeout_s: float = 5.0

    @property
    def cors_origins_list(self) -> List[str]:
        return [x.strip() for x in self.cors_origins.split(",") if x.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()
