from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, List, Optional

class Settings(BaseSettings):
    PORT: int = 8000
    CORS_ALLOW_ORIGINS: List[str] = [""]
    API_PREFIX: str = "/api"

    ES_HOST: str = "http://localhost:9200"
    ES_CLOUD_ID: Optional[str] = None
    ES_USERNAME: str | None = None
    ES_PASSWORD: str | None = None
    ES_API_KEY: str | None = None

    # The python client has a single request timeout, so connect + socket
    # are summed into it (see clients/elastic.py)
    ES_CONNECT_TIMEOUT_MS: int = 5000
    ES_SOCKET_TIMEOUT_MS: int = 10000

    INDEX_NAME: str = "documents"

    # username -> password, JSON object in .env, e.g. {"user": "password"}
    AUTH_USERS: Dict[str, str] = {}

    # Populate the index with generated documents at startup (dev only)
    SEED_SAMPLE_DATA: bool = False
    SEED_DOCUMENT_COUNT: int = 50

    # Allow .env file to override defaults
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
