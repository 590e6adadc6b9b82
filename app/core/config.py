# app/core/config.py

import os
from typing import List
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
# Load environment variables from .env file
load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "Contact Inbox"
    VERSION: str = "1.0"

    # Server
    PORT: int = int(os.getenv("PORT", 3000))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: List[str] = ["*"]

    # Database (no default, the service refuses to start without it)
    DATABASE_URL: str

    # Rate limiting on contact submissions
    RATE_LIMIT_ENABLED: bool = False
    CONTACT_RATE_LIMIT: str = os.getenv("CONTACT_RATE_LIMIT", "5/15minutes")

    # Keep-alive pings
    PING_ENABLED: bool = True
    PING_START_DELAY: float = 2.0
    EXTERNAL_PING_URL: str = os.getenv("EXTERNAL_PING_URL", "https://backend-api-4kof.onrender.com/api/health")
    EXTERNAL_PING_INTERVAL: float = 30.0
    EXTERNAL_PING_TIMEOUT: float = 10.0
    SELF_PING_INTERVAL: float = 60.0
    SELF_PING_TIMEOUT: float = 5.0

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    @property
    def SELF_PING_URL(self) -> str:
        return f"http://localhost:{self.PORT}/api/health"


# Initialize
settings = Settings()
