import logging
import os
from typing import List
from dotenv import load_dotenv

# values in a local .env file fill in unset env vars
load_dotenv()


class Settings:
    # service
    APP_ENV: str = os.getenv("APP_ENV", "dev")
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "8000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # comma separated, "*" allows any origin
    _origins_raw: str = os.getenv("ALLOWED_ORIGINS", "*")
    ALLOWED_ORIGINS: List[str] = [o.strip() for o in _origins_raw.split(",") if o.strip()] or ["*"]

    # schedule served by the status endpoint, same text format as the parser
    BUSINESS_HOURS: str = os.getenv("BUSINESS_HOURS", "Mon-Fri 09:00-17:00 UTC")

    @property
    def log_level(self) -> int:
        """resolve LOG_LEVEL to a logging level, falling back to INFO"""
        return getattr(logging, (self.LOG_LEVEL or "INFO").upper(), logging.INFO)


settings = Settings()
