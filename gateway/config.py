"""Application configuration via environment variables."""

from typing import Optional

from pydantic_settings import BaseSettings

FLIPOPAY_PAYOUT_URL = "https://prod-server.flipopay.com/api/v1/payouts/initiate"


class Settings(BaseSettings):
    flipopay_secret_key: Optional[str] = None
    flipopay_payout_url: str = FLIPOPAY_PAYOUT_URL
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
