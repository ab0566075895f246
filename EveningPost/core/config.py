from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "The Evening Post API"
    VERSION: str = "0.1.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Content
    SEED_SAMPLE_DATA: bool = True
    # Fixes the trending shuffle; unset means a fresh order per request.
    TRENDING_SEED: Optional[int] = None

    class Config:
        env_file = ".env"
        env_prefix = "EVENING_POST_"


@lru_cache()
def get_settings():
    return Settings()
