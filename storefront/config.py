# storefront/config.py
import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    catalog_url: str = Field(default_factory=lambda: os.getenv("STOREFRONT_CATALOG_URL", "https://fakestoreapi.com"))
    timeout: float = Field(default_factory=lambda: float(os.getenv("STOREFRONT_TIMEOUT", "10")))
    log_level: str = Field(default_factory=lambda: os.getenv("STOREFRONT_LOG_LEVEL", "WARNING"))


settings = Settings()
