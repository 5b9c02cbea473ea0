# shopify_carriers/core/config.py

import os
from functools import lru_cache
from typing import Optional
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Client settings.
    Loads values from environment variables (.env file)
    """
    # Shopify API
    SHOPIFY_SHOP_URL: Optional[str] = None  # "fooshop" or "fooshop.myshopify.com"
    SHOPIFY_ADMIN_API_ACCESS_TOKEN: Optional[str] = None
    SHOPIFY_API_VERSION: Optional[str] = None  # e.g. "2024-01"; unset means unversioned admin/
    SHOPIFY_REQUEST_TIMEOUT: float = 30.0

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(
        env_file=os.environ.get('ENV_FILE', '.env'),
        extra='ignore',
        case_sensitive=True
    )


@lru_cache()
def get_settings():
    """Cached settings to avoid loading .env file for every client"""
    return Settings()

def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
