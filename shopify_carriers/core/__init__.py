"""
Core module exports.
"""
from .config import Settings, get_settings, clear_settings_cache

from .exceptions import (
    BaseServiceError,
    PlatformServiceError,
    ShopifyServiceError,
    ShopifyAPIError,
    ShopifyDecodeError,
)
