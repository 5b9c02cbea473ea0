# shopify_carriers/core/logging_config.py
"""
Centralized logging configuration.

Keeps the client's own loggers at the configured level and quiets the
HTTP stack underneath it.
"""

import logging
from typing import Optional

from shopify_carriers.core.config import get_settings


def configure_logging(level: Optional[str] = None):
    """
    Configure logging for the client.

    - shopify_carriers code: LOG_LEVEL from settings (INFO by default)
    - HTTP clients (urllib3, requests): WARNING only
    """
    log_level = (level or get_settings().LOG_LEVEL or "INFO").upper()
    numeric_level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    # Quiet noisy HTTP client loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)

    logging.getLogger("shopify_carriers").setLevel(numeric_level)

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured at level: {log_level}")
