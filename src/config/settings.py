"""
Configuration settings for the brokerage CRM backend
"""

import os
import logging
from typing import Tuple

logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "PROD")  # PROD or DEV
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Remote maintenance functions, called in this order by the test data helper
TEST_DATA_FUNCTIONS = ["delete-clients", "seed-data", "historical-contracts"]

# CORS settings
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]


class ConfigurationError(ValueError):
    """Raised when required configuration is missing at startup"""


def require_supabase_settings() -> Tuple[str, str]:
    """
    Return the backend URL and access key, failing fast when either is absent.

    Raises:
        ConfigurationError: if SUPABASE_URL or SUPABASE_SERVICE_KEY is unset
    """
    url = os.getenv("SUPABASE_URL")
    key = os.getenv("SUPABASE_SERVICE_KEY")

    missing = []
    if not url:
        missing.append("SUPABASE_URL")
    if not key:
        missing.append("SUPABASE_SERVICE_KEY")
    if missing:
        raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

    logger.info(f"Environment: {ENV}")
    return url, key
