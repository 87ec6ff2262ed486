"""API configuration constants.

Single source of truth for settings used across the API layer.
"""

import logging
import os

from dotenv import find_dotenv, load_dotenv

# Load .env from project root (find_dotenv searches parent directories)
load_dotenv(find_dotenv())

API_TITLE = "Storyweaver API"
API_VERSION = "0.1.0"

# Logging
LOG_JSON = os.getenv("LOG_JSON", "true").lower() == "true"
LOG_LEVEL = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)

# CORS origins, comma separated ("*" allows all)
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
