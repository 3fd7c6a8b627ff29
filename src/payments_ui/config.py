"""
Environment configuration for the payments dashboard.

All settings are read from environment variables once at import time.
"""

import os

_TRUE_VALUES = {"1", "true", "yes"}

API_BASE_URL = os.getenv(
    "PAYMENTS_UI_API_BASE_URL", "https://school-payment-backend-five.vercel.app/api"
)
SERVICE_KIND = os.getenv("PAYMENTS_UI_SERVICE", "http").lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Browser clients whose sessions and screen controllers are kept in memory;
# the least recently active client is evicted beyond this
MAX_CLIENTS = int(os.getenv("PAYMENTS_UI_MAX_CLIENTS", "256"))

APP_PORT = int(os.getenv("PAYMENTS_UI_APP_PORT", "8000"))

# Placeholder shown in the school search box before the user picks a school
DEFAULT_SCHOOL_ID = os.getenv("PAYMENTS_UI_DEFAULT_SCHOOL_ID", "65b0e6293e9f76a9694d84b4")

USE_GENERIC_BRANDING = (
    os.getenv("PAYMENTS_UI_GENERIC", "false").lower() in _TRUE_VALUES
)

APP_TITLE = "Payments Dashboard" if USE_GENERIC_BRANDING else "School Payment Dashboard"
