"""config.py — Environment variables, constants and logging for the Car List add-on.

Every value has a default, so the function runs without any environment
configuration. Overrides exist for staging accounts and tests.
"""
from __future__ import annotations

import logging
import os

__all__ = [
    "DEFAULT_VEHICLE_MAKE",
    "EVENT_CAR_LIST_GENERATE",
    "EVENT_CAR_LIST_START",
    "JQUERY_INTEGRITY",
    "JQUERY_URL",
    "LOG_LEVEL",
    "NOTE_ENDPOINT",
    "NOTE_POST_TIMEOUT_SECONDS",
    "NOTE_RELATED_OBJECT",
    "SERVICEM8_API_BASE",
    "SERVICEM8_SDK_CSS_URL",
    "SERVICEM8_SDK_JS_URL",
    "SPINNER_CSS_URL",
    "VEHICLE_LIST_URL",
    "configure_logging",
]

# ---------------------------------------------------------------------------
# Event names
# ---------------------------------------------------------------------------

EVENT_CAR_LIST_START = "car_list_start"
EVENT_CAR_LIST_GENERATE = "car_list_generate"

# ---------------------------------------------------------------------------
# ServiceM8 REST API
# ---------------------------------------------------------------------------

SERVICEM8_API_BASE = os.environ.get(
    "SERVICEM8_API_BASE", "https://api.servicem8.com/api_1.0"
).rstrip("/")
NOTE_ENDPOINT = f"{SERVICEM8_API_BASE}/Note.json"
NOTE_POST_TIMEOUT_SECONDS = float(os.environ.get("NOTE_POST_TIMEOUT_SECONDS", "15"))
NOTE_RELATED_OBJECT = "job"

# ---------------------------------------------------------------------------
# Client-side assets
# ---------------------------------------------------------------------------

VEHICLE_LIST_URL = os.environ.get(
    "VEHICLE_LIST_URL", "http://www.touchupguys.com.au/cars.json"
)
DEFAULT_VEHICLE_MAKE = os.environ.get("DEFAULT_VEHICLE_MAKE", "Abarth")

SERVICEM8_SDK_CSS_URL = "https://platform.servicem8.com/sdk/1.0/sdk.css"
SERVICEM8_SDK_JS_URL = "https://platform.servicem8.com/sdk/1.0/sdk.js"
JQUERY_URL = "https://code.jquery.com/jquery-3.2.1.min.js"
JQUERY_INTEGRITY = "sha256-hwg4gsxgFZhOsEEamdOYGBf13FyQuiTwlAQgxVSNgt4="
SPINNER_CSS_URL = "//cdnjs.cloudflare.com/ajax/libs/css-spinning-spinners/1.1.1/load4.css"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def configure_logging() -> logging.Logger:
    """Set the root logger level; the Lambda runtime owns the handlers."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    return logger
