# ABOUTME: Application configuration including API, polling and rider settings
# ABOUTME: Centralized config read from environment (and .env) at import time

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration"""

    # Remote wind API. Empty means simulation-only mode.
    WIND_API_BASE_URL = os.getenv("WIND_API_BASE_URL", "")

    # Polling
    POLL_INTERVAL_MS = int(os.getenv("POLL_INTERVAL_MS", "30000"))
    FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", "8"))
    HISTORIC_HOURS = int(os.getenv("HISTORIC_HOURS", "6"))

    # Drøbak -> Lysaker, approx.
    STATION_DISTANCE_KM = float(os.getenv("STATION_DISTANCE_KM", "25"))

    # Only used for gear recommendations
    RIDER_WEIGHT_KG = float(os.getenv("RIDER_WEIGHT_KG", "85"))

    # Minimum gap between two "wind building" notices
    ALERT_COOLDOWN_MINUTES = int(os.getenv("ALERT_COOLDOWN_MINUTES", "5"))

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
