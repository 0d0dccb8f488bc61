# src/config/settings.py

"""Central configuration for the border_helper guide."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the border_helper guide."""

    # --- Remote API ---
    API_BASE_URL: str = os.getenv(
        "BORDER_HELPER_API_BASE_URL", "http://192.168.16.32:5000"
    )
    ATTRACTIONS_URL: str = os.getenv(
        "BORDER_HELPER_ATTRACTIONS_URL",
        "https://h-submit-backend-shwethe.onrender.com/api/attractions",
    )
    JOBS_API_BASE_URL: str = os.getenv(
        "BORDER_HELPER_JOBS_API_BASE_URL", "http://192.168.16.32:8080"
    )
    JOB_POST_KINDS: list[str] = ["employer", "seeker"]

    # --- Requests ---
    REQUEST_TIMEOUT: int = 15           # Seconds before a request times out
    MAX_RETRIES: int = 3                # Retry count on transient failures
    RETRY_DELAY: float = 1.0            # Base backoff between retries (secs)
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Filtering ---
    FUZZY_THRESHOLD: float = 0.3        # 0 = exact, 1 = anything
    ALL_CATEGORY: str = "All"

    # --- Itineraries (attraction ids, visiting order) ---
    ITINERARIES: dict[str, list[str]] = {
        "1day": ["1", "2", "3"],
        "2day": ["1", "2", "3", "4", "5"],
    }

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    SAVED_PLACES_PATH: Path = DATA_DIR / "saved_places.json"
    SAVED_PLACES_KEY: str = "saved_places"
    LOGS_DIR: Path = BASE_DIR / "logs"
