# bot_config.py
import os
import json
from typing import Dict, List, Tuple

from dotenv import load_dotenv

from job_models import ConfigError, SheetConnectionError

load_dotenv()

# ---------- config ----------
FEED_URL = os.getenv(
    "FEED_URL",
    "https://raw.githubusercontent.com/vanshb03/Summer2026-Internships/dev/README.md",
)
SPREADSHEET_ID = os.getenv("SPREADSHEET_ID", "").strip()
SERVICE_ACCOUNT_FILE = os.getenv("GOOGLE_SERVICE_ACCOUNT_FILE", "service_account.json")
WORKSHEET_INDEX = os.getenv("WORKSHEET_INDEX", "0")
FILTERS_PATH = os.getenv("FILTERS_PATH", "filters.json")
HTTP_TIMEOUT = os.getenv("HTTP_TIMEOUT", "30")

ROLE_KEYWORDS = ["Software", "Engineer"]
ALLOWED_LOCATIONS = [
    "New York",
    "San Francisco",
    "Boston",
    "Houston",
    "Remote",
]


def sheet_settings(
    spreadsheet_id: str = None, credentials_file: str = None
) -> Tuple[str, str]:
    """Spreadsheet id + service-account file, or SheetConnectionError if unusable."""
    sid = SPREADSHEET_ID if spreadsheet_id is None else spreadsheet_id
    creds = SERVICE_ACCOUNT_FILE if credentials_file is None else credentials_file
    if not sid:
        raise SheetConnectionError("SPREADSHEET_ID is not set in the environment or .env")
    if not creds:
        raise SheetConnectionError("GOOGLE_SERVICE_ACCOUNT_FILE is not set")
    if not os.path.isfile(creds):
        raise SheetConnectionError(f"service account file {creds} not found")
    return sid, creds


def configured_worksheet_index() -> int:
    try:
        return int(WORKSHEET_INDEX)
    except (TypeError, ValueError) as e:
        raise ConfigError(
            f"WORKSHEET_INDEX must be a whole number, got {WORKSHEET_INDEX!r}"
        ) from e


def configured_timeout() -> float:
    try:
        timeout = float(HTTP_TIMEOUT)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"HTTP_TIMEOUT must be a number, got {HTTP_TIMEOUT!r}") from e
    if timeout <= 0:
        raise ConfigError(f"HTTP_TIMEOUT must be positive, got {HTTP_TIMEOUT!r}")
    return timeout


def _load_json(path: str, default):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        return default


def load_filters(path: str = None) -> Dict[str, List[str]]:
    """
    Role/location criteria. filters.json may override either list:
      {"include_keywords": [...], "locations_any": [...]}
    """
    F = _load_json(path or FILTERS_PATH, {})
    if not isinstance(F, dict):
        F = {}
    return {
        "include_keywords": list(F.get("include_keywords") or ROLE_KEYWORDS),
        "locations_any": list(F.get("locations_any") or ALLOWED_LOCATIONS),
    }
