# feed_fetch.py
import requests

from bot_config import FEED_URL, configured_timeout
from job_models import FetchError


def fetch_feed(url: str = FEED_URL, timeout: float = None) -> str:
    """Raw README text. Any network or non-2xx failure becomes FetchError."""
    if timeout is None:
        timeout = configured_timeout()
    try:
        r = requests.get(
            url,
            headers={"Cache-Control": "no-cache", "Pragma": "no-cache"},
            timeout=timeout,
        )
        r.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        raise FetchError(f"GET {url} returned HTTP {status}") from e
    except requests.RequestException as e:
        raise FetchError(f"GET {url} failed: {e}") from e
    return r.text
