"""Page fetcher: retrieve a single URL for citation analysis.

One GET with a browser-like User-Agent and a fixed timeout.
No retries; every transport failure surfaces as FetchError.
"""

import logging
from urllib.parse import urlparse

import requests

from config import FETCH_TIMEOUT_SECONDS
from errors import FetchError, ValidationError
from models import FetchedPage

logger = logging.getLogger(__name__)

_REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


def validate_url(url: object) -> str:
    """Return the stripped URL or raise ValidationError."""
    value = str(url or "").strip()
    if not value:
        raise ValidationError("URL is required")

    try:
        parsed = urlparse(value)
        parsed.port  # raises ValueError on a non-numeric or out-of-range port
    except ValueError as exc:
        raise ValidationError("Invalid URL format") from exc

    if parsed.scheme not in ("http", "https") or not parsed.netloc or not parsed.hostname:
        raise ValidationError("Invalid URL format")
    if any(ch.isspace() for ch in parsed.netloc):
        raise ValidationError("Invalid URL format")
    return value


def fetch_page(url: str, timeout: float = FETCH_TIMEOUT_SECONDS) -> FetchedPage:
    """
    Fetch `url` and return its raw body.
    Raises FetchError on timeout, unreachable host, or a non-success status.
    """
    status_code = 0
    try:
        response = requests.get(url, timeout=timeout, headers=_REQUEST_HEADERS)
        status_code = response.status_code
        response.raise_for_status()
        response.encoding = response.apparent_encoding or "utf-8"
        html = response.text
    except requests.Timeout as exc:
        logger.warning("FETCH TIMEOUT: url=%s timeout=%ss", url, timeout)
        raise FetchError(f"Timed out after {timeout:g}s", url=url) from exc
    except requests.RequestException as exc:
        logger.warning("FETCH ERROR: url=%s status=%s error=%s", url, status_code, exc)
        raise FetchError(f"Could not retrieve page: {exc}", url=url, status_code=status_code) from exc

    return {"url": url, "html": html, "status_code": status_code}
