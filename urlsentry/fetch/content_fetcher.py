import logging
from urllib.parse import urlparse

import requests

from urlsentry.config import MAX_CONTENT_BYTES, REQUEST_TIMEOUT
from urlsentry.errors import FetchError

logger = logging.getLogger(__name__)

# Look like a regular browser to get past naive bot filters
HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


def fetch_content(
    url: str,
    timeout: float = REQUEST_TIMEOUT,
    max_bytes: int = MAX_CONTENT_BYTES,
) -> str:
    """
    Download the raw text of an http(s) page.

    Every failure is raised as FetchError with an HTTP-like status:
    400 bad URL, 413 too large, 504 timeout, upstream status on non-2xx,
    500 for anything else on the wire.
    """
    parsed = urlparse(url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise FetchError("Invalid URL format or protocol.", status=400)

    try:
        resp = requests.get(url, headers=HEADERS, timeout=timeout)
    except requests.Timeout as e:
        logger.error("Timed out fetching %s", url)
        raise FetchError("Request timed out while fetching content.", status=504) from e
    except requests.RequestException as e:
        logger.error("Error fetching %s: %s", url, e)
        raise FetchError(f"Error fetching '{url}': {e}.", status=500) from e

    if not resp.ok:
        message = f"Failed to fetch content. Status: {resp.status_code}"
        body = resp.text or ""
        if len(body) < 500:
            message += f". Server message: {body[:200]}"
        raise FetchError(message, status=resp.status_code)

    content = resp.text
    if len(content) > max_bytes:
        raise FetchError(
            f"Content too large to process (max {max_bytes // (1024 * 1024)}MB).",
            status=413,
        )
    return content
