"""URL handling for counting remote text."""

import io
from dataclasses import dataclass

import requests

# Default timeout for HTTP requests (in seconds)
DEFAULT_TIMEOUT = 30

# Default headers for HTTP requests
DEFAULT_HEADERS = {
    "User-Agent": "wordcount/1.0 (Token frequency counter)",
}


def is_url(path: str) -> bool:
    """Check if a path is an HTTP/HTTPS URL.

    Args:
        path: Path string to check.

    Returns:
        True if the path starts with http:// or https://.
    """
    return path.startswith("http://") or path.startswith("https://")


@dataclass
class UrlFetchResult:
    """Result of fetching a URL."""

    success: bool
    content: bytes | None
    error: str | None = None


def fetch_url(url: str, timeout: int = DEFAULT_TIMEOUT) -> UrlFetchResult:
    """Download the body of a URL into memory.

    The body is returned as raw bytes; decoding is left to the line source
    so that invalid UTF-8 is reported the same way as for local files.

    Args:
        url: The URL to fetch.
        timeout: Request timeout in seconds.

    Returns:
        UrlFetchResult with success status and body bytes.
    """
    try:
        response = requests.get(url, timeout=timeout, headers=DEFAULT_HEADERS)
        response.raise_for_status()
        return UrlFetchResult(success=True, content=response.content)
    except requests.RequestException as e:
        return UrlFetchResult(success=False, content=None, error=str(e))


def open_url_source(url: str, timeout: int = DEFAULT_TIMEOUT) -> io.BytesIO:
    """Fetch a URL and return its body as a binary line source.

    Raises:
        RuntimeError: If the download fails.
    """
    result = fetch_url(url, timeout=timeout)
    if not result.success or result.content is None:
        raise RuntimeError(f"Failed to download URL {url}: {result.error}")
    return io.BytesIO(result.content)
