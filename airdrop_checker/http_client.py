"""
http_client.py - HTTP Client for the Airdrop API
================================================
This module handles all HTTP communication with the airdrop site, including:
- Sending the browser-like headers the site expects
- Making GET requests with automatic retry on any failure
- Decoding JSON bodies

Features:
---------
- Retry on network errors, non-2xx responses and non-JSON bodies
- Linear backoff between retries (delay * attempt number)
- Configurable timeouts
- Raises NetworkError once every attempt has failed
"""

import logging
import time
from typing import Any

import requests

from .config import Settings
from .errors import NetworkError


logger = logging.getLogger(__name__)


# =============================================================================
# REQUEST HEADERS
# =============================================================================
# The eligibility endpoint sits behind the site's frontend, so requests look
# like the XHR calls a desktop Chrome would make from the /flow page.

BROWSER_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.9",
    "clq-app-id": "0g",
    "DNT": "1",
    "Priority": "u=1, i",
    "Referer": "https://airdrop.0gfoundation.ai/flow",
    "Sec-Ch-Ua": '"Chromium";v="140", "Not=A?Brand";v="24", "Google Chrome";v="140"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"Windows"',
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "same-origin",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/140.0.0.0 Safari/537.36"
    ),
    "X-Kl-Saas-Ajax-Request": "Ajax_Request",
}


# =============================================================================
# HTTP CLIENT CLASS
# =============================================================================

class HttpClient:
    """
    HTTP client for the airdrop site.

    Usage:
        with HttpClient(settings) as client:
            data = client.get_json("/api/eligibility", {"walletAddresses": "0x..."})
    """

    def __init__(self, settings: Settings):
        """
        Initialize the HTTP client.

        Args:
            settings: Configuration object containing base URL, timeout and retry settings
        """
        self.settings = settings

        # A Session reuses the connection across retries
        self.s = requests.Session()
        self.s.headers.update(BROWSER_HEADERS)

        self.base = settings.base_url
        self.timeout = settings.timeout_sec
        self.max_retries = settings.max_retries
        self.retry_delay = settings.retry_delay_sec

    # -------------------------------------------------------------------------
    # API REQUEST METHODS
    # -------------------------------------------------------------------------

    def _attempt(self, url: str, params: dict | None, decode: bool = True) -> Any:
        """Make one GET request (and decode it), raising on any failure."""
        r = self.s.get(url, params=params, timeout=self.timeout)

        if not r.ok:
            raise NetworkError(f"HTTP {r.status_code}: {r.reason or ''}".rstrip())

        if not decode:
            return r.text

        try:
            return r.json()
        except ValueError as e:
            raise NetworkError(f"Invalid JSON response: {e}") from e

    def get_json(self, path: str, params: dict | None = None, decode: bool = True) -> Any:
        """
        Make a GET request to an API path with automatic retry.

        Args:
            path: The API path (e.g., "/api/eligibility")
            params: Optional query parameters (e.g., {"walletAddresses": "0x..."})
            decode: Set to False to accept any 2xx body and return it as text

        Returns:
            The decoded JSON body (or the raw text when decode=False)

        Raises:
            NetworkError: If every attempt failed. The message is the last
                failure (e.g. "HTTP 503: Service Unavailable").

        Example:
            data = client.get_json("/api/eligibility", {"walletAddresses": "0xabc...,0xdef..."})
        """
        url = f"{self.base}{path}"

        # Total attempts = 1 initial + max_retries
        for attempt in range(self.max_retries + 1):
            try:
                data = self._attempt(url, params, decode)
                logger.debug(f"GET {path} succeeded on attempt {attempt + 1}")
                return data

            except (requests.RequestException, NetworkError) as e:
                if isinstance(e, NetworkError):
                    error = e
                else:
                    error = NetworkError(f"{type(e).__name__}: {e}")
                    error.__cause__ = e

                if attempt >= self.max_retries:
                    raise error

                # Linear backoff: 1x, 2x, 3x ... the base delay
                wait_time = self.retry_delay * (attempt + 1)
                logger.warning(
                    f"[{error}] Retrying {path} in {wait_time:.2f}s "
                    f"(Attempt {attempt + 1}/{self.max_retries})..."
                )
                time.sleep(wait_time)

        # Only reachable with a negative max_retries
        raise NetworkError("Max retries exceeded unexpectedly")

    # -------------------------------------------------------------------------
    # CLEANUP METHODS
    # -------------------------------------------------------------------------

    def close(self):
        """Close the HTTP session and release its connections."""
        self.s.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
