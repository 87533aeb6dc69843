"""
API Client - Shared data-fetch configuration for the remote blog API

One FetchConfig is built at startup and passed to the ApiClient, which every
service uses for outbound reads. The config carries the fetcher function, the
error callback and the retry policy.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

import requests
from requests.adapters import HTTPAdapter

Fetcher = Callable[..., Any]
ErrorCallback = Callable[[Exception, str], None]


class ApiError(Exception):
    """Raised when a request to the blog API cannot produce a JSON body."""

    def __init__(self, message: str, key: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.key = key
        self.status_code = status_code


@dataclass(frozen=True)
class FetchConfig:
    """
    Application-wide fetch policy.

    Attributes:
        fetcher: Callable ``(key, params=None, token=None) -> dict``
        on_error: Called with ``(error, key)`` whenever a fetch fails
        should_retry_on_error: Whether failed fetches are attempted again
        error_retry_count: Extra attempts when retrying is enabled
    """
    fetcher: Fetcher
    on_error: Optional[ErrorCallback] = None
    should_retry_on_error: bool = False
    error_retry_count: int = 0


def make_requests_fetcher(base_url: str, timeout: float,
                          session: Optional[requests.Session] = None) -> Fetcher:
    """
    Build the default fetcher backed by a requests Session.

    Transport-level retries are switched off; retrying is decided by
    FetchConfig only.

    Args:
        base_url: API root, e.g. ``https://api.example.com/api``
        timeout: Per-request timeout in seconds
        session: Optional pre-built session (useful for tests)

    Returns:
        Fetcher returning the decoded JSON body
    """
    if session is None:
        session = requests.Session()
        adapter = HTTPAdapter(max_retries=0)
        session.mount('http://', adapter)
        session.mount('https://', adapter)
        session.headers.update({'Accept': 'application/json'})

    base_url = base_url.rstrip('/')

    def fetcher(key: str, params: Optional[dict] = None, token: Optional[str] = None) -> Any:
        headers = {}
        if token:
            headers['Authorization'] = f'Bearer {token}'

        try:
            response = session.get(
                f"{base_url}{key}",
                params=params,
                headers=headers,
                timeout=timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            raise ApiError(str(e), key, status_code=e.response.status_code) from e
        except requests.RequestException as e:
            raise ApiError(str(e), key) from e

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {key}", key, status_code=response.status_code) from e

    return fetcher


class ApiClient:
    """Reads from the blog API under a single FetchConfig."""

    def __init__(self, config: FetchConfig):
        self.config = config

    def get(self, key: str, params: Optional[dict] = None, token: Optional[str] = None) -> Any:
        """
        Fetch ``key`` and return the decoded body.

        The error callback runs once per failed attempt; the last error is
        re-raised to the caller.
        """
        attempts = 1
        if self.config.should_retry_on_error:
            attempts += max(0, self.config.error_retry_count)

        for attempt in range(attempts):
            try:
                return self.config.fetcher(key, params=params, token=token)
            except Exception as e:
                if self.config.on_error is not None:
                    self.config.on_error(e, key)
                if attempt == attempts - 1:
                    raise
