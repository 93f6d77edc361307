"""Thin httpx wrapper for downloading raw CI job logs."""

from __future__ import annotations

import httpx


class FetchError(Exception):
    """Base error for log download failures."""


class FetchConnectionError(FetchError):
    """Log server is not reachable."""


class LogNotFoundError(FetchError):
    """Requested log does not exist."""


class FetchTimeoutError(FetchError):
    """Log download timed out."""


class LogFetcher:
    """Downloads raw (ANSI-colored) log text over HTTP.

    Args:
        timeout: Timeout in seconds for each request.
        headers: Extra request headers, e.g. an Authorization token.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.timeout = timeout
        self.headers = dict(headers or {})

    def fetch(self, url: str) -> str:
        """GET *url* and return the decoded body."""
        try:
            resp = httpx.get(
                url,
                headers=self.headers,
                timeout=self.timeout,
                follow_redirects=True,
            )
        except httpx.ConnectError as e:
            raise FetchConnectionError(f"Cannot connect to {url}") from e
        except httpx.TimeoutException as e:
            raise FetchTimeoutError(f"Request to {url} timed out") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise FetchError(f"Fetching {url} failed: {e}") from e

        if resp.status_code == 404:
            raise LogNotFoundError(f"Log not found: {url}")
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(f"Fetching {url} failed with HTTP {resp.status_code}") from e

        text: str = resp.text
        return text
