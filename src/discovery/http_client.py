"""HTTP access for discovery and fetch strategies.

This module wraps a ``requests`` session with the identifying headers,
optional token, cache-busting parameter, and per-request timeout.
Failed requests are reported as ``None`` so callers can fall through
to the next strategy without exception handling.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Mapping
from urllib.parse import urlsplit

import requests

from core.config import RecipeSyncConfig
from core.constants import (
    CACHE_BUSTER_PARAM,
    GITHUB_API_ACCEPT,
    TOKEN_HOSTS,
    USER_AGENT,
)
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def _epoch_millis() -> str:
    return str(int(time.time() * 1000))


class GitHubHttpClient:
    """Sequential HTTP client used by the resolver and fetcher."""

    def __init__(
        self,
        config: RecipeSyncConfig,
        session: requests.Session | None = None,
        cache_buster: Callable[[], str] = _epoch_millis,
    ) -> None:
        self._token = config.github_token
        self._timeout = config.request_timeout
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT})
        self._cache_buster = cache_buster

    def get(
        self,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        api: bool = False,
        stream: bool = False,
    ) -> requests.Response | None:
        """Issue a GET request and return the response on 2xx.

        Args:
            url: Absolute URL to request.
            params: Extra query parameters.
            api: Whether to send the GitHub API ``Accept`` header.
            stream: Whether to defer body download.

        Returns:
            The successful response, or None on non-2xx, timeout,
            or connection failure.
        """
        query = dict(params or {})
        query[CACHE_BUSTER_PARAM] = self._cache_buster()
        try:
            response = self._session.get(
                url,
                params=query,
                headers=self._build_headers(url, api),
                timeout=self._timeout,
                stream=stream,
            )
        except requests.Timeout:
            _LOGGER.warning("http_request_timeout", url=url, timeout=self._timeout)
            return None
        except requests.RequestException as error:
            _LOGGER.warning("http_request_failed", url=url, error=str(error))
            return None
        if not response.ok:
            _LOGGER.warning("http_status_rejected", url=url, status_code=response.status_code)
            response.close()
            return None
        return response

    def get_json(self, url: str, *, params: Mapping[str, str] | None = None) -> Any | None:
        """Request a metadata API URL and decode its JSON body.

        Returns:
            Decoded JSON, or None when the request or decoding fails.
        """
        response = self.get(url, params=params, api=True)
        if response is None:
            return None
        try:
            return response.json()
        except ValueError:
            _LOGGER.warning("http_json_invalid", url=url)
            return None

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    def _build_headers(self, url: str, api: bool) -> dict[str, str]:
        headers: dict[str, str] = {}
        if api:
            headers["Accept"] = GITHUB_API_ACCEPT
        if self._token and urlsplit(url).hostname in TOKEN_HOSTS:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers
