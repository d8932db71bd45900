"""Recipes dump download.

This module fetches the content of a resolved location by trying,
in order, its direct-download URL, its metadata URL (with base64
envelope decoding), and raw-content mirrors built from the location.
The first attempt whose body parses as a JSON array is accepted.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from core.errors import InvalidPayloadError, RecipeFetchError
from core.logging_config import get_logger
from core.types import FetchedDump, ResolvedLocation
from discovery.http_client import GitHubHttpClient
from discovery.source_urls import raw_fallback_urls
from ingest.dump_reader import parse_recipe_dump

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class _FetchAttempt:
    """One URL to try and how to turn its response into dump text."""

    label: str
    url: str
    api: bool
    decode: Callable[[requests.Response], Optional[str]]


class ContentFetcher:
    """Download recipe dump content for a resolved location."""

    def __init__(self, http_client: GitHubHttpClient, min_payload_bytes: int = 0) -> None:
        self._http = http_client
        self._min_payload_bytes = min_payload_bytes

    def fetch_content(self, location: ResolvedLocation) -> FetchedDump:
        """Fetch and parse the dump at a resolved location.

        Args:
            location: Location produced by the resolver.

        Returns:
            The first accepted payload.

        Raises:
            RecipeFetchError: If every fetch attempt fails.
        """
        attempts = _build_attempts(location)
        for attempt in attempts:
            dump = self._try_attempt(attempt)
            if dump is not None:
                _LOGGER.info(
                    "dump_fetched",
                    source=attempt.label,
                    url=attempt.url,
                    record_count=len(dump.records),
                )
                return dump
        raise RecipeFetchError(
            f"Failed to fetch {location.path} from "
            f"{location.owner}/{location.repository}@{location.branch}: "
            f"all {len(attempts)} fetch attempts failed."
        )

    def _try_attempt(self, attempt: _FetchAttempt) -> FetchedDump | None:
        response = self._http.get(attempt.url, api=attempt.api)
        if response is None:
            return None
        text = attempt.decode(response)
        if text is None:
            _LOGGER.warning("fetch_attempt_undecodable", source=attempt.label, url=attempt.url)
            return None
        payload_size = len(text.encode("utf-8"))
        if payload_size < self._min_payload_bytes:
            _LOGGER.warning(
                "fetch_attempt_truncated",
                source=attempt.label,
                url=attempt.url,
                payload_bytes=payload_size,
                min_payload_bytes=self._min_payload_bytes,
            )
            return None
        try:
            records = parse_recipe_dump(text, attempt.url)
        except InvalidPayloadError as error:
            _LOGGER.warning("fetch_attempt_invalid", source=attempt.label, error=str(error))
            return None
        return FetchedDump(source_url=attempt.url, text=text, records=records)


def _build_attempts(location: ResolvedLocation) -> list[_FetchAttempt]:
    """Build de-duplicated fetch attempts in priority order."""
    attempts: list[_FetchAttempt] = []
    if location.download_url:
        attempts.append(_FetchAttempt("download_url", location.download_url, False, _decode_text))
    if location.metadata_url:
        attempts.append(
            _FetchAttempt("metadata_url", location.metadata_url, True, _decode_envelope)
        )
    mirrors = raw_fallback_urls(
        location.owner, location.repository, location.branch, location.path
    )
    for index, url in enumerate(mirrors):
        attempts.append(_FetchAttempt(f"raw_mirror_{index}", url, False, _decode_text))
    seen_urls: set[str] = set()
    unique_attempts: list[_FetchAttempt] = []
    for attempt in attempts:
        if attempt.url in seen_urls:
            continue
        seen_urls.add(attempt.url)
        unique_attempts.append(attempt)
    return unique_attempts


def _decode_text(response: requests.Response) -> str | None:
    response.encoding = response.encoding or "utf-8"
    return response.text


def _decode_envelope(response: requests.Response) -> str | None:
    """Unwrap a GitHub content envelope, or pass a bare array through."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, list):
        return response.text
    if not isinstance(payload, dict):
        return None
    content = payload.get("content")
    if not isinstance(content, str) or not content:
        return None
    if payload.get("encoding") != "base64":
        return content
    try:
        return base64.b64decode(content).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
