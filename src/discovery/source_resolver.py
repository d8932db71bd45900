"""Candidate source resolution.

This module finds which candidate repository actually holds the
recipes dump. Each candidate goes through an ordered list of
discovery strategies, cheapest first, and the first strategy that
returns a location wins.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Optional, Sequence

from core.constants import (
    DISCOVERY_DIRECTORY_LISTING,
    DISCOVERY_PREFERRED_PATH,
    DISCOVERY_TREE,
    FORMATTED_DIR_NAME,
    RECIPES_FILE_PATTERN,
    RECIPES_TREE_PATH_PATTERN,
)
from core.errors import DiscoveryExhaustedError
from core.logging_config import get_logger
from core.types import CandidateSource, ResolvedLocation
from discovery.http_client import GitHubHttpClient
from discovery.source_urls import contents_api_url, raw_content_url, tree_api_url

_LOGGER = get_logger(__name__)
_RECIPES_NAME = re.compile(RECIPES_FILE_PATTERN, re.IGNORECASE)
_RECIPES_TREE_PATH = re.compile(RECIPES_TREE_PATH_PATTERN, re.IGNORECASE)

DiscoveryStrategy = Callable[[CandidateSource], Optional[ResolvedLocation]]


class SourceResolver:
    """Resolve the first candidate source that contains a recipes file."""

    def __init__(self, http_client: GitHubHttpClient) -> None:
        self._http = http_client
        self._strategies: tuple[DiscoveryStrategy, ...] = (
            self._probe_preferred_path,
            self._discover_from_directory_listing,
            self._discover_from_tree,
        )

    def resolve(self, candidates: Sequence[CandidateSource]) -> ResolvedLocation:
        """Return the location found for the first resolvable candidate.

        Args:
            candidates: Candidate sources in priority order.

        Returns:
            Location of the recipes file.

        Raises:
            DiscoveryExhaustedError: If no candidate yields a location.
        """
        for candidate in candidates:
            for strategy in self._strategies:
                location = strategy(candidate)
                if location is not None:
                    _LOGGER.info(
                        "location_resolved",
                        candidate=candidate.label,
                        path=location.path,
                        discovery_method=location.discovery_method,
                    )
                    return location
            _LOGGER.warning("candidate_exhausted", candidate=candidate.label)
        labels = ", ".join(candidate.label for candidate in candidates) or "<none>"
        raise DiscoveryExhaustedError(
            f"No recipes file found in any candidate source ({labels}). "
            "Check repository names and branches, or set GITHUB_TOKEN if rate limited."
        )

    def _probe_preferred_path(self, candidate: CandidateSource) -> ResolvedLocation | None:
        if not candidate.preferred_path:
            return None
        url = raw_content_url(
            candidate.owner, candidate.repository, candidate.branch, candidate.preferred_path
        )
        response = self._http.get(url, stream=True)
        if response is None:
            return None
        response.close()
        return ResolvedLocation(
            owner=candidate.owner,
            repository=candidate.repository,
            branch=candidate.branch,
            path=candidate.preferred_path,
            download_url=url,
            metadata_url=None,
            discovery_method=DISCOVERY_PREFERRED_PATH,
        )

    def _discover_from_directory_listing(
        self, candidate: CandidateSource
    ) -> ResolvedLocation | None:
        url = contents_api_url(candidate.owner, candidate.repository, FORMATTED_DIR_NAME)
        entries = self._http.get_json(url, params={"ref": candidate.branch})
        if not isinstance(entries, list):
            return None
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            name = entry.get("name")
            if isinstance(name, str) and _RECIPES_NAME.match(name):
                return ResolvedLocation(
                    owner=candidate.owner,
                    repository=candidate.repository,
                    branch=candidate.branch,
                    path=entry.get("path") or f"{FORMATTED_DIR_NAME}/{name}",
                    download_url=entry.get("download_url"),
                    metadata_url=entry.get("url"),
                    discovery_method=DISCOVERY_DIRECTORY_LISTING,
                )
        return None

    def _discover_from_tree(self, candidate: CandidateSource) -> ResolvedLocation | None:
        url = tree_api_url(candidate.owner, candidate.repository, candidate.branch)
        payload = self._http.get_json(url, params={"recursive": "1"})
        if not isinstance(payload, dict) or not isinstance(payload.get("tree"), list):
            return None
        matches = [entry for entry in payload["tree"] if _is_recipes_blob(entry)]
        if not matches:
            return None
        chosen = next((entry for entry in matches if _is_formatted_path(entry["path"])), matches[0])
        return ResolvedLocation(
            owner=candidate.owner,
            repository=candidate.repository,
            branch=candidate.branch,
            path=chosen["path"],
            download_url=None,
            metadata_url=chosen.get("url"),
            discovery_method=DISCOVERY_TREE,
        )


def _is_recipes_blob(entry: Any) -> bool:
    """Return whether a tree entry is a recipes JSON file."""
    if not isinstance(entry, dict) or entry.get("type", "blob") != "blob":
        return False
    path = entry.get("path")
    return isinstance(path, str) and _RECIPES_TREE_PATH.search(path) is not None


def _is_formatted_path(path: str) -> bool:
    lowered = path.lower()
    prefix = f"{FORMATTED_DIR_NAME}/"
    return lowered.startswith(prefix) or f"/{prefix}" in lowered
