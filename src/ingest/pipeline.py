"""Sync orchestration for recipe dumps.

This module coordinates source resolution, download, flattening,
and artifact writes. A local raw dump can stand in for the network
stages when re-flattening a previous download.
"""

from __future__ import annotations

from typing import Any

import requests

from core.config import RecipeSyncConfig
from core.logging_config import get_logger
from core.types import FlatRow, ResolvedLocation, SyncOptions, SyncResult
from discovery.content_fetch import ContentFetcher
from discovery.http_client import GitHubHttpClient
from discovery.source_resolver import SourceResolver
from ingest.dump_reader import read_local_dump
from store.artifact_writer import write_artifacts
from transforms.recipe_flattening import normalize_recipes

_LOGGER = get_logger(__name__)


class RecipeSyncRunner:
    """Runner for one end-to-end sync execution."""

    def __init__(
        self,
        options: SyncOptions,
        config: RecipeSyncConfig,
        session: requests.Session | None = None,
    ) -> None:
        self._options = options
        self._config = config
        self._session = session

    def run(self) -> SyncResult:
        """Execute the sync and return a summary of written artifacts.

        Raises:
            DiscoveryExhaustedError: If no candidate yields a recipes file.
            RecipeFetchError: If the resolved file cannot be downloaded.
            InvalidPayloadError: If a local dump is not a JSON array.
            RecipeStoreError: If artifacts cannot be written.
        """
        location, source_url, raw_records = self._load_raw_records()
        rows = normalize_recipes(raw_records)
        artifacts = write_artifacts(self._config.data_dir, raw_records, rows)
        result = SyncResult(
            location=location,
            source_url=source_url,
            raw_record_count=len(raw_records),
            flat_row_count=len(rows),
            artifacts=artifacts,
        )
        _log_sync_completion(result, rows)
        return result

    def resolve_location(self) -> ResolvedLocation:
        """Resolve the candidate location without downloading it."""
        http_client = self._build_http_client()
        try:
            return SourceResolver(http_client).resolve(self._options.candidates)
        finally:
            http_client.close()

    def _load_raw_records(self) -> tuple[ResolvedLocation | None, str, list[Any]]:
        if self._options.source_file is not None:
            source_path = self._options.source_file
            return None, str(source_path), read_local_dump(source_path)
        http_client = self._build_http_client()
        try:
            location = SourceResolver(http_client).resolve(self._options.candidates)
            fetcher = ContentFetcher(http_client, self._config.min_payload_bytes)
            dump = fetcher.fetch_content(location)
        finally:
            http_client.close()
        return location, dump.source_url, dump.records

    def _build_http_client(self) -> GitHubHttpClient:
        return GitHubHttpClient(self._config, session=self._session)


def sync_recipes(options: SyncOptions, config: RecipeSyncConfig) -> SyncResult:
    """Run the recipe sync pipeline and persist artifacts.

    Args:
        options: Sync request options.
        config: Runtime configuration.

    Returns:
        Summary of the completed run.
    """
    return RecipeSyncRunner(options, config).run()


def _log_sync_completion(result: SyncResult, rows: list[FlatRow]) -> None:
    """Log pipeline completion with contextual metadata."""
    location = result.location
    _LOGGER.info(
        "recipe_sync_completed",
        source_url=result.source_url,
        discovery_method=location.discovery_method if location else "local_file",
        raw_record_count=result.raw_record_count,
        flat_row_count=result.flat_row_count,
        recipe_count=len({row.output_id for row in rows}),
        data_dir=str(result.artifacts.raw_path.parent),
    )
