"""Public SDK surface for recipe sync.

This module provides a stable import path for library users.
It re-exports the pipeline entry points and typed models.
"""

from __future__ import annotations

from core.config import RecipeSyncConfig
from core.types import (
    ArtifactPaths,
    CandidateSource,
    FlatRow,
    ResolvedLocation,
    SyncOptions,
    SyncResult,
)
from discovery.candidates import DEFAULT_CANDIDATES, parse_candidate_spec
from discovery.content_fetch import ContentFetcher
from discovery.http_client import GitHubHttpClient
from discovery.source_resolver import SourceResolver
from ingest.pipeline import RecipeSyncRunner, sync_recipes
from store.artifact_writer import render_flat_csv, write_artifacts
from transforms.recipe_flattening import normalize_recipes

__all__ = [
    "ArtifactPaths",
    "CandidateSource",
    "ContentFetcher",
    "DEFAULT_CANDIDATES",
    "FlatRow",
    "GitHubHttpClient",
    "RecipeSyncConfig",
    "RecipeSyncRunner",
    "ResolvedLocation",
    "SourceResolver",
    "SyncOptions",
    "SyncResult",
    "normalize_recipes",
    "parse_candidate_spec",
    "render_flat_csv",
    "sync_recipes",
    "write_artifacts",
]
