"""Shared typed models.

This module defines immutable data models used by discovery, transforms,
store, and pipeline layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class CandidateSource:
    """One remote repository location to try for the recipes dump.

    Attributes:
        owner: Repository owner or organization.
        repository: Repository name.
        branch: Branch or ref to read from.
        preferred_path: Optional exact file path inside the repository.
    """

    owner: str
    repository: str
    branch: str
    preferred_path: str | None = None

    @property
    def label(self) -> str:
        """Return a compact ``owner/repo@branch`` label for logs."""
        return f"{self.owner}/{self.repository}@{self.branch}"


@dataclass(frozen=True)
class ResolvedLocation:
    """Location of a recipes file found by discovery.

    Attributes:
        owner: Repository owner or organization.
        repository: Repository name.
        branch: Branch or ref the file was found on.
        path: File path inside the repository.
        download_url: Optional direct-download URL.
        metadata_url: Optional metadata API URL returning a content envelope.
        discovery_method: Strategy that produced this location.
    """

    owner: str
    repository: str
    branch: str
    path: str
    download_url: str | None
    metadata_url: str | None
    discovery_method: str


@dataclass(frozen=True)
class FetchedDump:
    """Accepted dump payload.

    Attributes:
        source_url: URL the payload was read from.
        text: Raw response text.
        records: Parsed top-level JSON array.
    """

    source_url: str
    text: str
    records: list[Any]


@dataclass(frozen=True)
class FlatRow:
    """Canonical single-ingredient recipe row.

    Attributes:
        output_id: Crafted item identifier, never empty.
        output_qty: Produced quantity, at least 1.
        input_id: Ingredient identifier, empty for ingredient-less recipes.
        input_qty: Ingredient quantity, 0 for ingredient-less recipes.
        station: Crafting station or category.
        focus_based: Whether crafting requires focus.
    """

    output_id: str
    output_qty: int
    input_id: str
    input_qty: int
    station: str
    focus_based: bool


@dataclass(frozen=True)
class ArtifactPaths:
    """Paths of the three written artifacts."""

    raw_path: Path
    flat_json_path: Path
    flat_csv_path: Path


@dataclass(frozen=True)
class SyncOptions:
    """Options controlling one sync run.

    Attributes:
        candidates: Ordered candidate sources, first success wins.
        source_file: Optional local raw dump replacing network discovery.
    """

    candidates: tuple[CandidateSource, ...]
    source_file: Path | None = None


@dataclass(frozen=True)
class SyncResult:
    """Outcome of a completed sync run."""

    location: ResolvedLocation | None
    source_url: str
    raw_record_count: int
    flat_row_count: int
    artifacts: ArtifactPaths
