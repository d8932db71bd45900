"""Candidate source defaults and parsing.

Order matters: the resolver walks candidates first to last and
stops at the first one that yields a recipes file.
"""

from __future__ import annotations

import re
from typing import Iterable

from core.errors import RecipeSyncConfigError
from core.types import CandidateSource

DEFAULT_CANDIDATES: tuple[CandidateSource, ...] = (
    CandidateSource("ao-data", "ao-bin-dumps", "master", "formatted/recipes.json"),
    CandidateSource("ao-data", "ao-bin-dumps", "main"),
    CandidateSource("broderickhyman", "ao-bin-dumps", "master"),
)

_CANDIDATE_SPEC = re.compile(
    r"^(?P<owner>[\w.-]+)/(?P<repository>[\w.-]+)@(?P<branch>[^:\s]+)(?::(?P<path>\S+))?$"
)


def parse_candidate_spec(spec: str) -> CandidateSource:
    """Parse an ``owner/repo@branch[:path]`` candidate spec.

    Args:
        spec: Candidate spec string from the command line.

    Returns:
        Parsed candidate source.

    Raises:
        RecipeSyncConfigError: If the spec is malformed.
    """
    match = _CANDIDATE_SPEC.match(spec.strip())
    if match is None:
        raise RecipeSyncConfigError(
            f"Invalid candidate '{spec}': expected owner/repo@branch[:path]. "
            "Example: ao-data/ao-bin-dumps@master:formatted/recipes.json"
        )
    path = match.group("path")
    return CandidateSource(
        owner=match.group("owner"),
        repository=match.group("repository"),
        branch=match.group("branch"),
        preferred_path=path.strip("/") if path else None,
    )


def build_candidates(specs: Iterable[str] | None) -> tuple[CandidateSource, ...]:
    """Return parsed candidates, or the defaults when none are given."""
    parsed = tuple(parse_candidate_spec(spec) for spec in specs or ())
    return parsed or DEFAULT_CANDIDATES
