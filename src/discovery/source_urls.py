"""URL builders for GitHub hosts and mirrors."""

from __future__ import annotations

from urllib.parse import quote

from core.constants import (
    GITHUB_API_BASE,
    GITHUB_WEB_BASE,
    JSDELIVR_CDN_BASE,
    RAW_CONTENT_BASE,
)


def raw_content_url(owner: str, repository: str, branch: str, path: str) -> str:
    """Return the primary raw-content URL for a repository file."""
    return f"{RAW_CONTENT_BASE}/{owner}/{repository}/{branch}/{_quote_path(path)}"


def raw_fallback_urls(owner: str, repository: str, branch: str, path: str) -> list[str]:
    """Return raw-content URLs in fallback order: primary, web mirror, CDN."""
    quoted_path = _quote_path(path)
    return [
        raw_content_url(owner, repository, branch, path),
        f"{GITHUB_WEB_BASE}/{owner}/{repository}/raw/{branch}/{quoted_path}",
        f"{JSDELIVR_CDN_BASE}/{owner}/{repository}@{branch}/{quoted_path}",
    ]


def contents_api_url(owner: str, repository: str, directory: str) -> str:
    """Return the contents API URL listing a repository directory."""
    return f"{GITHUB_API_BASE}/repos/{owner}/{repository}/contents/{_quote_path(directory)}"


def tree_api_url(owner: str, repository: str, branch: str) -> str:
    """Return the git trees API URL for a branch."""
    return f"{GITHUB_API_BASE}/repos/{owner}/{repository}/git/trees/{quote(branch, safe='')}"


def _quote_path(path: str) -> str:
    return quote(path.strip("/"), safe="/")
