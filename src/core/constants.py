"""Core constants used across recipe sync modules.

This module centralizes hosts, file names, and tunable defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_DIR = Path("data")
DEFAULT_REQUEST_TIMEOUT_SECONDS = 15.0
DEFAULT_MIN_PAYLOAD_BYTES = 0
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

USER_AGENT = "AlbionRecipesSync/1.0"
GITHUB_API_ACCEPT = "application/vnd.github+json"
CACHE_BUSTER_PARAM = "_"

GITHUB_API_BASE = "https://api.github.com"
RAW_CONTENT_BASE = "https://raw.githubusercontent.com"
GITHUB_WEB_BASE = "https://github.com"
JSDELIVR_CDN_BASE = "https://cdn.jsdelivr.net/gh"
TOKEN_HOSTS = ("api.github.com", "github.com", "raw.githubusercontent.com")

FORMATTED_DIR_NAME = "formatted"
RECIPES_FILE_PATTERN = r"^recipes.*\.json$"
RECIPES_TREE_PATH_PATTERN = r"(?:^|/)recipes[^/]*\.json$"

RAW_DUMP_FILE_NAME = "recipes.json"
FLAT_JSON_FILE_NAME = "recipes.flat.json"
FLAT_CSV_FILE_NAME = "recipes.flat.csv"
FLAT_CSV_HEADER = (
    "OUTPUT_ID",
    "OUTPUT_QTY",
    "INPUT_ID",
    "INPUT_QTY",
    "STATION",
    "FOCUS_BASED",
)

DISCOVERY_PREFERRED_PATH = "preferred_path"
DISCOVERY_DIRECTORY_LISTING = "directory_listing"
DISCOVERY_TREE = "tree"
