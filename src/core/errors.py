"""Recipe sync exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each stage of the sync pipeline raises a specific error type.
"""

from __future__ import annotations


class RecipeSyncError(Exception):
    """Base exception for all recipe sync failures."""


class RecipeSyncConfigError(RecipeSyncError):
    """Raised for invalid runtime configuration or candidate specs."""


class DiscoveryExhaustedError(RecipeSyncError):
    """Raised when no candidate source yields a recipes file."""


class RecipeFetchError(RecipeSyncError):
    """Raised when every fetch strategy for a resolved location fails."""


class InvalidPayloadError(RecipeSyncError):
    """Raised when dump content is not a top-level JSON array."""


class RecipeStoreError(RecipeSyncError):
    """Raised when output artifacts cannot be written."""
