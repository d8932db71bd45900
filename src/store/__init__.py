"""Artifact storage layer.

This module persists the raw dump and its flattened JSON and CSV
renderings into the configured data directory.
"""
