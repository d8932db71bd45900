"""Recipe sync pipeline.

This module parses raw dumps and orchestrates discovery, flattening,
and artifact writes for a sync run.
"""
