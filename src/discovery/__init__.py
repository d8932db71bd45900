"""Remote source discovery and fetching.

This module locates the recipes dump across candidate repositories
and downloads it through an ordered chain of fetch strategies.
"""
