"""Helpers for a media player shell: paths, window and screen geometry, key names and media controls."""

__version__ = "0.1.0"