"""Async client for the Crowdin REST API v2."""

__version__ = "0.1.0"
