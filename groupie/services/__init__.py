"""Groupie Tracker Services Package."""

from groupie.services.api_client import FetchError, GroupieClient

__all__ = ["FetchError", "GroupieClient"]
