"""Groupie Tracker: artists and their tour dates, rendered server-side."""

__version__ = "1.0.0"
