"""Groupie Tracker web layer: aiohttp app, Jinja2 templates, routes."""
