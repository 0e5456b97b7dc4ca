"""
Template registry: the fixed set of pages loaded once at startup.
"""

import logging

import jinja2

logger = logging.getLogger(__name__)

TEMPLATE_FILES = {
    "index": "index.html",
    "about": "about.html",
    "readme": "readme.html",
    "error": "error.html",
}


def format_location(key: str) -> str:
    """Turn an API location key into display text.

    "north_carolina-usa" -> "North Carolina, USA"
    """
    place, _, country = key.partition("-")
    place = place.replace("_", " ").title()
    if not country:
        return place
    country = country.replace("_", " ")
    # Short country codes (usa, uk) are acronyms
    country = country.upper() if len(country) <= 3 else country.title()
    return f"{place}, {country}"


class TemplateRegistry:
    """Named templates, parsed eagerly so a broken page fails startup."""

    def __init__(self, env: jinja2.Environment, files: dict[str, str] | None = None):
        self._templates: dict[str, jinja2.Template] = {}
        for name, filename in (files or TEMPLATE_FILES).items():
            try:
                self._templates[name] = env.get_template(filename)
            except jinja2.TemplateError as e:
                logger.error(f"Error parsing template {name}: {e}")
                raise
        logger.info(f"Loaded {len(self._templates)} templates")

    def __contains__(self, name: str) -> bool:
        return name in self._templates

    def names(self) -> list[str]:
        return list(self._templates)

    def render(self, name: str, **context) -> str:
        """Render a named template. Raises KeyError for unknown names."""
        return self._templates[name].render(**context)
